"""Routing: route table keyed by (model name, action).

Routes are registered during setup and frozen before the connector
dispatches requests.
"""

from tern.routing.route import ACTIONS, COLLECTION_ACTIONS, MEMBER_ACTIONS, RouteDescriptor
from tern.routing.router import Router

__all__ = [
    "ACTIONS",
    "COLLECTION_ACTIONS",
    "MEMBER_ACTIONS",
    "RouteDescriptor",
    "Router",
]
