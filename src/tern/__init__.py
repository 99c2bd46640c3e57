"""Tern: async REST persistence for model classes.

Lets a model class delegate list, first/last, count, create, update, and
delete to a remote HTTP API described by a route table. One call, one
request, records out.

Basic usage::

    from tern import Connector, Model, Router

    class User(Model, fields=("id", "name")):
        pass

    router = Router("https://api.example.com")
    router.resource(User)
    connector = Connector(router)

    users = await connector.fetch_all(User)
    user = await connector.save(User(name="Alice"))
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Connector",
    "ConnectorConfig",
    "MalformedResponseError",
    "Model",
    "ModelConfig",
    "PreparedRequest",
    "RouteDescriptor",
    "RouteNotFoundError",
    "Router",
    "TernError",
    "Transport",
    "TransportError",
]


# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "tern.errors",
    "Connector": "tern.connector",
    "ConnectorConfig": "tern.config",
    "MalformedResponseError": "tern.errors",
    "Model": "tern.model",
    "ModelConfig": "tern.model",
    "PreparedRequest": "tern.transport",
    "RouteDescriptor": "tern.routing.route",
    "RouteNotFoundError": "tern.errors",
    "Router": "tern.routing.router",
    "TernError": "tern.errors",
    "Transport": "tern.transport",
    "TransportError": "tern.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import tern`` fast and avoids importing httpx until a
    connector or transport is actually needed.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
