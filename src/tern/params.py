"""Request parameter building.

Every request carries the model's scope, order, and pagination. Requests
bound to a single record also carry its attributes. Structured values are
sent as JSON text so the server receives the same shape whether the
parameters travel in the body or the query string.
"""

import json
from collections.abc import Mapping
from typing import Any

from tern.model import Model, ModelConfig


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def scope_params(config: ModelConfig) -> dict[str, Any]:
    """Collection parameters for *config*.

    Unset scope and order are sent as ``"{}"``, never omitted. ``skip``
    and ``limit`` of ``0`` mean "no constraint".
    """
    return {
        "scope": _to_json(dict(config.default_scope or {})),
        "order": _to_json(dict(config.default_order or {})),
        "skip": config.skip or 0,
        "limit": config.limit or 0,
    }


def item_params(record: Model | Mapping[str, Any]) -> dict[str, str]:
    """Record parameters: the full attribute mapping as JSON text."""
    attributes = record.attributes if isinstance(record, Model) else dict(record)
    return {"attributes": _to_json(attributes)}


def build_params(config: ModelConfig, record: Model | None = None) -> dict[str, Any]:
    """Scope parameters, plus ``attributes`` when *record* is given."""
    params = scope_params(config)
    if record is not None:
        params.update(item_params(record))
    return params
