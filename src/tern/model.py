"""Model records and their static configuration.

A model class pairs a frozen ``ModelConfig`` (name, identifier field,
default scope and order, pagination, route naming) with instances that
hold a plain attribute mapping. The connector only ever reads the config
and the attributes. There is no schema, validation, or dirty tracking.

Usage::

    class User(Model, fields=("id", "name", "email")):
        pass

    class Post(Model, table_name="articles", version="v2"):
        pass

    user = User(name="Alice")
    user.is_new        # True
    user.attributes    # {"id": None, "name": "Alice", "email": None}
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from typing import Any, ClassVar

from tern._internal.inflect import table_name as _default_table_name
from tern.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ModelConfig:
    """Static configuration of a model class. Immutable after creation.

    ``skip`` and ``limit`` of ``0`` mean "no pagination constraint".
    ``default_scope`` and ``default_order`` of ``None`` are sent as ``{}``.

    Route naming:
        ``table_name`` defaults to the lower-cased plural of ``model_name``.
        ``domain`` overrides the router root for this model's routes.
        ``path`` and ``version`` prefix the table segment.
        ``postfix`` is appended to the last segment (e.g. ``".json"``).
    """

    model_name: str
    identifier: str = "id"
    fields: tuple[str, ...] = ()
    default_scope: Mapping[str, Any] | None = None
    default_order: Mapping[str, Any] | None = None
    skip: int = 0
    limit: int = 0
    table_name: str | None = None
    domain: str | None = None
    path: str | None = None
    version: str | None = None
    postfix: str | None = None

    @property
    def table(self) -> str:
        """The collection name used in route URLs."""
        return self.table_name or _default_table_name(self.model_name)

    # ── Derivation ───────────────────────────────────────────────────────

    def scoped(self, scope: Mapping[str, Any] | None) -> ModelConfig:
        """Return a copy with ``default_scope`` replaced."""
        return replace(self, default_scope=scope)

    def ordered(self, order: Mapping[str, Any] | None) -> ModelConfig:
        """Return a copy with ``default_order`` replaced."""
        return replace(self, default_order=order)

    def paginated(self, *, skip: int = 0, limit: int = 0) -> ModelConfig:
        """Return a copy with ``skip`` and ``limit`` replaced.

        ::

            config.paginated(skip=40, limit=20)  # page 3
        """
        if skip < 0 or limit < 0:
            msg = f"skip and limit must be >= 0, got skip={skip}, limit={limit}"
            raise ValueError(msg)
        return replace(self, skip=skip, limit=limit)


def model_config(model_cls: type) -> ModelConfig:
    """Return the ``ModelConfig`` of *model_cls*.

    Raises ``ConfigurationError`` if the class carries no usable config.
    """
    config = getattr(model_cls, "config", None)
    if not isinstance(config, ModelConfig):
        msg = (
            f"{getattr(model_cls, '__name__', model_cls)!r} has no ModelConfig. "
            "Subclass tern.Model or set a 'config' class attribute."
        )
        raise ConfigurationError(msg)
    return config


class Model:
    """Base class for records persisted through a ``Connector``.

    Subclasses get a ``ModelConfig`` named after the class unless they set
    ``config`` themselves. The config is inherited from the nearest model
    base and renamed. Config fields can also be passed as class keywords::

        class ApiModel(Model, domain="https://api.example.com", identifier="uuid"):
            pass

        class User(ApiModel, fields=("uuid", "name")):
            pass  # keeps domain and identifier

    Field values are reachable as attributes (``user.name``) and items
    (``user["name"]``). Declared ``fields`` start out as ``None``.
    """

    config: ClassVar[ModelConfig]

    __slots__ = ("_attributes",)

    def __init_subclass__(cls, /, **options: Any) -> None:
        super().__init_subclass__()
        if "config" in cls.__dict__:
            if options:
                msg = f"{cls.__name__} sets 'config' and class keywords {sorted(options)}; use one."
                raise ConfigurationError(msg)
            return
        options.setdefault("model_name", cls.__name__)
        inherited = getattr(cls, "config", None)
        try:
            if isinstance(inherited, ModelConfig):
                cls.config = replace(inherited, **options)
            else:
                cls.config = ModelConfig(**options)
        except TypeError as exc:
            raise ConfigurationError(f"Invalid model options for {cls.__name__}: {exc}") from exc

    def __init__(self, attributes: Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        data: dict[str, Any] = dict.fromkeys(self.config.fields)
        if attributes:
            data.update(attributes)
        data.update(fields)
        object.__setattr__(self, "_attributes", data)

    # ── Identity ─────────────────────────────────────────────────────────

    @property
    def identity(self) -> Any:
        """Value of the identifier field, or ``None`` if unassigned."""
        return self._attributes.get(self.config.identifier)

    @identity.setter
    def identity(self, value: Any) -> None:
        self._attributes[self.config.identifier] = value

    @property
    def is_new(self) -> bool:
        """True until the record has an identifier."""
        return self.identity is None

    @property
    def is_persisted(self) -> bool:
        return not self.is_new

    # ── Attribute access ─────────────────────────────────────────────────

    @property
    def attributes(self) -> dict[str, Any]:
        """A copy of the full attribute mapping, ``None`` values included."""
        return dict(self._attributes)

    def __getattr__(self, name: str) -> Any:
        if name == "_attributes" or name.startswith("__"):
            raise AttributeError(name)
        try:
            return self._attributes[name]
        except KeyError:
            msg = f"{type(self).__name__!r} record has no attribute {name!r}"
            raise AttributeError(msg) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_attributes" or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            self._attributes[name] = value

    def __getitem__(self, key: str) -> Any:
        return self._attributes[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._attributes[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._attributes == other._attributes  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in self._attributes.items())
        return f"{type(self).__name__}({items})"
