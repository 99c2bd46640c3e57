"""RouteDescriptor frozen dataclass and the standard action names."""

from dataclasses import dataclass

# Actions that operate on a whole collection (scope/order/pagination only)
COLLECTION_ACTIONS: tuple[str, ...] = ("all", "first", "last", "count")

# Actions bound to a single record (additionally send its attributes)
MEMBER_ACTIONS: tuple[str, ...] = ("create", "update", "delete")

ACTIONS: tuple[str, ...] = COLLECTION_ACTIONS + MEMBER_ACTIONS


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """A frozen route table entry.

    Maps a ``(model_name, action)`` pair to an HTTP method and a URL
    template. The template may contain an identifier placeholder such as
    ``{id}``, substituted when the request targets a persisted record.

    ``method`` of ``None`` means "unspecified"; the connector falls back to
    its configured default (``POST``). ``domain`` overrides the router root
    for this route only.
    """

    model_name: str
    action: str
    url: str
    method: str | None = None
    identifier: str = "id"
    domain: str | None = None

    @property
    def key(self) -> tuple[str, str]:
        """The lookup key of this route."""
        return (self.model_name, self.action)
