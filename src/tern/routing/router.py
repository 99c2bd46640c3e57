"""Route table keyed by (model name, action).

Routes are registered during setup and frozen with ``compile()`` before
the connector starts dispatching. After that the table is read-only and
safe to share between concurrent calls.
"""

from collections.abc import Iterable, Mapping

from tern.errors import ConfigurationError, RouteNotFoundError
from tern.model import ModelConfig, model_config
from tern.routing.route import ACTIONS, RouteDescriptor
from tern.routing.urls import join_path, placeholder, trim_slashes

# Conventional REST methods used by ``Router.resource()``
DEFAULT_METHODS: dict[str, str | None] = {
    "all": "GET",
    "first": "GET",
    "last": "GET",
    "count": "GET",
    "create": "POST",
    "update": "PUT",
    "delete": "DELETE",
}


def resource_url(config: ModelConfig, action: str) -> str:
    """Build the URL template of a standard *action* for *config*.

    ::

        /<path>/<version>/<table>           all, create
        /<path>/<version>/<table>/first     first (also last, count)
        /<path>/<version>/<table>/{id}      update, delete

    ``postfix`` is appended to the final segment.
    """
    if action in ("all", "create"):
        url = join_path(config.path, config.version, config.table)
    elif action in ("first", "last", "count"):
        url = join_path(config.path, config.version, config.table, action)
    elif action in ("update", "delete"):
        url = join_path(config.path, config.version, config.table, placeholder(config.identifier))
    else:
        msg = f"Unknown standard action {action!r}. Expected one of: {', '.join(ACTIONS)}"
        raise ConfigurationError(msg)
    if config.postfix:
        url += trim_slashes(config.postfix)
    return url


class Router:
    """Ordered route table with (model name, action) lookup.

    Usage::

        router = Router("https://api.example.com")
        router.resource(User)
        router.add(RouteDescriptor("User", "search", "/users/search"))
        router.compile()
        route = router.lookup("User", "all")
    """

    __slots__ = ("_compiled", "_index", "_routes", "root")

    def __init__(self, root: str = "", routes: Iterable[RouteDescriptor] = ()) -> None:
        self.root = root
        self._routes: list[RouteDescriptor] = []
        self._index: dict[tuple[str, str], RouteDescriptor] = {}
        self._compiled = False
        for route in routes:
            self.add(route)

    def add(self, route: RouteDescriptor) -> None:
        """Add a route to the table. Must be called before compile()."""
        self._check_new([route])
        self._routes.append(route)
        self._index[route.key] = route

    def _check_new(self, routes: list[RouteDescriptor]) -> None:
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise ConfigurationError(msg)
        taken = set(self._index)
        for route in routes:
            if route.key in taken:
                msg = f"Duplicate route for {route.model_name!r} action {route.action!r}"
                raise ConfigurationError(msg)
            taken.add(route.key)

    def resource(
        self,
        model: ModelConfig | type,
        *,
        only: Iterable[str] | None = None,
        methods: Mapping[str, str | None] | None = None,
    ) -> list[RouteDescriptor]:
        """Register the standard actions for a model and return the new routes.

        *model* is a ``ModelConfig`` or a model class carrying one.
        *only* restricts the generated actions; *methods* overrides the
        HTTP method per action (``None`` leaves it unspecified, i.e. POST).

        Unlike hand-written routes, which default to POST, generated routes
        use REST methods (``DEFAULT_METHODS``) so that ``all`` and ``create``
        on the same URL stay distinct. Pass ``methods={"all": None, ...}``
        for the all-POST style.

        Nothing is registered unless every route can be added.
        """
        config = model if isinstance(model, ModelConfig) else model_config(model)
        actions = tuple(only) if only is not None else ACTIONS
        overrides = dict(methods or {})
        unknown = set(overrides) - set(actions)
        if unknown:
            msg = f"Method overrides for actions not being generated: {sorted(unknown)}"
            raise ConfigurationError(msg)

        added = [
            RouteDescriptor(
                model_name=config.model_name,
                action=action,
                url=resource_url(config, action),
                method=overrides.get(action, DEFAULT_METHODS.get(action)),
                identifier=config.identifier,
                domain=config.domain,
            )
            for action in actions
        ]
        self._check_new(added)
        for route in added:
            self._routes.append(route)
            self._index[route.key] = route
        return added

    @property
    def routes(self) -> tuple[RouteDescriptor, ...]:
        """All registered routes, in insertion order."""
        return tuple(self._routes)

    @property
    def compiled(self) -> bool:
        return self._compiled

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def lookup(self, model_name: str, action: str) -> RouteDescriptor:
        """Return the route for *model_name* and *action*.

        Raises ``RouteNotFoundError`` if the table has no such entry.
        """
        try:
            return self._index[(model_name, action)]
        except KeyError:
            raise RouteNotFoundError(model_name, action) from None

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"Router(root={self.root!r}, routes={len(self._routes)})"
