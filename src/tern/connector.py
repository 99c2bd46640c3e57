"""Connector: model persistence over a REST route table.

Translates ``(model class, action[, record])`` into exactly one HTTP
request and maps the JSON response back into model instances.

Each call:

1. Looks up the route for ``(model_name, action)``
2. Picks the HTTP method (route method, default ``POST``)
3. Builds scope/order/pagination parameters, plus ``attributes`` for
   record-bound actions
4. Builds the URL, substituting the identifier of persisted records
5. Sends parameters as a JSON body (POST/PUT/PATCH) or query string
6. Decodes the response and maps arrays/objects to records

Free-threading safety:
    - Router is frozen before the first dispatch
    - ModelConfig and ConnectorConfig are frozen dataclasses
    - No state is kept between calls
"""

import logging
from typing import Any

import httpx

from tern.config import ConnectorConfig
from tern.errors import MalformedResponseError
from tern.model import Model, model_config
from tern.params import build_params
from tern.response import Result, SingleResult, parse
from tern.routing.router import Router
from tern.routing.urls import join_url, substitute
from tern.transport import PreparedRequest, Transport

logger = logging.getLogger("tern.connector")


class Connector:
    """Persist model records through a remote HTTP API.

    Usage::

        router = Router("https://api.example.com")
        router.resource(User)

        connector = Connector(router)

        users = await connector.fetch_all(User)
        total = await connector.count(User)

        user = User(name="Alice")
        await connector.save(user)      # create, assigns user.id
        user.name = "Alicia"
        await connector.save(user)      # update
        await connector.delete(user)

    The router is compiled on construction; add every route first.
    """

    __slots__ = ("_config", "_router", "_transport")

    def __init__(
        self,
        router: Router,
        /,
        *,
        config: ConnectorConfig | None = None,
        transport: Transport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if transport is not None and client is not None:
            msg = "Pass either transport= or client=, not both."
            raise ValueError(msg)
        self._config = config or (transport.config if transport else ConnectorConfig())
        self._transport = transport or Transport(self._config, client=client)
        self._router = router
        router.compile()

    @property
    def router(self) -> Router:
        return self._router

    @property
    def config(self) -> ConnectorConfig:
        return self._config

    # ── Collection actions ───────────────────────────────────────────────

    async def fetch_all(self, model_cls: type[Model]) -> list[Model]:
        """Fetch every record matching the model's scope and pagination."""
        return await self.collection_action(model_cls, "all")

    async def fetch_first(self, model_cls: type[Model]) -> Model | None:
        return await self.collection_action(model_cls, "first")

    async def fetch_last(self, model_cls: type[Model]) -> Model | None:
        return await self.collection_action(model_cls, "last")

    async def count(self, model_cls: type[Model]) -> int:
        """Count records matching the model's scope. Returns the server's value."""
        return await self.collection_action(model_cls, "count")

    # ── Member actions ───────────────────────────────────────────────────

    async def save(self, record: Model) -> Model:
        """Create *record* if it is new, otherwise update it.

        On create, the identifier from the response is written back onto
        *record* and *record* is returned. Nothing is written if the
        request or decoding fails.

        On update, the record mapped from the response is returned, or
        *record* itself when the server answers with a non-object.
        """
        if record.is_new:
            request, body = await self._send(type(record), "create", record)
            result = parse(body, url=request.url)
            if not isinstance(result, SingleResult):
                raise MalformedResponseError(
                    request.url, body, reason="create response is not a JSON object"
                )
            record.identity = result.item.get(record.config.identifier)
            return record

        result = await self._dispatch(type(record), "update", record)
        if isinstance(result, SingleResult):
            return result.resolve(type(record))
        return record

    async def delete(self, record: Model) -> Any:
        """Delete *record*. Returns the mapped response payload."""
        return await self.member_action(record, "delete")

    # ── Generic dispatch ─────────────────────────────────────────────────

    async def collection_action(self, model_cls: type[Model], action: str) -> Any:
        """Run a collection-level *action* and return the mapped response."""
        result = await self._dispatch(model_cls, action)
        return result.resolve(model_cls)

    async def member_action(self, record: Model, action: str) -> Any:
        """Run a record-bound *action* and return the mapped response."""
        model_cls = type(record)
        result = await self._dispatch(model_cls, action, record)
        return result.resolve(model_cls)

    def build_request(
        self,
        model_cls: type[Model],
        action: str,
        record: Model | None = None,
    ) -> PreparedRequest:
        """Build the request for *action* without sending it.

        Raises ``RouteNotFoundError`` if the route table has no entry for
        the model and action.
        """
        config = model_config(model_cls)
        route = self._router.lookup(config.model_name, action)

        method = (route.method or self._config.default_method).upper()
        params = build_params(config, record)

        template = route.url
        if record is not None and record.is_persisted:
            template = substitute(template, route.identifier, record.identity)
        url = join_url(route.domain or self._router.root, template)

        if self._config.carries_body(method):
            return PreparedRequest(method, url, json=params)
        return PreparedRequest(method, url, params=params)

    async def _send(
        self,
        model_cls: type[Model],
        action: str,
        record: Model | None = None,
    ) -> tuple[PreparedRequest, str]:
        request = self.build_request(model_cls, action, record)
        logger.debug("%s.%s -> %s %s", model_cls.__name__, action, request.method, request.url)
        return request, await self._transport.send(request)

    async def _dispatch(
        self,
        model_cls: type[Model],
        action: str,
        record: Model | None = None,
    ) -> Result:
        request, body = await self._send(model_cls, action, record)
        return parse(body, url=request.url)
