"""HTTP transport over httpx.

Sends exactly one request per call, with no retries or caching. Transport
failures and non-2xx responses surface as ``TransportError`` with the
original httpx exception chained.

Free-threading safety:
    - PreparedRequest is a frozen dataclass
    - Without an injected client, an ``httpx.AsyncClient`` is created
      per request (no shared mutable state)
    - An injected client is owned and closed by the caller
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from tern.config import ConnectorConfig
from tern.errors import TransportError

logger = logging.getLogger("tern.transport")


@dataclass(frozen=True, slots=True)
class PreparedRequest:
    """A fully built request, ready to dispatch.

    Exactly one of ``json`` and ``params`` is set: body methods carry the
    parameters as ``json``, the others as query ``params``.
    """

    method: str
    url: str
    json: dict[str, Any] | None = None
    params: dict[str, Any] | None = None


class Transport:
    """Dispatch ``PreparedRequest`` objects and return the response body text.

    Usage::

        transport = Transport(ConnectorConfig(timeout=5.0))
        body = await transport.send(PreparedRequest("GET", "https://api.test/users"))

    Pass ``client=`` to reuse an ``httpx.AsyncClient`` (connection reuse,
    custom transports in tests). An injected client keeps its own timeout;
    ``config.timeout`` applies only to clients the transport creates.
    """

    __slots__ = ("_client", "_config")

    def __init__(
        self,
        config: ConnectorConfig | None = None,
        /,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or ConnectorConfig()
        self._client = client

    @property
    def config(self) -> ConnectorConfig:
        return self._config

    async def send(self, request: PreparedRequest) -> str:
        """Send *request* once and return the response body.

        Raises ``TransportError`` on connection failures, timeouts, and
        non-2xx statuses.
        """
        if self._client is not None:
            return await self._send(self._client, request)
        async with httpx.AsyncClient(timeout=self._config.timeout) as client:
            return await self._send(client, request)

    async def _send(self, client: httpx.AsyncClient, request: PreparedRequest) -> str:
        try:
            response = await client.request(
                request.method,
                request.url,
                json=request.json,
                params=request.params,
                headers=dict(self._config.headers),
            )
        except httpx.HTTPError as exc:
            logger.debug("%s %s failed: %r", request.method, request.url, exc)
            raise TransportError(
                request.method,
                request.url,
                detail=str(exc) or type(exc).__name__,
            ) from exc

        logger.debug("%s %s -> %d", request.method, request.url, response.status_code)
        if not response.is_success:
            raise TransportError(
                request.method,
                request.url,
                status=response.status_code,
                detail=response.text,
            )
        return response.text
