"""Tern exception hierarchy.

Shared across Router, Connector, and Transport so every module
raises and catches the same types.
"""


class TernError(Exception):
    """Base for all tern-specific errors."""


class ConfigurationError(TernError):
    """Raised when router or model configuration is invalid.

    Typically raised while building the route table, before any request
    is sent.
    """


class RouteNotFoundError(TernError):
    """No route in the table matches a (model name, action) pair."""

    def __init__(self, model_name: str, action: str) -> None:
        self.model_name = model_name
        self.action = action
        super().__init__(f"No route for {model_name!r} action {action!r}")


class TransportError(TernError):
    """Raised when the HTTP request fails or returns a non-2xx status.

    ``status`` is ``None`` when no response was received at all
    (connection refused, timeout, DNS failure).
    """

    def __init__(
        self,
        method: str,
        url: str,
        status: int | None = None,
        detail: str = "",
    ) -> None:
        self.method = method
        self.url = url
        self.status = status
        self.detail = detail
        prefix = f"{method} {url}"
        if status is not None:
            prefix = f"{prefix} returned {status}"
        else:
            prefix = f"{prefix} failed"
        super().__init__(f"{prefix}: {detail}" if detail else prefix)


class MalformedResponseError(TernError):
    """Raised when a response body cannot be used as the expected JSON."""

    def __init__(self, url: str, body: str, reason: str = "invalid JSON") -> None:
        self.url = url
        self.body = body
        self.reason = reason
        preview = body if len(body) <= 80 else body[:77] + "..."
        super().__init__(f"Malformed response from {url} ({reason}): {preview!r}")
