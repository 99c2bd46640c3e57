"""Connector configuration.

ConnectorConfig is a frozen dataclass: immutable after creation and
shared safely between concurrent calls.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConnectorConfig:
    """Connector configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ConnectorConfig(timeout=5.0, headers=(("Accept", "application/json"),))
    """

    # Transport
    timeout: float = 30.0
    headers: tuple[tuple[str, str], ...] = ()

    # Routes without an explicit method are sent with this one
    default_method: str = "POST"

    # Methods that carry parameters as a JSON body instead of the query string
    body_methods: frozenset[str] = frozenset({"POST", "PUT", "PATCH"})

    def carries_body(self, method: str) -> bool:
        """True if *method* sends its parameters as a JSON body."""
        return method.upper() in self.body_methods
