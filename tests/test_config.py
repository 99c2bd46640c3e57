"""Tests for tern.config: ConnectorConfig frozen dataclass."""

import pytest

from tern.config import ConnectorConfig


class TestConnectorConfig:
    def test_defaults(self) -> None:
        cfg = ConnectorConfig()

        assert cfg.timeout == 30.0
        assert cfg.headers == ()
        assert cfg.default_method == "POST"
        assert cfg.body_methods == frozenset({"POST", "PUT", "PATCH"})

    def test_override(self) -> None:
        cfg = ConnectorConfig(timeout=1.5, default_method="GET")

        assert cfg.timeout == 1.5
        assert cfg.default_method == "GET"

    def test_frozen(self) -> None:
        cfg = ConnectorConfig()

        with pytest.raises(AttributeError):
            cfg.timeout = 5.0  # type: ignore[misc]

    @pytest.mark.parametrize("method", ["POST", "put", "Patch"])
    def test_carries_body(self, method: str) -> None:
        assert ConnectorConfig().carries_body(method)

    @pytest.mark.parametrize("method", ["GET", "DELETE", "HEAD"])
    def test_carries_query(self, method: str) -> None:
        assert not ConnectorConfig().carries_body(method)

    def test_custom_body_methods(self) -> None:
        cfg = ConnectorConfig(body_methods=frozenset({"POST", "DELETE"}))
        assert cfg.carries_body("DELETE")
        assert not cfg.carries_body("PUT")
