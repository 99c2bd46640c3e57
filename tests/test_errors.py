"""Tests for tern.errors: exception hierarchy and error messages."""

import pytest

from tern.errors import (
    ConfigurationError,
    MalformedResponseError,
    RouteNotFoundError,
    TernError,
    TransportError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls", [ConfigurationError, RouteNotFoundError, TransportError, MalformedResponseError]
    )
    def test_is_tern_error(self, cls: type) -> None:
        assert issubclass(cls, TernError)


class TestRouteNotFoundError:
    def test_fields_and_message(self) -> None:
        err = RouteNotFoundError("User", "count")
        assert err.model_name == "User"
        assert err.action == "count"
        assert str(err) == "No route for 'User' action 'count'"


class TestTransportError:
    def test_with_status(self) -> None:
        err = TransportError("POST", "http://api.test/users", status=422, detail="invalid")
        assert str(err) == "POST http://api.test/users returned 422: invalid"

    def test_without_status(self) -> None:
        err = TransportError("GET", "http://api.test/users", detail="ConnectError")
        assert err.status is None
        assert str(err) == "GET http://api.test/users failed: ConnectError"

    def test_without_detail(self) -> None:
        assert str(TransportError("GET", "/x", status=500)) == "GET /x returned 500"


class TestMalformedResponseError:
    def test_message_includes_preview(self) -> None:
        err = MalformedResponseError("http://api.test/x", "<html>")
        assert err.reason == "invalid JSON"
        assert str(err) == "Malformed response from http://api.test/x (invalid JSON): '<html>'"

    def test_long_body_truncated(self) -> None:
        err = MalformedResponseError("/x", "a" * 500)
        assert err.body == "a" * 500
        assert str(err).endswith("...'")
        assert len(str(err)) < 200
