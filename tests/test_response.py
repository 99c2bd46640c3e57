"""Tests for tern.response: decoding and shape classification."""

import pytest

from tern.errors import MalformedResponseError
from tern.model import Model
from tern.response import ListResult, ScalarResult, SingleResult, classify, decode, parse


class Item(Model):
    pass


class TestDecode:
    def test_valid_json(self) -> None:
        assert decode('{"a": [1, 2]}') == {"a": [1, 2]}

    def test_empty_body_is_null(self) -> None:
        assert decode("") is None
        assert decode("  \n") is None

    def test_invalid_json(self) -> None:
        with pytest.raises(MalformedResponseError) as exc_info:
            decode("<html>", url="http://api.test/items")
        assert exc_info.value.url == "http://api.test/items"
        assert exc_info.value.body == "<html>"
        assert "invalid JSON" in str(exc_info.value)


class TestClassify:
    def test_array(self) -> None:
        assert classify([{"id": 1}]) == ListResult(({"id": 1},))

    def test_object(self) -> None:
        assert classify({"id": 1}) == SingleResult({"id": 1})

    @pytest.mark.parametrize("value", [None, 0, 3.5, True, False, "text"])
    def test_scalars(self, value: object) -> None:
        assert classify(value) == ScalarResult(value)

    def test_parse_combines_both(self) -> None:
        assert parse("[]") == ListResult(())


class TestResolve:
    def test_list_maps_each_object(self) -> None:
        result = ListResult(({"id": 1}, {"id": 2}))
        assert result.resolve(Item) == [Item(id=1), Item(id=2)]

    def test_list_passes_non_objects_through(self) -> None:
        assert ListResult(({"id": 1}, 7)).resolve(Item) == [Item(id=1), 7]

    def test_single(self) -> None:
        assert SingleResult({"id": 1}).resolve(Item) == Item(id=1)

    def test_scalar_ignores_factory(self) -> None:
        assert ScalarResult(12).resolve(Item) == 12
