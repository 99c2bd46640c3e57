"""Tests for tern.params: scope, order, pagination, and attribute parameters."""

import json

from tern.model import Model, ModelConfig
from tern.params import build_params, item_params, scope_params


class Note(Model, fields=("id", "title", "body")):
    pass


class TestScopeParams:
    def test_defaults(self) -> None:
        assert scope_params(ModelConfig("Note")) == {
            "scope": "{}",
            "order": "{}",
            "skip": 0,
            "limit": 0,
        }

    def test_empty_mappings_still_sent(self) -> None:
        params = scope_params(ModelConfig("Note", default_scope={}, default_order={}))
        assert params["scope"] == "{}"
        assert params["order"] == "{}"

    def test_nested_scope_round_trips_verbatim(self) -> None:
        scope = {"$or": [{"title": {"$like": "%a%"}}, {"id": {"$in": [1, 2, 3]}}], "draft": None}
        params = scope_params(ModelConfig("Note", default_scope=scope))
        assert json.loads(params["scope"]) == scope

    def test_order_and_pagination(self) -> None:
        cfg = ModelConfig("Note").ordered({"id": "desc"}).paginated(skip=5, limit=25)
        params = scope_params(cfg)
        assert json.loads(params["order"]) == {"id": "desc"}
        assert params["skip"] == 5
        assert params["limit"] == 25


class TestItemParams:
    def test_full_attribute_mapping_with_nulls(self) -> None:
        params = item_params(Note(title="Hi"))
        assert json.loads(params["attributes"]) == {"id": None, "title": "Hi", "body": None}

    def test_special_keys_and_values_preserved(self) -> None:
        attrs = {"id": 1, "key with spaces": "a&b=c", "ключ": "значение", 'q"uote': [1, {"x": None}]}
        params = item_params(Note(attrs))
        decoded = json.loads(params["attributes"])
        assert decoded == {"title": None, "body": None, **attrs}

    def test_plain_mapping(self) -> None:
        assert item_params({"a": 1}) == {"attributes": '{"a":1}'}


class TestBuildParams:
    def test_collection(self) -> None:
        assert "attributes" not in build_params(Note.config)

    def test_member(self) -> None:
        params = build_params(Note.config, Note(id=1))
        assert set(params) == {"scope", "order", "skip", "limit", "attributes"}
