"""Response decoding and shape classification.

A response body is decoded once and classified into one of three shapes:

- ``ListResult``: a JSON array, mapped to a list of records
- ``SingleResult``: a JSON object, mapped to one record
- ``ScalarResult``: anything else (number, string, bool, null), passed through

The shape is decided here, in one place; callers dispatch on the result
type rather than re-inspecting the decoded JSON.
"""

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias, TypeVar

from tern.errors import MalformedResponseError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ListResult:
    """A JSON array of records.

    Elements that are not objects are passed through unmapped.
    """

    items: tuple[Any, ...]

    def resolve(self, factory: Callable[[Mapping[str, Any]], T]) -> list[T | Any]:
        return [factory(item) if isinstance(item, Mapping) else item for item in self.items]


@dataclass(frozen=True, slots=True)
class SingleResult:
    """A single JSON object."""

    item: Mapping[str, Any]

    def resolve(self, factory: Callable[[Mapping[str, Any]], T]) -> T:
        return factory(self.item)


@dataclass(frozen=True, slots=True)
class ScalarResult:
    """Any non-record JSON value: ``null``, numbers, strings, booleans."""

    value: Any

    def resolve(self, factory: Callable[[Mapping[str, Any]], Any]) -> Any:
        return self.value


Result: TypeAlias = ListResult | SingleResult | ScalarResult


def decode(body: str, *, url: str = "") -> Any:
    """Parse *body* as JSON.

    Raises ``MalformedResponseError`` if the body is not valid JSON.
    An empty body is treated as ``null``.
    """
    if not body.strip():
        return None
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(url, body, reason=f"invalid JSON: {exc.msg}") from exc


def classify(data: Any) -> Result:
    """Classify decoded JSON into a tagged result."""
    if isinstance(data, Mapping):
        return SingleResult(data)
    if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
        return ListResult(tuple(data))
    return ScalarResult(data)


def parse(body: str, *, url: str = "") -> Result:
    """Decode *body* and classify it in one step."""
    return classify(decode(body, url=url))
