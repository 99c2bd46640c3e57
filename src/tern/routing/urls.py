"""URL fragment helpers.

Route URLs are assembled from configurable fragments (path prefix, API
version, table name) that may or may not carry their own slashes. These
helpers normalize them so the result always has exactly one separator
between fragments.
"""

from collections.abc import Iterable


def trim_slashes(fragment: str) -> str:
    """Strip leading and trailing slashes from *fragment*.

    ::

        trim_slashes("/api/")  -> "api"
        trim_slashes("//")     -> ""
    """
    return fragment.strip("/")


def compact(fragments: Iterable[str | None]) -> list[str]:
    """Drop ``None`` and empty fragments, keeping order."""
    return [f for f in fragments if f]


def join_path(*fragments: str | None) -> str:
    """Join fragments into an absolute path with single separators.

    Each fragment is slash-trimmed first; empty ones are skipped. Inner
    slashes of a fragment (``"api/v1"``) are kept as they are.

    ::

        join_path("/api/", "v1/", "users")  -> "/api/v1/users"
        join_path(None, "", "users")        -> "/users"
    """
    parts = compact(trim_slashes(f) for f in compact(fragments))
    return "/" + "/".join(parts)


def join_url(root: str, path: str) -> str:
    """Append *path* to *root*, stripping the root's trailing slashes.

    The root is otherwise untouched, so scheme-relative roots like
    ``//example.com`` survive as written::

        join_url("http://api.test/", "/users")  -> "http://api.test/users"
        join_url("//example.com", "/users")     -> "//example.com/users"
        join_url("", "/users")                  -> "/users"
    """
    base = root.rstrip("/")
    if not path:
        return base
    if not path.startswith("/"):
        path = "/" + path
    return base + path


def placeholder(name: str) -> str:
    """Return the template token for the path parameter *name*."""
    return "{" + name + "}"


def substitute(template: str, name: str, value: object) -> str:
    """Replace the ``{name}`` token in *template* with ``str(value)``.

    Only the token is touched; the rest of the template is returned
    verbatim, including any other braces.
    """
    return template.replace(placeholder(name), str(value))
