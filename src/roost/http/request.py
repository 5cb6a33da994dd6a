"""Immutable request source.

The dispatcher consumes exactly two things from a request: the raw URI
(path plus optional query string) and the query parameters. Headers,
methods and bodies never reach the core.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from roost.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable request as seen by the dispatcher.

    ``uri`` is the raw request target (``/blog/show?id=3``), still
    percent-encoded. ``query`` holds the parsed query parameters.
    """

    uri: str = "/"
    query: QueryParams = field(default_factory=QueryParams)

    @property
    def path(self) -> str:
        """The URI without its query string (still percent-encoded)."""
        return self.uri.partition("?")[0]

    @classmethod
    def from_uri(cls, uri: str, query: Mapping[str, str] | None = None) -> "Request":
        """Create a Request from a raw URI.

        Query parameters come from the URI itself unless *query* is given.
        """
        if query is not None:
            return cls(uri=uri, query=QueryParams.from_mapping(query))
        return cls(uri=uri, query=QueryParams(uri.partition("?")[2]))

    @classmethod
    def from_environ(cls, environ: Mapping[str, Any]) -> "Request":
        """Create a Request from a WSGI environ.

        Prefers ``REQUEST_URI`` (set by most front-end servers) and falls
        back to ``PATH_INFO`` plus ``QUERY_STRING``.
        """
        query_string = environ.get("QUERY_STRING", "")
        uri = environ.get("REQUEST_URI")
        if not uri:
            uri = environ.get("PATH_INFO", "") or "/"
            if query_string:
                uri = f"{uri}?{query_string}"
        return cls(uri=uri, query=QueryParams(query_string))
