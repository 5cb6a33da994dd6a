"""Query string parameters as a read-only mapping.

Repeated keys keep every value; plain item access yields the first one,
which is what the dispatcher's ``?q=`` override reads.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class QueryParams(Mapping[str, str]):
    """Read-only view over a parsed query string.

    ::

        params = QueryParams("tag=a&tag=b&q=/blog")
        params["tag"]           # "a"
        params.get_list("tag")  # ["a", "b"]
    """

    __slots__ = ("_values",)

    def __init__(self, query_string: str | bytes = "") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        self._values: dict[str, list[str]] = parse_qs(query_string, keep_blank_values=True)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "QueryParams":
        """Wrap already-decoded single values, e.g. from the CLI or tests."""
        params = cls()
        params._values = {name: [value] for name, value in values.items()}
        return params

    def __getitem__(self, name: str) -> str:
        return self._values[name][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryParams({dict(self)!r})"

    def get_list(self, name: str) -> list[str]:
        """Every value given for *name*, in query order."""
        return list(self._values.get(name, ()))
