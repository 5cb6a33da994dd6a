"""Positional request path parsing.

The whole routing "protocol" is ``/controller/action/flag1/flag2``.
There is no route table: the first two segments name the controller
and action, everything after them is a boolean flag.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import unquote

from roost.http.request import Request
from roost.routing.filter import filter_segment

DEFAULT_CONTROLLER = "index"
DEFAULT_ACTION = "index"


@dataclass(frozen=True, slots=True)
class RequestContext:
    """The parsed view of one request.

    ``flags`` keeps the extra path segments in order; ``params`` is the
    request's query parameters overlaid with ``{flag: True}`` for each
    flag, confined to this request.
    """

    controller: str = DEFAULT_CONTROLLER
    action: str = DEFAULT_ACTION
    flags: tuple[str, ...] = ()
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def route(self) -> str:
        return f"{self.controller}/{self.action}"

    def has_flag(self, name: str) -> bool:
        return name in self.flags


def raw_request_path(request: Request, query_param: str = "q") -> str:
    """Return the decoded request path.

    The *query_param* value wins when present; otherwise the URI path is
    used with any query string stripped.
    """
    override = request.query.get(query_param)
    if override is not None:
        raw = override.partition("?")[0]
    else:
        raw = request.path
    return unquote(raw)


def split_segments(path: str) -> list[str]:
    """Split *path* on ``/`` and drop the empty segment a leading slash makes."""
    if not path:
        return []
    segments = path.split("/")
    if segments[0] == "":
        segments.pop(0)
    return segments


def parse_path(path: str) -> tuple[str, str, tuple[str, ...]]:
    """Parse a decoded path into ``(controller, action, flags)``.

    Examples::

        ""                 -> ("index", "index", ())
        "/foo"             -> ("index", "foo", ())
        "/foo/bar"         -> ("foo", "bar", ())
        "/foo/bar/baz/qux" -> ("foo", "bar", ("baz", "qux"))

    A segment that filters down to nothing keeps the default name.
    """
    controller, action = DEFAULT_CONTROLLER, DEFAULT_ACTION
    segments = split_segments(path)

    if len(segments) == 1:
        action = filter_segment(segments[0]) or action
        return controller, action, ()

    if len(segments) >= 2:
        controller = filter_segment(segments[0]) or controller
        action = filter_segment(segments[1]) or action

    flags = tuple(segment for segment in segments[2:] if segment)
    return controller, action, flags


def parse_request(request: Request, query_param: str = "q") -> RequestContext:
    """Parse *request* into a :class:`RequestContext`."""
    controller, action, flags = parse_path(raw_request_path(request, query_param))
    params: dict[str, Any] = dict(request.query)
    params.update(dict.fromkeys(flags, True))
    return RequestContext(
        controller=controller,
        action=action,
        flags=flags,
        params=MappingProxyType(params),
    )
