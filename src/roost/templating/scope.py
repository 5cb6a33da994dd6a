"""The ``view`` object templates receive.

Templates get the renderer's variables as plain names plus a reserved
``view`` object for everything else::

    <title>{{ view.title }}</title>
    <a href="{{ view.base_url('/blog') }}">Blog</a>
    {% for post in posts %}
      {{ view.partial("blog/_row.html", post=post) }}
    {% end %}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from kida.template import Markup

if TYPE_CHECKING:
    from roost.templating.renderer import Renderer


class TemplateScope:
    """Template-facing facade over a :class:`Renderer`.

    Partial rendering is only reachable from here: controllers render
    whole views, templates compose them.
    """

    __slots__ = ("_renderer",)

    def __init__(self, renderer: Renderer) -> None:
        self._renderer = renderer

    def partial(
        self,
        path: str,
        variables: Mapping[str, Any] | None = None,
        /,
        *,
        output: bool = False,
        **extra: Any,
    ) -> Markup:
        """Render a script with only *variables* (and *extra*) in scope."""
        scope = {**(variables or {}), **extra}
        return self._renderer._partial(path, scope, output=output)

    def base_url(self, url: str = "") -> str:
        return self._renderer.get_base_url(url)

    def get(self, name: str, default: Any = None) -> Any:
        return self._renderer.get(name, default)

    def has(self, name: str) -> bool:
        return self._renderer.has(name)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._renderer.get(name)

    def __repr__(self) -> str:
        return f"<view {sorted(self._renderer.to_dict())!r}>"
