"""Helpers for testing roost applications and controllers::

    from roost.testing import TestClient, RenderSpy

    client = TestClient(app)
    response = client.get("/blog/show")
    assert response.status == 200
"""

from collections.abc import Mapping
from typing import Any

from roost.app import App
from roost.http.request import Request
from roost.http.response import Response
from roost.templating.renderer import Renderer


class TestClient:
    """Sends requests straight to ``App.handle``, no server involved."""

    __test__ = False

    __slots__ = ("app",)

    def __init__(self, app: App) -> None:
        self.app = app

    def get(self, uri: str, *, query: Mapping[str, str] | None = None) -> Response:
        """Dispatch *uri*. Query parameters come from the URI unless *query* is given."""
        return self.app.handle(Request.from_uri(uri, query))


class RenderSpy(Renderer):
    """A Renderer that records every ``render()`` call.

    With ``passthrough=False`` nothing is evaluated, which lets dispatch
    tests run without any template files.
    """

    __test__ = False

    def __init__(self, *args: Any, passthrough: bool = False, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.calls: list[tuple[str, bool]] = []
        self.passthrough = passthrough

    def render(self, path: str, output: bool = True) -> str | None:
        self.calls.append((path, output))
        if self.passthrough:
            return super().render(path, output)
        return None if output else ""

    @property
    def rendered(self) -> list[str]:
        return [path for path, _ in self.calls]


def assert_not_found(response: Response) -> None:
    """Assert the response is roost's 404 page."""
    assert response.status == 404, f"Expected status 404, got {response.status}"
    assert "404 NOT FOUND" in response.text, f"Unexpected body: {response.text[:500]}"
