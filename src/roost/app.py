"""Roost application — the bootstrap around Dispatcher and Renderer.

Builds a fresh Renderer + Dispatcher for every request, so no state is
shared between requests, and maps dispatch failures to a 404 page
unless ``debug`` is on.
"""

import logging
from collections.abc import Callable, Iterable
from io import StringIO
from typing import Any, TextIO

from roost.config import AppConfig
from roost.errors import NotFound, RoostError
from roost.handlers.registry import DirectoryRegistry, HandlerRegistry
from roost.http.request import Request
from roost.http.response import Response
from roost.routing.dispatcher import Dispatcher
from roost.templating.renderer import Renderer

logger = logging.getLogger("roost.app")

NOT_FOUND_BODY = "<h1>404 NOT FOUND</h1>"

StartResponse = Callable[[str, list[tuple[str, str]]], Any]


class App:
    """The roost application.

    Usage::

        app = App(AppConfig(app_dir="app"))
        response = app.handle(Request.from_uri("/blog/show"))

    It is also a WSGI callable, so any WSGI server can host it.
    """

    __slots__ = ("config", "registry")

    def __init__(
        self,
        config: AppConfig | None = None,
        registry: HandlerRegistry | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.registry = registry or DirectoryRegistry(self.config.controller_path)

    def build_renderer(self, output: TextIO | None = None) -> Renderer:
        """A Renderer configured from ``self.config``."""
        cfg = self.config
        renderer = Renderer(None, output=output, autoescape=cfg.autoescape)
        renderer.configure_directories(cfg.layout_path, cfg.script_path)
        renderer.set_layout(cfg.layout)
        renderer.set_base_url(cfg.base_url)
        return renderer

    def build_dispatcher(self, renderer: Renderer) -> Dispatcher:
        dispatcher = Dispatcher(
            query_param=self.config.query_param,
            script_extension=self.config.script_extension,
        )
        return dispatcher.configure(self.registry, renderer)

    def handle(self, request: Request) -> Response:
        """Dispatch *request* and return the rendered response.

        Roost errors become a 404 and anything else a 500, unless
        ``config.debug`` is set, in which case they propagate. Renderer
        configuration errors always propagate.
        """
        body = StringIO()
        renderer = self.build_renderer(output=body)
        try:
            self.build_dispatcher(renderer).run(request)
        except RoostError as exc:
            if self.config.debug:
                raise
            return self.error_response(NotFound(str(exc)), request)
        except Exception:
            if self.config.debug:
                raise
            logger.exception("500 %s", request.uri)
            return Response(body="Internal Server Error", status=500)
        return Response(body=body.getvalue())

    def error_response(self, exc: NotFound, request: Request) -> Response:
        logger.debug("%d %s — %s", exc.status, request.uri, exc.detail)
        return Response(body=NOT_FOUND_BODY, status=exc.status).with_header(
            "Status", "404 NOT FOUND"
        )

    def __call__(self, environ: dict[str, Any], start_response: StartResponse) -> Iterable[bytes]:
        response = self.handle(Request.from_environ(environ))
        start_response(response.status_line, response.wsgi_headers())
        return [response.encode()]
