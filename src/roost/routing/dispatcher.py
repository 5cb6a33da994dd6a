"""The front controller.

Parses one request into controller/action/flags, resolves the handler
through a registry, invokes the action, and renders
``{controller}/{action}.html`` unless the action returned ``False``.

Usage::

    get_dispatcher().configure("app/controllers", renderer).run(request)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

from roost.context import request_var
from roost.errors import ConfigurationError, OperationNotFound
from roost.handlers.controller import handler_name, operation_name, view_path
from roost.handlers.registry import HandlerRegistry, as_registry
from roost.http.request import Request
from roost.routing.parse import RequestContext, parse_request

if TYPE_CHECKING:
    from roost.templating.renderer import Renderer

logger = logging.getLogger("roost.dispatch")


class Dispatcher:
    """Maps a request path onto a controller action and renders its view.

    One process-wide instance is available through :func:`get_dispatcher`.
    Long-lived servers should build one per request instead (``App``
    does), since ``run()`` records the last route on the instance.
    """

    __slots__ = ("_context", "_registry", "_renderer", "query_param", "script_extension")

    def __init__(self, *, query_param: str = "q", script_extension: str = ".html") -> None:
        self._registry: HandlerRegistry | None = None
        self._renderer: Renderer | None = None
        self._context = RequestContext()
        self.query_param = query_param
        self.script_extension = script_extension

    def __copy__(self) -> NoReturn:
        msg = "Dispatcher instances cannot be copied."
        raise TypeError(msg)

    def __deepcopy__(self, memo: dict[int, object]) -> NoReturn:
        msg = "Dispatcher instances cannot be copied."
        raise TypeError(msg)

    # -- Configuration --

    def configure(self, controllers: str | Path | HandlerRegistry, renderer: Renderer) -> Dispatcher:
        """Set the controller lookup root and the shared renderer."""
        return self.set_registry(controllers).set_renderer(renderer)

    def set_registry(self, controllers: str | Path | HandlerRegistry) -> Dispatcher:
        """Accept a controller directory or a ready-made registry."""
        self._registry = as_registry(controllers)
        return self

    def set_renderer(self, renderer: Renderer) -> Dispatcher:
        self._renderer = renderer
        return self

    @property
    def registry(self) -> HandlerRegistry | None:
        return self._registry

    @property
    def renderer(self) -> Renderer | None:
        return self._renderer

    @property
    def controller_name(self) -> str:
        """Controller of the last dispatched request (``index`` before any)."""
        return self._context.controller

    @property
    def action_name(self) -> str:
        """Action of the last dispatched request (``index`` before any)."""
        return self._context.action

    # -- Dispatch --

    def call(self, controller: str, action: str) -> bool:
        """Invoke *action* on *controller* and auto-render its view.

        Returns ``True`` when the view was rendered, ``False`` when the
        action opted out by returning ``False``.

        Raises ``HandlerNotFound``, ``HandlerMismatch``, or
        ``OperationNotFound`` when resolution fails.
        """
        registry, renderer = self._require_configured()

        handler_cls = registry.resolve(controller)
        operation = operation_name(action)
        if not callable(getattr(handler_cls, operation, None)):
            msg = f"The action {operation} does not exist in {handler_name(controller)}."
            raise OperationNotFound(msg)

        logger.debug("Dispatching %s.%s", handler_cls.__name__, operation)
        handler = handler_cls(renderer)
        result = getattr(handler, operation)()

        if result is False:
            return False

        renderer.render(view_path(controller, action, self.script_extension))
        return True

    def run(self, request: Request) -> RequestContext:
        """Dispatch *request*; return the parsed request context.

        The context is published through ``roost.context.request_var``
        while the action runs.
        """
        _, renderer = self._require_configured()

        context = parse_request(request, self.query_param)
        self._context = context
        logger.debug("Parsed %r as %s flags=%s", request.uri, context.route, list(context.flags))

        renderer.set("title", f"{context.controller}/{context.action}")

        token = request_var.set(context)
        try:
            self.call(context.controller, context.action)
        finally:
            request_var.reset(token)
        return context

    def _require_configured(self) -> tuple[HandlerRegistry, Renderer]:
        if self._registry is None:
            msg = "A controller path was not provided."
            raise ConfigurationError(msg)
        if self._renderer is None:
            msg = "A renderer was not provided."
            raise ConfigurationError(msg)
        return self._registry, self._renderer


_instance: Dispatcher | None = None


def get_dispatcher() -> Dispatcher:
    """Return the process-wide dispatcher, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = Dispatcher()
    return _instance


def reset_dispatcher() -> None:
    """Forget the process-wide dispatcher. For tests."""
    global _instance
    _instance = None
