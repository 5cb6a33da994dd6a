"""Roost — a tiny controller/action dispatcher with layout-wrapped views.

A request path ``/controller/action/flag...`` runs
``<Controller>Controller.<action>_action()`` and renders
``views/scripts/<controller>/<action>.html`` inside a layout.

Basic usage::

    from roost import App, AppConfig, Request

    app = App(AppConfig(app_dir="app"))
    response = app.handle(Request.from_uri("/blog/show"))

Controllers::

    from roost import Controller

    class BlogController(Controller):
        def show_action(self):
            self.view.set("post", load_post())
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "Controller",
    "ControllerRegistry",
    "DirectoryRegistry",
    "Dispatcher",
    "HandlerMismatch",
    "HandlerNotFound",
    "OperationNotFound",
    "Renderer",
    "Request",
    "RequestContext",
    "Response",
    "RoostError",
    "get_dispatcher",
    "get_request",
]

_ERRORS = frozenset(
    {
        "ConfigurationError",
        "DirectoryError",
        "HandlerMismatch",
        "HandlerNotFound",
        "LayoutNotFound",
        "NotFound",
        "OperationNotFound",
        "RoostError",
        "ScriptNotFound",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    if name == "App":
        from roost.app import App

        return App

    if name == "AppConfig":
        from roost.config import AppConfig

        return AppConfig

    if name in ("Request", "Response"):
        from roost import http as _http

        return getattr(_http, name)

    if name in ("Dispatcher", "get_dispatcher"):
        from roost.routing import dispatcher as _dispatcher

        return getattr(_dispatcher, name)

    if name == "RequestContext":
        from roost.routing.parse import RequestContext

        return RequestContext

    if name in ("Controller", "ControllerRegistry", "DirectoryRegistry"):
        from roost import handlers as _handlers

        return getattr(_handlers, name)

    if name == "Renderer":
        from roost.templating.renderer import Renderer

        return Renderer

    if name == "get_request":
        from roost.context import get_request

        return get_request

    if name in _ERRORS:
        from roost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
