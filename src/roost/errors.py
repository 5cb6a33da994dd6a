"""Errors raised by the dispatcher, the renderer and the bootstrap.

Everything derives from ``RoostError``. The dispatcher and renderer
only raise; ``App`` decides which failures become a 404 page.
"""

from dataclasses import dataclass


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when the dispatcher or renderer is used before it is configured."""


# -- Dispatch --


class DispatchError(RoostError):
    """Base for controller/action resolution failures."""


class HandlerNotFound(DispatchError):  # noqa: N818
    """No controller is registered, or its module does not exist."""


class HandlerMismatch(DispatchError):  # noqa: N818
    """The controller module loaded, but does not define the expected class."""


class OperationNotFound(DispatchError):  # noqa: N818
    """The controller does not expose the requested action."""


# -- Templating --


class TemplateError(RoostError):
    """Base for renderer configuration and render-time failures."""


class DirectoryError(TemplateError):
    """A layout or script root is not an existing, readable directory."""


class LayoutNotFound(TemplateError):  # noqa: N818
    """The requested layout file does not exist or is not readable."""


class ScriptNotFound(TemplateError):  # noqa: N818
    """The view script to render does not exist."""


# -- HTTP boundary --


@dataclass(frozen=True, slots=True)
class HTTPError(RoostError):
    """A failure expressed as an HTTP status, produced by ``App``."""

    status: int
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.status} {self.detail}".rstrip()


class NotFound(HTTPError):  # noqa: N818
    """404: the path names no controller, action or view."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
