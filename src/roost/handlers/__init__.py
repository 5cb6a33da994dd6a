"""Controllers and the registries the dispatcher resolves them through."""

from roost.handlers.controller import (
    Controller,
    handler_name,
    module_name,
    operation_name,
    view_path,
)
from roost.handlers.registry import (
    ControllerRegistry,
    DirectoryRegistry,
    HandlerRegistry,
    action_names,
)

__all__ = [
    "Controller",
    "ControllerRegistry",
    "DirectoryRegistry",
    "HandlerRegistry",
    "action_names",
    "handler_name",
    "module_name",
    "operation_name",
    "view_path",
]
