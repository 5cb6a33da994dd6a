"""Handler registries — where the dispatcher finds controller classes.

Two implementations of one protocol:

- ``ControllerRegistry`` holds classes registered up front (decorator
  or ``register()``), with no runtime code loading.
- ``DirectoryRegistry`` loads ``<root>/<module>.py`` on first use and
  looks up ``<Name>Controller`` inside it, once per process.
"""

import importlib.util
import inspect
import os
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType
from typing import Protocol, TypeVar, runtime_checkable

from roost.errors import HandlerMismatch, HandlerNotFound
from roost.handlers.controller import (
    HANDLER_SUFFIX,
    OPERATION_SUFFIX,
    Controller,
    handler_name,
    module_name,
)

C = TypeVar("C", bound=type[Controller])


@runtime_checkable
class HandlerRegistry(Protocol):
    """What the dispatcher needs from a controller lookup root."""

    def resolve(self, controller: str) -> type[Controller]:
        """Return the handler class for *controller*.

        Raises ``HandlerNotFound`` or ``HandlerMismatch``.
        """
        ...

    def names(self) -> list[str]:
        """Controller names this registry can serve."""
        ...


def action_names(handler: type) -> list[str]:
    """Action names exposed by *handler*, sorted."""
    names = []
    for attr, value in inspect.getmembers(handler, callable):
        if attr.endswith(OPERATION_SUFFIX) and not attr.startswith("_"):
            names.append(attr.removesuffix(OPERATION_SUFFIX).replace("_", "-"))
    return names


class ControllerRegistry:
    """Explicit controller table.

    Usage::

        registry = ControllerRegistry()

        @registry.controller
        class IndexController(Controller):
            def index_action(self): ...

        registry.resolve("index")  # -> IndexController
    """

    __slots__ = ("_handlers",)

    def __init__(self) -> None:
        self._handlers: dict[str, type[Controller]] = {}

    def register(self, name: str, handler: type[Controller]) -> None:
        """Register *handler* under the controller *name*."""
        if name in self._handlers:
            msg = f"Duplicate controller name: {name!r}"
            raise ValueError(msg)
        self._handlers[name] = handler

    def controller(self, handler: C) -> C:
        """Class decorator; derives the name from ``<Name>Controller``."""
        class_name = handler.__name__
        if not class_name.endswith(HANDLER_SUFFIX) or class_name == HANDLER_SUFFIX:
            msg = f"Controller class names must end in {HANDLER_SUFFIX!r}: {class_name}"
            raise ValueError(msg)
        stem = class_name.removesuffix(HANDLER_SUFFIX)
        # CamelCase -> dashed, the inverse of handler_name()
        name = "".join(f"-{ch.lower()}" if ch.isupper() else ch for ch in stem).lstrip("-")
        self.register(name, handler)
        return handler

    def resolve(self, controller: str) -> type[Controller]:
        handler = self._handlers.get(controller)
        if handler is None:
            msg = f"The controller {handler_name(controller)} is not registered."
            raise HandlerNotFound(msg)
        return handler

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


class DirectoryRegistry:
    """Controllers discovered as modules under a directory.

    ``resolve("blog")`` loads ``<root>/blog.py`` (once) and returns its
    ``BlogController`` class.
    """

    __slots__ = ("_modules", "root")

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)
        self._modules: dict[Path, ModuleType] = {}

    def path_for(self, controller: str) -> Path:
        return self.root / f"{module_name(controller)}.py"

    def resolve(self, controller: str) -> type[Controller]:
        expected = handler_name(controller)
        path = self.path_for(controller)

        if not path.is_file() or not os.access(path, os.R_OK):
            msg = f"The controller {expected} was not found in the path {path}."
            raise HandlerNotFound(msg)

        module = self._load(path)
        handler = getattr(module, expected, None)
        if not inspect.isclass(handler):
            msg = f"The class name {expected} does not match the class contained within {path}."
            raise HandlerMismatch(msg)
        return handler

    def names(self) -> list[str]:
        if not self.root.is_dir():
            return []
        return sorted(
            path.stem.replace("_", "-")
            for path in self.root.glob("*.py")
            if not path.name.startswith("_")
        )

    def _load(self, path: Path) -> ModuleType:
        """Import *path* as a module, once per process."""
        resolved = path.resolve()
        cached = self._modules.get(resolved)
        if cached is not None:
            return cached

        module_id = f"roost_controllers.{path.stem}"
        spec = importlib.util.spec_from_file_location(module_id, resolved)
        if spec is None or spec.loader is None:
            msg = f"Cannot load controller module from {path}."
            raise HandlerNotFound(msg)
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_id] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_id, None)
            raise
        self._modules[resolved] = module
        return module


def as_registry(controllers: "str | Path | HandlerRegistry") -> HandlerRegistry:
    """Accept a directory path or a ready-made registry."""
    if isinstance(controllers, (str, os.PathLike)):
        return DirectoryRegistry(controllers)
    return controllers
