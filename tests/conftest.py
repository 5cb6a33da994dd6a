"""Shared fixtures: throwaway view trees and controller directories."""

from collections.abc import Callable
from pathlib import Path

import pytest

from roost.routing.dispatcher import reset_dispatcher
from roost.templating.renderer import Renderer

WriteFile = Callable[[str, str], Path]


def _writer(root: Path) -> WriteFile:
    def write(relative: str, text: str) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path

    return write


@pytest.fixture
def layouts(tmp_path: Path) -> Path:
    path = tmp_path / "views" / "layouts"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def scripts(tmp_path: Path) -> Path:
    path = tmp_path / "views" / "scripts"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def controllers(tmp_path: Path) -> Path:
    path = tmp_path / "controllers"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_layout(layouts: Path) -> WriteFile:
    return _writer(layouts)


@pytest.fixture
def write_script(scripts: Path) -> WriteFile:
    return _writer(scripts)


@pytest.fixture
def write_controller(controllers: Path) -> WriteFile:
    return _writer(controllers)


@pytest.fixture
def renderer(layouts: Path, scripts: Path) -> Renderer:
    """A renderer with both roots configured and no layout."""
    return Renderer(None).configure_directories(layouts, scripts)


@pytest.fixture(autouse=True)
def _fresh_dispatcher():
    yield
    reset_dispatcher()
