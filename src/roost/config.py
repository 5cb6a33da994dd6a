"""Application configuration: where controllers and views live, and how
requests are rendered.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    Relative directories resolve against ``app_dir``, which mirrors the
    conventional project layout::

        app/
            controllers/
                index.py
            views/
                layouts/
                    default.html
                scripts/
                    index/
                        index.html

    Override what you need::

        config = AppConfig(app_dir="site", layout=None, debug=True)
    """

    app_dir: str | Path = "app"
    controller_dir: str | Path = "controllers"
    layout_dir: str | Path = "views/layouts"
    script_dir: str | Path = "views/scripts"

    # Rendering
    layout: str | None = "default.html"  # None disables layout wrapping
    script_extension: str = ".html"
    base_url: str = ""
    autoescape: bool = True

    # Query parameter that overrides the URI path
    query_param: str = "q"

    # Errors propagate instead of becoming a 404 page
    debug: bool = False

    def resolve(self, directory: str | Path) -> Path:
        """Resolve *directory* against ``app_dir`` unless it is absolute."""
        path = Path(directory)
        if path.is_absolute():
            return path
        return Path(self.app_dir) / path

    @property
    def controller_path(self) -> Path:
        return self.resolve(self.controller_dir)

    @property
    def layout_path(self) -> Path:
        return self.resolve(self.layout_dir)

    @property
    def script_path(self) -> Path:
        return self.resolve(self.script_dir)
