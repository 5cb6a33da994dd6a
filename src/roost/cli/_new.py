"""``roost new`` — project scaffolding command.

Creates::

    <name>/
        main.py
        app/
            controllers/index.py
            views/layouts/default.html
            views/scripts/index/index.html
"""

import argparse
import sys
from pathlib import Path

from roost.cli._templates import (
    DEFAULT_LAYOUT_HTML,
    INDEX_CONTROLLER_PY,
    INDEX_SCRIPT_HTML,
    MAIN_PY,
)


def create_project(args: argparse.Namespace) -> None:
    """Scaffold ``<args.name>/`` in the working directory.

    Exits with status 1 if the directory is already there.
    """
    project_dir = Path(args.name)

    if project_dir.exists():
        print(
            f"Error: directory '{args.name}' already exists",
            file=sys.stderr,
        )
        raise SystemExit(1)

    app_dir = project_dir / "app"
    controllers_dir = app_dir / "controllers"
    layouts_dir = app_dir / "views" / "layouts"
    scripts_dir = app_dir / "views" / "scripts" / "index"

    for directory in (controllers_dir, layouts_dir, scripts_dir):
        directory.mkdir(parents=True)

    (project_dir / "main.py").write_text(MAIN_PY.replace("{name}", args.name))
    (controllers_dir / "index.py").write_text(INDEX_CONTROLLER_PY.replace("{name}", args.name))
    (layouts_dir / "default.html").write_text(DEFAULT_LAYOUT_HTML)
    (scripts_dir / "index.html").write_text(INDEX_SCRIPT_HTML)

    print(f"Created project '{args.name}'")
    print()
    print(f"  cd {args.name} && roost dispatch /")
    print()
