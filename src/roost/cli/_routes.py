"""``roost routes`` — list the controller actions an app can serve."""

import argparse
import sys
from pathlib import Path

from roost.config import AppConfig
from roost.errors import DispatchError
from roost.handlers.controller import view_path
from roost.handlers.registry import DirectoryRegistry, action_names


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATH, HANDLER and VIEW for every action found."""
    config = AppConfig(app_dir=Path(args.app_dir))
    registry = DirectoryRegistry(config.controller_path)

    rows: list[tuple[str, str, str]] = []
    for controller in registry.names():
        try:
            handler = registry.resolve(controller)
        except DispatchError as exc:
            print(f"Warning: {exc}", file=sys.stderr)
            continue
        for action in action_names(handler):
            rows.append(
                (
                    f"/{controller}/{action}",
                    f"{handler.__name__}.{action.replace('-', '_')}_action",
                    view_path(controller, action, config.script_extension),
                )
            )

    if not rows:
        print("No routes found.")
        return

    max_path = max(4, *(len(r[0]) for r in rows))
    max_handler = max(7, *(len(r[1]) for r in rows))
    fmt = f"{{:<{max_path}}}  {{:<{max_handler}}}  {{}}"
    print(fmt.format("PATH", "HANDLER", "VIEW"))
    print("-" * min(max_path + max_handler + 4 + max(len(r[2]) for r in rows), 80))
    for row in rows:
        print(fmt.format(*row))
