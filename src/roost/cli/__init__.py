"""Roost CLI — project scaffolding, one-shot dispatch, and route listing.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — a tiny controller/action dispatcher with layout-wrapped views.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- roost new --------------------------------------------------------
    new_parser = subparsers.add_parser("new", help="Create a new project")
    new_parser.add_argument("name", help="Project directory name")

    # -- roost dispatch ---------------------------------------------------
    dispatch_parser = subparsers.add_parser("dispatch", help="Render one request to stdout")
    dispatch_parser.add_argument("uri", help="Request URI (e.g. /blog/show?id=3)")
    dispatch_parser.add_argument(
        "--app-dir", default="app", help="Application directory (default: app)"
    )
    dispatch_parser.add_argument(
        "--no-layout", action="store_true", help="Render without the default layout"
    )
    dispatch_parser.add_argument(
        "--debug", action="store_true", help="Report errors instead of printing a 404 page"
    )

    # -- roost routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List controller actions")
    routes_parser.add_argument(
        "--app-dir", default="app", help="Application directory (default: app)"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "new":
        from roost.cli._new import create_project

        create_project(args)
    elif args.command == "dispatch":
        from roost.cli._dispatch import run_dispatch

        run_dispatch(args)
    elif args.command == "routes":
        from roost.cli._routes import run_routes

        run_routes(args)
