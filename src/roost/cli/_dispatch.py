"""``roost dispatch`` — run one request and print the rendered body."""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from roost.app import App
from roost.config import AppConfig
from roost.errors import RoostError
from roost.http.request import Request


def run_dispatch(args: argparse.Namespace) -> None:
    """Dispatch ``args.uri`` against the app in ``args.app_dir``.

    Prints the body to stdout. Exits with status 1 when the request
    could not be served.
    """
    app_dir = Path(args.app_dir)
    if not app_dir.is_dir():
        print(f"Error: app directory '{args.app_dir}' not found", file=sys.stderr)
        raise SystemExit(1)

    config = AppConfig(app_dir=app_dir, debug=args.debug)
    if args.no_layout:
        config = replace(config, layout=None)
    try:
        response = App(config).handle(Request.from_uri(args.uri))
    except RoostError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    sys.stdout.write(response.text)
    if response.status != 200:
        raise SystemExit(1)
