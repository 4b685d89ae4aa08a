"""``bookshelf`` command line.

::

    bookshelf run [APP] [--host H] [--port P] [--production] [--workers N]
                  [--log-level L] [--log-format text|json]
    bookshelf routes [APP]

APP is a ``module:attribute`` import string naming an ``App`` or a
factory returning one. It defaults to the v1 books service.
"""

import argparse
import sys

from bookshelf.logs import FORMATS, LEVELS

DEFAULT_APP = "bookshelf.service:create_app"


def _add_app_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"module:attribute of an App or app factory (default: {DEFAULT_APP})",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookshelf",
        description="Serve or inspect the bookshelf v1 API.",
    )
    commands = parser.add_subparsers(dest="command")

    run = commands.add_parser("run", help="serve the app with pounce")
    _add_app_argument(run)
    run.add_argument("--host", help="bind address (default: from the app config)")
    run.add_argument("--port", type=int, help="bind port (default: from the app config)")
    run.add_argument(
        "--production",
        action="store_true",
        help="multi-worker server even when the app config has debug set",
    )
    run.add_argument("--workers", type=int, help="production workers, 0 for one per CPU")
    run.add_argument("--log-level", choices=LEVELS)
    run.add_argument("--log-format", choices=FORMATS)

    routes = commands.add_parser("routes", help="print the compiled route table")
    _add_app_argument(routes)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point of the ``bookshelf`` script and ``python -m bookshelf``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "run":
        from bookshelf.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from bookshelf.cli._routes import run_routes

        run_routes(args)
    else:
        parser.print_help()
        sys.exit(0)
