"""``bookshelf routes``: print the compiled route table."""

import argparse
import sys

from bookshelf.cli._resolve import resolve_app
from bookshelf.errors import ConfigurationError
from bookshelf.routing.route import Route


def _row(route: Route) -> tuple[str, str, str]:
    handler = getattr(route.handler, "__name__", repr(route.handler))
    if route.name and route.name != handler:
        handler = f"{handler} ({route.name})"
    return ", ".join(sorted(route.methods)), route.path, handler


def run_routes(args: argparse.Namespace) -> None:
    """Print one METHOD / PATH / HANDLER row per route, in match order.

    The table is compiled first, so a duplicate route fails this command
    the way it fails ``bookshelf run``.
    """
    try:
        routes = resolve_app(args.app).freeze().routes
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not routes:
        print("No routes registered.")
        return

    rows = [("METHOD", "PATH", "HANDLER"), *map(_row, routes)]
    method_width = max(len(row[0]) for row in rows)
    path_width = max(len(row[1]) for row in rows)
    rule = "-" * (method_width + path_width + 4 + max(len(row[2]) for row in rows))

    for index, (methods, path, handler) in enumerate(rows):
        print(f"{methods:<{method_width}}  {path:<{path_width}}  {handler}")
        if index == 0:
            print(rule)
