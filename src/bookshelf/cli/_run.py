"""``bookshelf run``: configure logging, compile the app and serve it.

Startup faults (an unresolvable APP, an invalid route table, an address
that cannot be bound) exit with status 1.
"""

import argparse
import dataclasses
import sys

from bookshelf.cli._resolve import resolve_app
from bookshelf.config import AppConfig
from bookshelf.errors import ConfigurationError
from bookshelf.logs import configure_logging


def _apply_flags(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    flags = {
        "host": args.host,
        "port": args.port,
        "workers": args.workers,
        "log_level": args.log_level,
        "log_format": args.log_format,
    }
    return dataclasses.replace(config, **{k: v for k, v in flags.items() if v is not None})


def run_server(args: argparse.Namespace) -> None:
    """Serve ``args.app`` until interrupted.

    Production mode when ``--production`` is given or the app config does
    not have ``debug`` set; a single reloading worker otherwise.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    config = _apply_flags(app.config, args)
    production = args.production or not config.debug
    logger = configure_logging(config.log_level, config.log_format)

    try:
        app.freeze()
    except ConfigurationError as exc:
        logger.critical("invalid route table: %s", exc)
        raise SystemExit(1) from exc

    logger.info(
        "starting server",
        extra={
            "addr": f"{config.host}:{config.port}",
            "mode": "production" if production else "development",
        },
    )

    from bookshelf.server.runner import serve

    try:
        serve(app, config, production=production, app_path=args.app)
    except OSError as exc:
        logger.critical("server failed to start on %s:%d: %s", config.host, config.port, exc)
        raise SystemExit(1) from exc
