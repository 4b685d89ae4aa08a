"""Serve a bookshelf app with pounce.

Development mode runs one worker that reloads on file changes;
production mode runs ``config.workers`` workers (0: one per CPU). pounce
is imported here only, when a server actually starts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bookshelf.app import App
    from bookshelf.config import AppConfig


def serve(
    app: App,
    config: AppConfig,
    *,
    production: bool,
    app_path: str | None = None,
) -> None:
    """Bind ``config.host:config.port`` and serve *app* until interrupted.

    *app_path* (``"module:attribute"``) lets the development reloader
    import a fresh app after a change; production always serves *app*.
    Raises ``OSError`` when the address cannot be bound.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    options: dict[str, Any] = {
        "host": config.host,
        "port": config.port,
        "log_level": config.log_level,
        "log_format": config.log_format,
    }
    if production:
        options.update(
            workers=config.workers,
            max_connections=config.max_connections,
            backlog=config.backlog,
            keep_alive_timeout=config.keep_alive_timeout,
            request_timeout=config.request_timeout,
            # /v1/healthcheck is an application route
            health_check_path=None,
        )
        Server(ServerConfig(**options), app).run()
        return

    options.update(
        workers=1,
        reload=True,
        reload_include=config.reload_include,
        reload_dirs=config.reload_dirs,
    )
    Server(ServerConfig(**options), app, app_path=app_path).run()
