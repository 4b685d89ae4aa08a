"""Service configuration.

One frozen ``AppConfig`` per app. Flags given to ``bookshelf run`` win
over the values stored here; they produce a copy, the original never
changes.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Settings for binding, routing, logging and the pounce server.

    ::

        AppConfig(port=8080, log_format="json")
    """

    host: str = "127.0.0.1"
    port: int = 4000

    # Development mode: one pounce worker that restarts on file changes
    debug: bool = False
    reload_include: tuple[str, ...] = ()
    reload_dirs: tuple[str, ...] = ()

    # 405 + Allow for a routed path with the wrong method (404 otherwise)
    method_not_allowed: bool = False

    log_level: str = "info"
    log_format: str = "text"  # "text" | "json"

    # Production mode
    workers: int = 0  # 0: one per CPU
    max_connections: int = 1000
    backlog: int = 2048
    keep_alive_timeout: float = 5.0
    request_timeout: float = 30.0
