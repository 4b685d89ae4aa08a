"""bookshelf: the v1 books API on a small ASGI core.

::

    from bookshelf import create_app

    create_app().run()          # pounce on 127.0.0.1:4000

or from the shell::

    bookshelf run --port 4000

Public names are imported on first access.
"""

import importlib

__version__ = "0.1.0"

_LAZY_IMPORTS: dict[str, str] = {
    "App": "bookshelf.app",
    "AppConfig": "bookshelf.config",
    "BookshelfError": "bookshelf.errors",
    "ConfigurationError": "bookshelf.errors",
    "HTTPError": "bookshelf.errors",
    "LoggingMiddleware": "bookshelf.middleware",
    "MethodNotAllowed": "bookshelf.errors",
    "Middleware": "bookshelf.middleware",
    "Next": "bookshelf.middleware",
    "NotFound": "bookshelf.errors",
    "Request": "bookshelf.http",
    "Response": "bookshelf.http",
    "ResponseRecorder": "bookshelf.middleware",
    "configure_logging": "bookshelf.logs",
    "create_app": "bookshelf.service",
}

__all__ = [
    "App",
    "AppConfig",
    "BookshelfError",
    "ConfigurationError",
    "HTTPError",
    "LoggingMiddleware",
    "MethodNotAllowed",
    "Middleware",
    "Next",
    "NotFound",
    "Request",
    "Response",
    "ResponseRecorder",
    "configure_logging",
    "create_app",
]


def __getattr__(name: str) -> object:
    module = _LAZY_IMPORTS.get(name)
    if module is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module), name)
