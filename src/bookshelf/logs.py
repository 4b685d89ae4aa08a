"""Process logging setup.

Loggers are plain stdlib loggers under ``bookshelf``. Handler events are
rendered by structlog's ``ProcessorFormatter`` as logfmt or JSON lines,
with anything passed through ``extra=`` as extra keys::

    time=2026-10-19T12:00:00.000000Z level=info msg="getBook handler called" id=42
    {"id": "42", "time": "2026-10-19T12:00:00.000000Z", "level": "info", "msg": "getBook handler called"}

Access lines on ``bookshelf.access`` are written as they are logged, one
request per line::

    GET /v1/books/42 200 183.4µs

Importing bookshelf configures nothing. The CLI and ``App.run()`` call
``configure_logging()`` once before serving.
"""

import logging
import sys
from typing import TextIO

import structlog
from structlog.types import Processor

ROOT_LOGGER = "bookshelf"
ACCESS_LOGGER = "bookshelf.access"

LEVELS = ("critical", "error", "warning", "info", "debug")
FORMATS = ("text", "json")


def _renderer(fmt: str) -> Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    if fmt == "text":
        return structlog.processors.LogfmtRenderer(key_order=["time", "level", "msg"])
    msg = f"Unknown log format {fmt!r}; expected 'text' or 'json'."
    raise ValueError(msg)


def event_formatter(fmt: str = "text") -> structlog.stdlib.ProcessorFormatter:
    """Formatter for handler events and lifecycle messages."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.ExtraAdder(),
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="time"),
            structlog.processors.format_exc_info,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.EventRenamer("msg"),
            _renderer(fmt),
        ],
    )


def _install(name: str, handler: logging.Handler) -> None:
    logger = logging.getLogger(name)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(
    level: str = "info",
    fmt: str = "text",
    *,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Send bookshelf logs to *stream* (stdout by default).

    Safe to call again: the handlers installed by an earlier call are
    replaced. Returns the ``bookshelf`` logger.
    """
    if level.lower() not in LEVELS:
        msg = f"Unknown log level {level!r}; expected one of {', '.join(LEVELS)}."
        raise ValueError(msg)
    out = stream or sys.stdout

    events = logging.StreamHandler(out)
    events.setFormatter(event_formatter(fmt))
    access = logging.StreamHandler(out)
    access.setFormatter(logging.Formatter("%(message)s"))

    _install(ROOT_LOGGER, events)
    _install(ACCESS_LOGGER, access)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level.upper())
    return logger
