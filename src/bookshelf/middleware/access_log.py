"""Access logging middleware.

Emits one line per HTTP request once the handler chain has returned::

    GET /v1/books/42 200 183.4µs

The same values ride on the record as ``extra`` fields (``method``,
``path``, ``status``, ``duration``) for any other handler attached to
the logger; ``configure_logging()`` writes only the message.
"""

import logging
import time

from bookshelf._internal.asgi import Receive, Scope, Send
from bookshelf.middleware.protocol import Next
from bookshelf.middleware.recorder import ResponseRecorder


def format_duration(seconds: float) -> str:
    """Render an elapsed time with a unit that keeps it readable."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.0f}ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f}µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


class LoggingMiddleware:
    """Time every request and log method, path, status and duration.

    The status comes from a ``ResponseRecorder`` substituted for the real
    ``send``, so it is whatever the innermost handler (or the router's
    404) actually wrote. Exceptions from the chain propagate untouched
    and no access line is written for them.

    Usage::

        app.add_middleware(LoggingMiddleware(app.logger.getChild("access")))
    """

    __slots__ = ("logger",)

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send, next: Next) -> None:
        if scope["type"] != "http":
            await next(scope, receive, send)
            return

        start = time.monotonic()
        recorder = ResponseRecorder(send)

        await next(scope, receive, recorder)

        elapsed = time.monotonic() - start
        method = scope["method"]
        path = scope["path"]
        self.logger.info(
            "%s %s %d %s",
            method,
            path,
            recorder.status,
            format_duration(elapsed),
            extra={
                "method": method,
                "path": path,
                "status": recorder.status,
                "duration": elapsed,
            },
        )
