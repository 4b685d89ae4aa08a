"""Middleware for the bookshelf pipeline.

``LoggingMiddleware`` writes one access line per request, reading the
status from a ``ResponseRecorder`` it substitutes for ``send``.
"""

from bookshelf.middleware.access_log import LoggingMiddleware, format_duration
from bookshelf.middleware.protocol import Middleware, Next
from bookshelf.middleware.recorder import ResponseRecorder

__all__ = ["LoggingMiddleware", "Middleware", "Next", "ResponseRecorder", "format_duration"]
