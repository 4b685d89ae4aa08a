"""Request and response values exchanged with route handlers."""

from bookshelf.http.request import Request
from bookshelf.http.response import Response

__all__ = ["Request", "Response"]
