"""Errors raised by bookshelf.

Setup problems surface as ``ConfigurationError`` before the server binds
its port. ``HTTPError`` and its subclasses travel from the router or a
handler to the request pipeline, which answers with the carried status.
"""

from dataclasses import dataclass


class BookshelfError(Exception):
    """Root of the bookshelf exception tree."""


class ConfigurationError(BookshelfError):
    """The app cannot serve what was registered.

    Raised for malformed patterns and overlapping routes when the app
    freezes, and for handler return values with no response mapping.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(BookshelfError):
    """Ends the request with *status*; *headers* are sent, the body is empty."""

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        return f"{self.status}: {self.detail}" if self.detail else str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404. Also used for a routed path with the wrong method, by default."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(404, detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 for a routed path under another method, with ``Allow``."""

    def __init__(self, allowed: frozenset[str]) -> None:
        allow = ", ".join(sorted(allowed))
        super().__init__(405, f"Allowed methods: {allow}", (("Allow", allow),))
