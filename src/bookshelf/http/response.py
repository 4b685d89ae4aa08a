"""The response value handlers return or negotiation builds."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

TEXT_PLAIN = "text/plain; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """Status, body and headers of one HTTP response.

    ``Response(status=204)`` is what ``delete_book`` returns; plain
    strings and ``(body, status)`` tuples are turned into one by
    ``negotiate``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = TEXT_PLAIN
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        return replace(self, headers=(*self.headers, *headers.items()))

    def encode(self) -> bytes:
        """The body as bytes; text is encoded as UTF-8."""
        return self.body.encode() if isinstance(self.body, str) else self.body
