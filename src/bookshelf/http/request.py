"""The request object handed to route handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from bookshelf._internal.asgi import Scope


@dataclass(frozen=True, slots=True)
class Request:
    """What a handler may ask about the current request.

    Built by the pipeline after routing, so ``path_params`` already holds
    the captured segment, converted by the route's converter.
    """

    method: str
    path: str
    path_params: dict[str, Any] = field(default_factory=dict)
    client: tuple[str, int] | None = None

    @classmethod
    def from_scope(cls, scope: Scope, path_params: dict[str, Any] | None = None) -> Request:
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            path_params=dict(path_params or {}),
            client=(client[0], client[1]) if client else None,
        )
