"""Route definitions and match results."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Route:
    """A registered pattern with the methods it answers.

    ``path`` keeps the pattern as written (``/v1/books/{id}``) for error
    messages and ``bookshelf routes``.
    """

    path: str
    handler: Callable[..., Any]
    methods: frozenset[str]
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    route: Route
    path_params: dict[str, Any]
