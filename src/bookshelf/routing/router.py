"""Route table: compiled once, matched per request.

Patterns are split on ``/`` into literal segments and at most one
capture, ``{name}`` or ``{name:converter}``, and inserted into a segment
tree. Anything that would make two routes compete for the same request
is refused by ``add()``, which the app turns into a startup failure.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from bookshelf.errors import ConfigurationError, MethodNotAllowed, NotFound
from bookshelf.routing.params import CONVERTERS
from bookshelf.routing.route import Route, RouteMatch


class Segment(NamedTuple):
    """One ``/``-separated piece of a pattern."""

    text: str
    capture: str | None = None
    converter: str = "str"


def parse_path(path: str) -> list[Segment]:
    """Split *path* into segments, validating its capture.

    ``"/v1/books/{id:int}"`` gives ``[Segment("v1"), Segment("books"),
    Segment("{id:int}", "id", "int")]``. Empty pieces are dropped, so
    ``/v1/books/`` and ``/v1/books`` are the same pattern.
    """
    segments: list[Segment] = []
    for text in path.split("/"):
        if not text:
            continue
        if text[0] == "<" and text[-1] == ">":
            msg = f"Route {path!r}: write captures as {{param}}, not <param>."
            raise ConfigurationError(msg)
        if text[0] != "{" or text[-1] != "}":
            segments.append(Segment(text))
            continue
        name, _, converter = text[1:-1].partition(":")
        converter = converter or "str"
        if not name:
            msg = f"Route {path!r} has an unnamed capture."
            raise ConfigurationError(msg)
        if converter not in CONVERTERS:
            known = ", ".join(sorted(CONVERTERS))
            msg = f"Route {path!r} uses unknown converter {converter!r} (known: {known})."
            raise ConfigurationError(msg)
        segments.append(Segment(text, name, converter))
    return segments


@dataclass(slots=True)
class _Node:
    literals: dict[str, _Node] = field(default_factory=dict)
    capture: _Capture | None = None
    routes: dict[str, Route] = field(default_factory=dict)


@dataclass(slots=True)
class _Capture:
    segment: Segment
    regex: re.Pattern[str]
    convert: type
    node: _Node


class Router:
    """Segment tree of routes.

    ::

        router = Router()
        router.add(Route("/v1/books/{id}", get_book, frozenset({"GET"})))
        router.compile()
        router.match("GET", "/v1/books/42").path_params  # {"id": "42"}

    Literal segments win over the capture at the same depth. ``HEAD`` is
    answered by the ``GET`` route. A path routed only under other methods
    raises ``NotFound``, or ``MethodNotAllowed`` when the router is built
    with ``method_not_allowed=True``.
    """

    __slots__ = ("_method_not_allowed", "_root", "_sealed")

    def __init__(self, *, method_not_allowed: bool = False) -> None:
        self._root = _Node()
        self._sealed = False
        self._method_not_allowed = method_not_allowed

    def add(self, route: Route) -> None:
        """Insert *route*.

        Raises ``ConfigurationError`` for a pattern with two captures, for
        a capture that differs from the one another route put at the same
        depth, and for a method already taken on the same pattern.
        """
        if self._sealed:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        segments = parse_path(route.path)
        if sum(seg.capture is not None for seg in segments) > 1:
            msg = f"Route {route.path!r} declares more than one path parameter."
            raise ConfigurationError(msg)

        node = self._root
        for seg in segments:
            node = self._descend(node, seg, route.path)

        for method in sorted(route.methods):
            taken = node.routes.get(method)
            if taken is not None:
                msg = f"Duplicate route: {method} {route.path!r} overlaps {method} {taken.path!r}."
                raise ConfigurationError(msg)
        node.routes.update(dict.fromkeys(route.methods, route))

    def _descend(self, node: _Node, seg: Segment, path: str) -> _Node:
        if seg.capture is None:
            return node.literals.setdefault(seg.text, _Node())
        edge = node.capture
        if edge is None:
            pattern, convert = CONVERTERS[seg.converter]
            edge = node.capture = _Capture(seg, re.compile(pattern), convert, _Node())
        elif (edge.segment.capture, edge.segment.converter) != (seg.capture, seg.converter):
            msg = (
                f"Route {path!r} declares {seg.text!r} where another route "
                f"declares {edge.segment.text!r}."
            )
            raise ConfigurationError(msg)
        return edge.node

    def compile(self) -> None:
        """Seal the table; later ``add()`` calls fail."""
        self._sealed = True

    @property
    def routes(self) -> list[Route]:
        """Every route once, literal branches before the capture branch."""
        return list(dict.fromkeys(self._walk(self._root)))

    def _walk(self, node: _Node) -> Iterator[Route]:
        yield from node.routes.values()
        for child in node.literals.values():
            yield from self._walk(child)
        if node.capture is not None:
            yield from self._walk(node.capture.node)

    def match(self, method: str, path: str) -> RouteMatch:
        """Find the route for *method* and *path*, converting the capture."""
        found = self._lookup(self._root, [p for p in path.split("/") if p], {})
        if found is None:
            raise NotFound(f"No route matches {method} {path!r}")

        node, params = found
        route = node.routes.get(method)
        if route is None and method == "HEAD":
            route = node.routes.get("GET")
        if route is not None:
            return RouteMatch(route, params)

        if not self._method_not_allowed:
            raise NotFound(f"No {method} route for {path!r}")
        allowed = set(node.routes)
        if "GET" in allowed:
            allowed.add("HEAD")
        raise MethodNotAllowed(frozenset(allowed))

    def _lookup(
        self,
        node: _Node,
        parts: list[str],
        params: dict[str, Any],
    ) -> tuple[_Node, dict[str, Any]] | None:
        if not parts:
            return (node, params) if node.routes else None

        head, rest = parts[0], parts[1:]
        child = node.literals.get(head)
        if child is not None:
            found = self._lookup(child, rest, params)
            if found is not None:
                return found

        edge = node.capture
        if edge is not None and edge.regex.fullmatch(head):
            name = edge.segment.capture or ""
            return self._lookup(edge.node, rest, {**params, name: edge.convert(head)})
        return None
