"""Route table: patterns with at most one capture, compiled at app freeze."""

from bookshelf.routing.route import Route, RouteMatch
from bookshelf.routing.router import Router, Segment, parse_path

__all__ = ["Route", "RouteMatch", "Router", "Segment", "parse_path"]
