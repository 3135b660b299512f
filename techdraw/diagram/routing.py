"""Orthogonal (Manhattan) wire routing between two absolute pin positions.

Every route has exactly two bends. The dominant axis decides where the
jog happens:

- horizontal-dominant (``deltaX > deltaY``): run horizontally to the x
  midpoint, jog vertically, finish horizontally;
- otherwise, ties included: run vertically to the y midpoint, jog
  horizontally, finish vertically.

Aligned pins therefore produce a straight line with two zero-length bends.
"""

from __future__ import annotations

from techdraw.diagram.models import Point
from techdraw.diagram.sink import format_number


def is_horizontal_dominant(p1: Point, p2: Point) -> bool:
    return abs(p1.x - p2.x) > abs(p1.y - p2.y)


def manhattan_route(p1: Point, p2: Point) -> list[Point]:
    """Four-point polyline from ``p1`` to ``p2``."""
    mid_x = (p1.x + p2.x) / 2
    mid_y = (p1.y + p2.y) / 2

    if is_horizontal_dominant(p1, p2):
        return [p1, Point(mid_x, p1.y), Point(mid_x, p2.y), p2]
    return [p1, Point(p1.x, mid_y), Point(p2.x, mid_y), p2]


def path_data(points: list[Point]) -> str:
    """SVG path ``d`` attribute for a polyline: ``M x y L x y ...``."""
    if not points:
        return ""
    first, *rest = points
    parts = [f"M {format_number(first.x)} {format_number(first.y)}"]
    parts.extend(f"L {format_number(p.x)} {format_number(p.y)}" for p in rest)
    return " ".join(parts)
