"""Envelope and distance computations over line strings.

This module provides the read-only reductions a LineString exposes to
spatial-index consumers. The functions operate on anything with the
LineString iteration surface (``iter`` over Coordinates and ``lines()``)
so that the domain classes can delegate here without an import cycle.

The module provides the following functions:
    get_bounding_rect: Minimal Rect around a collection of coordinates.
    euclidean_length: Distance between two coordinates.
    line_segment_distance: Distance from a coordinate to a segment.
    point_on_segment: Exact test for a coordinate lying on a segment.
    line_string_contains_point: Exact test for a coordinate lying on a path.
    point_line_string_euclidean_distance: Distance from a coordinate to a path.
    squared_distance: Square a distance while keeping zero as zero.

Example usage:
    Distance from a point to a path::

        from linestring_lib import LineString
        from linestring_lib.domain import Coordinate
        from linestring_lib.utils.geometry import point_line_string_euclidean_distance

        ls = LineString([(0, 0), (10, 0)])
        point_line_string_euclidean_distance(Coordinate(5, 5), ls)  # 5.0
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Iterable, Optional

from ..domain.primitives import Coordinate, Rect

if TYPE_CHECKING:
    from ..domain.line_string import LineString


def get_bounding_rect(coords: Iterable[Coordinate]) -> Optional[Rect]:
    """Minimal axis-aligned rectangle containing every coordinate.

    Args:
        coords: Any iterable of Coordinates (a LineString works directly).

    Returns:
        The bounding Rect, or None when ``coords`` is empty.
    """
    iterator = iter(coords)
    first = next(iterator, None)
    if first is None:
        return None

    min_x = max_x = first.x
    min_y = max_y = first.y
    for c in iterator:
        if c.x < min_x:
            min_x = c.x
        elif c.x > max_x:
            max_x = c.x
        if c.y < min_y:
            min_y = c.y
        elif c.y > max_y:
            max_y = c.y

    return Rect(Coordinate(min_x, min_y), Coordinate(max_x, max_y))


def euclidean_length(start: Coordinate, end: Coordinate) -> float:
    """Euclidean distance between two coordinates."""
    return math.hypot(end.x - start.x, end.y - start.y)


def line_segment_distance(point: Coordinate, start: Coordinate, end: Coordinate) -> float:
    """Minimum distance from ``point`` to the segment ``start``-``end``.

    The point is projected onto the segment's supporting line. A projection
    parameter at or before 0 picks the start point, at or past 1 the end
    point; anything between uses the perpendicular distance.

    Args:
        point: The query coordinate.
        start: First endpoint of the segment.
        end: Second endpoint of the segment.

    Returns:
        Non-negative distance. A degenerate segment (start == end) is
        treated as a single point.
    """
    if start == end:
        return euclidean_length(point, start)

    dx = end.x - start.x
    dy = end.y - start.y
    length_2 = dx * dx + dy * dy

    r = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_2
    if r <= 0:
        return euclidean_length(point, start)
    if r >= 1:
        return euclidean_length(point, end)

    s = ((start.y - point.y) * dx - (start.x - point.x) * dy) / length_2
    return abs(s) * math.hypot(dx, dy)


def point_on_segment(point: Coordinate, start: Coordinate, end: Coordinate) -> bool:
    """Exact test: is ``point`` collinear with and between the endpoints?"""
    if start == end:
        return point == start

    cross = (end.x - start.x) * (point.y - start.y) - (end.y - start.y) * (point.x - start.x)
    if cross != 0:
        return False

    return (min(start.x, end.x) <= point.x <= max(start.x, end.x) and
            min(start.y, end.y) <= point.y <= max(start.y, end.y))


def line_string_contains_point(line_string: LineString, point: Coordinate) -> bool:
    """Check whether ``point`` lies exactly on the path.

    An empty path contains nothing. A single-coordinate path contains only
    that coordinate.
    """
    n = line_string.num_coords()
    if n == 0:
        return False
    if n == 1:
        return line_string[0] == point
    return any(point_on_segment(point, line.start, line.end) for line in line_string.lines())


def point_line_string_euclidean_distance(point: Coordinate, line_string: LineString) -> float:
    """Minimum distance from ``point`` to any point on the path.

    The minimum is taken over all segments, not just the vertices. Points
    lying exactly on the path short-circuit to 0. An empty path also
    reports 0, so that it never ranks behind a real candidate.

    Args:
        point: The query coordinate.
        line_string: The path to measure against.

    Returns:
        Non-negative Euclidean distance.
    """
    if line_string.num_coords() == 0 or line_string_contains_point(line_string, point):
        return 0.0

    if line_string.num_coords() == 1:
        return euclidean_length(point, line_string[0])

    return min(
        line_segment_distance(point, line.start, line.end)
        for line in line_string.lines()
    )


def squared_distance(distance: Any) -> Any:
    """Square a distance for comparison-only consumers.

    An exact zero is passed through unchanged.
    """
    if distance == 0:
        return distance
    return distance ** 2
