"""Domain objects for line strings.

This module exports the geometric value objects and the LineString
path type together with its derived views.

Value classes:
    Coordinate: Immutable (x, y) pair.
    Point: A Coordinate viewed as a standalone point.
    Line: Two-coordinate segment.
    Triangle: Three-coordinate window.
    Rect: Axis-aligned rectangle (envelope).

Path classes:
    LineString: Ordered, mutable coordinate path.
    PointsView, LinesView, TrianglesView: Lazy, sized views over a path.
    CoordinateRef: Writable handle to one position of a path.

Example usage:
    Working with a path::

        from linestring_lib.domain import LineString

        ls = LineString([(0, 0), (5, 0), (7, 9)])
        for tri in ls.triangles():
            print(tri.a, tri.b, tri.c)
"""

from .line_string import CoordinateRef, LineString, LinesView, PointsView, TrianglesView
from .primitives import Coordinate, Line, Point, Rect, Triangle

__all__ = [
    'Coordinate', 'Point', 'Line', 'Triangle', 'Rect',
    'LineString', 'PointsView', 'LinesView', 'TrianglesView', 'CoordinateRef',
]
