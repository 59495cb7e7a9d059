"""Primitive geometric value objects.

These are the small immutable values a LineString is built from and
produces: coordinates, points, two-point lines, three-point triangles and
axis-aligned rectangles. All of them are frozen dataclasses compared by
structural equality.

The module provides the following classes:
    Coordinate: An (x, y) pair of scalars.
    Point: A single Coordinate viewed as a standalone point.
    Line: An ordered (start, end) pair of Coordinates.
    Triangle: An ordered triple of Coordinates.
    Rect: An axis-aligned rectangle given by its min and max corners.

Example usage:
    Converting coordinate-like values::

        from linestring_lib.domain import Coordinate

        Coordinate.from_value((1, 2))            # Coordinate(x=1, y=2)
        Coordinate.from_value([1, 2], float)     # Coordinate(x=1.0, y=2.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple


@dataclass(frozen=True)
class Coordinate:
    """Immutable (x, y) pair."""
    x: Any
    y: Any

    @classmethod
    def from_value(cls, value: Any, scalar: Optional[Callable[[Any], Any]] = None) -> Coordinate:
        """Convert a coordinate-like value to a Coordinate.

        Accepts Coordinates, Points, any object with ``x`` and ``y``
        attributes, and any two-element sequence (tuple, list, numpy row).

        Args:
            value: The coordinate-like value.
            scalar: Optional scalar type both components are converted
                through. When None the components are kept as given.

        Returns:
            A new Coordinate, or ``value`` itself when it is already a
            Coordinate and no conversion is requested.

        Raises:
            TypeError: If ``value`` cannot be read as an (x, y) pair.
        """
        if isinstance(value, Coordinate):
            if scalar is None:
                return value
            x, y = value.x, value.y
        elif isinstance(value, Point):
            x, y = value.coord.x, value.coord.y
        elif hasattr(value, 'x') and hasattr(value, 'y'):
            x, y = value.x, value.y
        else:
            try:
                x, y = value
            except (TypeError, ValueError) as exc:
                raise TypeError(f"cannot convert {value!r} to a Coordinate") from exc

        if scalar is not None:
            x, y = scalar(x), scalar(y)
        return cls(x, y)

    def to_tuple(self) -> Tuple[Any, Any]:
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Point:
    """A single Coordinate reinterpreted as a point."""
    coord: Coordinate

    @classmethod
    def new(cls, x: Any, y: Any) -> Point:
        return cls(Coordinate(x, y))

    @classmethod
    def from_value(cls, value: Any) -> Point:
        """Wrap any coordinate-like value (see Coordinate.from_value)."""
        if isinstance(value, Point):
            return value
        return cls(Coordinate.from_value(value))

    @property
    def x(self) -> Any:
        return self.coord.x

    @property
    def y(self) -> Any:
        return self.coord.y


@dataclass(frozen=True)
class Line:
    """A segment from ``start`` to ``end``."""
    start: Coordinate
    end: Coordinate


@dataclass(frozen=True)
class Triangle:
    """Three coordinates in traversal order."""
    a: Coordinate
    b: Coordinate
    c: Coordinate


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle.

    ``min`` holds the smallest x and y, ``max`` the largest.
    """
    min: Coordinate
    max: Coordinate

    def contains(self, value: Any) -> bool:
        """Check if a coordinate-like value lies inside or on the boundary."""
        c = Coordinate.from_value(value)
        return (self.min.x <= c.x <= self.max.x and
                self.min.y <= c.y <= self.max.y)

    def contains_rect(self, other: Rect) -> bool:
        return (self.min.x <= other.min.x and other.max.x <= self.max.x and
                self.min.y <= other.min.y and other.max.y <= self.max.y)

    def intersects(self, other: Rect) -> bool:
        """Check if two rectangles share at least one point."""
        return (self.min.x <= other.max.x and other.min.x <= self.max.x and
                self.min.y <= other.max.y and other.min.y <= self.max.y)

    def to_tuple(self) -> Tuple[Any, Any, Any, Any]:
        """Convert to (x_min, y_min, x_max, y_max)."""
        return (self.min.x, self.min.y, self.max.x, self.max.y)
