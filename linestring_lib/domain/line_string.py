"""The LineString value type and its derived views.

A LineString is an ordered sequence of Coordinates describing a path
between locations. It is *closed* when it is empty or its first and last
coordinates are equal. A LineString is valid when it is empty or holds two
or more coordinates; validity is never enforced, and derived views are
undefined on a single-coordinate path.

The module provides the following classes:
    LineString: The coordinate store with construction, indexing,
        iteration, closure, envelope and distance operations.
    PointsView: Lazy, sized, reversible view of the coordinates as Points.
    LinesView: Lazy, sized, reversible view of consecutive coordinate pairs.
    TrianglesView: Lazy, sized, reversible view of consecutive triples.
    CoordinateRef: Writable handle to one position of a LineString.

Example usage:
    Building and walking a path::

        from linestring_lib import LineString

        ls = LineString([(0., 0.), (5., 0.), (7., 9.)])
        len(ls.lines())        # 2
        for line in ls.lines():
            print(line.start, line.end)

    Closing a ring::

        ls.close()
        ls.is_closed()         # True
        ls.num_coords()        # 4
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

import numpy as np

from ..config import DEFAULT_SCALAR
from ..utils.geometry import (
    get_bounding_rect,
    line_string_contains_point,
    point_line_string_euclidean_distance,
    squared_distance,
)
from ..utils.numeric import scalar_dtype, scalar_extent
from .primitives import Coordinate, Line, Point, Rect, Triangle

logger = logging.getLogger(__name__)

T = TypeVar('T')


class _WindowView:
    """Index-driven view over fixed-width windows of a LineString.

    The length is derived from the store length, so it is known without
    traversal. Items are built on demand from ordinary checked slices and
    reflect the store at the time they are read.
    """

    _width = 1

    def __init__(self, line_string: LineString):
        self._line_string = line_string

    def _make(self, window: List[Coordinate]) -> Any:
        raise NotImplementedError

    def __len__(self) -> int:
        return max(0, self._line_string.num_coords() - self._width + 1)

    def __getitem__(self, k):
        if isinstance(k, slice):
            return [self[i] for i in range(*k.indices(len(self)))]
        n = len(self)
        if k < 0:
            k += n
        if not 0 <= k < n:
            raise IndexError(f"{type(self).__name__} index out of range")
        return self._make(self._line_string._coords[k:k + self._width])

    def __iter__(self) -> Iterator[Any]:
        for k in range(len(self)):
            yield self[k]

    def __reversed__(self) -> Iterator[Any]:
        for k in range(len(self) - 1, -1, -1):
            yield self[k]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self)})"


class PointsView(_WindowView):
    """Every coordinate of a LineString as a Point, forward or backward."""

    _width = 1

    def _make(self, window: List[Coordinate]) -> Point:
        return Point(window[0])


class LinesView(_WindowView):
    """One Line per pair of adjacent coordinates, in traversal order."""

    _width = 2

    def _make(self, window: List[Coordinate]) -> Line:
        return Line(window[0], window[1])


class TrianglesView(_WindowView):
    """One Triangle per run of three consecutive coordinates."""

    _width = 3

    def _make(self, window: List[Coordinate]) -> Triangle:
        return Triangle(window[0], window[1], window[2])


class CoordinateRef:
    """Writable handle to the coordinate at one position of a LineString.

    Produced by ``LineString.coords_mut()``. Assigning ``value`` replaces
    the stored coordinate in place, converting through the path's scalar.
    """

    def __init__(self, line_string: LineString, index: int):
        self._line_string = line_string
        self.index = index

    @property
    def value(self) -> Coordinate:
        return self._line_string[self.index]

    @value.setter
    def value(self, new_value: Any) -> None:
        self._line_string[self.index] = new_value

    @property
    def x(self) -> Any:
        return self.value.x

    @property
    def y(self) -> Any:
        return self.value.y

    def __repr__(self) -> str:
        return f"CoordinateRef(index={self.index}, value={self.value!r})"


class LineString(Generic[T]):
    """An ordered path of Coordinates.

    Construction accepts any iterable of coordinate-like values:
    Coordinates, Points, ``(x, y)`` tuples or lists, numpy rows. Iterators
    are consumed eagerly and order is preserved; nothing is deduplicated,
    reordered or validated. Every value is converted through ``scalar``.

    Attributes:
        scalar: The scalar type shared by all coordinates (default float).
            It also fixes the full extent returned by ``envelope()`` for an
            empty path.

    Example:
        >>> ls = LineString([(0, 0), (5, 0), (0, 0)])
        >>> ls.is_closed()
        True
    """

    __hash__ = None  # mutable

    def __init__(self, coords: Iterable[Any] = (), scalar: Callable[[Any], T] = DEFAULT_SCALAR):
        self.scalar = scalar
        self._coords: List[Coordinate] = [Coordinate.from_value(c, scalar) for c in coords]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_tuples(cls, tuples: Iterable[Tuple[Any, Any]], scalar: Callable[[Any], T] = DEFAULT_SCALAR) -> LineString:
        """Create from a sequence of ``(x, y)`` tuples."""
        return cls(tuples, scalar=scalar)

    @classmethod
    def from_list(cls, lst: Iterable[List[Any]], scalar: Callable[[Any], T] = DEFAULT_SCALAR) -> LineString:
        """Create from nested ``[[x, y], ...]`` lists."""
        return cls(lst, scalar=scalar)

    @classmethod
    def from_array(cls, array: Any, scalar: Optional[Callable[[Any], T]] = None) -> LineString:
        """Create from an ``(n, 2)`` numpy array.

        Args:
            array: Anything ``numpy.asarray`` accepts with shape ``(n, 2)``.
                An empty array of any shape yields an empty path.
            scalar: Scalar type for the coordinates. Defaults to the
                array's own element type (e.g. ``numpy.float32``).

        Raises:
            ValueError: If the array is non-empty and not of shape (n, 2).
        """
        arr = np.asarray(array)
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"expected an (n, 2) array, got shape {arr.shape}")
        if scalar is None:
            scalar = arr.dtype.type
        return cls(arr, scalar=scalar)

    # ------------------------------------------------------------------
    # Store access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._coords)

    def __getitem__(self, index: int) -> Coordinate:
        if isinstance(index, slice):
            raise TypeError("LineString indices must be integers, not slice")
        return self._coords[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if isinstance(index, slice):
            raise TypeError("LineString indices must be integers, not slice")
        self._coords[index] = Coordinate.from_value(value, self.scalar)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._coords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineString):
            return NotImplemented
        return self._coords == other._coords

    def __repr__(self) -> str:
        return f"LineString({[c.to_tuple() for c in self._coords]!r})"

    @property
    def coords(self) -> Tuple[Coordinate, ...]:
        """Snapshot of the coordinates in order."""
        return tuple(self._coords)

    def coords_mut(self) -> Iterator[CoordinateRef]:
        """Yield a writable handle for every position, first to last.

        Example:
            >>> ls = LineString([(1, 1), (2, 2)])
            >>> for ref in ls.coords_mut():
            ...     ref.value = (ref.x * 10, ref.y)
            >>> ls.to_list()
            [[10.0, 1.0], [20.0, 2.0]]
        """
        for index in range(len(self._coords)):
            yield CoordinateRef(self, index)

    def map_coords_in_place(self, func: Callable[[Coordinate], Any]) -> None:
        """Replace every coordinate with ``func(coordinate)``."""
        self._coords = [Coordinate.from_value(func(c), self.scalar) for c in self._coords]

    def num_coords(self) -> int:
        """Return the number of coordinates in the path."""
        return len(self._coords)

    def copy(self) -> LineString:
        """Return an independent path with the same coordinates and scalar."""
        return type(self)(self._coords, scalar=self.scalar)

    def to_list(self) -> List[List[Any]]:
        """Convert to nested list for JSON serialization."""
        return [[c.x, c.y] for c in self._coords]

    def to_array(self) -> np.ndarray:
        """Convert to an ``(n, 2)`` array with the scalar's dtype."""
        return np.array(self.to_list(), dtype=scalar_dtype(self.scalar)).reshape(-1, 2)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def points(self) -> PointsView:
        """View the coordinates as Points; iterate forward or with ``reversed``."""
        return PointsView(self)

    def into_points(self) -> List[Point]:
        """Return the coordinates as a new list of Points."""
        return [Point(c) for c in self._coords]

    def lines(self) -> LinesView:
        """View of one Line per segment, ``max(0, n - 1)`` in total.

        Example:
            >>> ls = LineString([(0., 0.), (5., 0.), (7., 9.)])
            >>> [(l.start.to_tuple(), l.end.to_tuple()) for l in ls.lines()]
            [((0.0, 0.0), (5.0, 0.0)), ((5.0, 0.0), (7.0, 9.0))]
        """
        return LinesView(self)

    def triangles(self) -> TrianglesView:
        """View of one Triangle per consecutive triple, ``max(0, n - 2)`` in total."""
        return TrianglesView(self)

    # ------------------------------------------------------------------
    # Closure
    # ------------------------------------------------------------------

    def is_closed(self) -> bool:
        """Checks if the path is empty or starts and ends on the same coordinate."""
        return not self._coords or self._coords[0] == self._coords[-1]

    def close(self) -> None:
        """Close the path into a ring.

        If the path is not closed, a copy of the first coordinate is
        appended. Calling it on a closed (or empty) path does nothing.
        """
        if not self.is_closed():
            self._coords.append(self._coords[0])
            logger.debug("Closed line string by appending %s", self._coords[0])

    # ------------------------------------------------------------------
    # Envelope and distance
    # ------------------------------------------------------------------

    def bounding_rect(self) -> Optional[Rect]:
        """Minimal Rect containing every coordinate, or None when empty."""
        return get_bounding_rect(self._coords)

    def envelope(self) -> Rect:
        """Axis-aligned envelope for spatial indexing.

        An empty path has nothing to bound, so its envelope spans the full
        extent of the scalar type and no envelope query excludes it.

        Returns:
            The bounding Rect, recomputed on every call.
        """
        rect = self.bounding_rect()
        if rect is not None:
            return rect
        low, high = scalar_extent(self.scalar)
        return Rect(Coordinate(low, low), Coordinate(high, high))

    def contains_point(self, point: Any) -> bool:
        """Check if a point lies exactly on one of the segments."""
        return line_string_contains_point(self, Coordinate.from_value(point))

    def euclidean_distance(self, point: Any) -> float:
        """Minimum Euclidean distance from ``point`` to the path."""
        return point_line_string_euclidean_distance(Coordinate.from_value(point), self)

    def distance_2(self, point: Any) -> Any:
        """Squared distance from ``point`` to the path.

        An exact zero distance is returned as zero. This is the ranking
        value spatial-index consumers compare.
        """
        return squared_distance(self.euclidean_distance(point))

    def distance_to(self, point: Any) -> Any:
        """Alias of ``distance_2``: squared distance to the path."""
        return self.distance_2(point)
