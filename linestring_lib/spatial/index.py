"""Bulk-loaded spatial index over SpatialObjects.

PathIndex answers range and nearest-neighbor queries over a fixed
collection of objects that satisfy the SpatialObject protocol, such as
LineStrings. It only ever talks to the objects through ``envelope()`` and
``distance_2()``, so it knows nothing about their internals.

Each envelope is bulk-loaded into a shapely STRtree as a box. The tree
only prunes: every candidate it returns is refined against the stored
Rect or the object's exact ``distance_2``, so results never depend on how
the tree measures boxes.

Nearest-neighbor queries grow a square search window around the query
point. Objects whose boxes fall inside the window are measured exactly;
any object still outside a window of half-size ``r`` is farther than
``r``, so every measured object closer than ``r`` can be reported in
order before the window grows.

Example usage:
    Nearest path to a point::

        from linestring_lib import LineString
        from linestring_lib.spatial import PathIndex

        index = PathIndex([
            LineString([(0, 0), (10, 0)]),
            LineString([(0, 5), (10, 5)]),
        ])
        index.nearest_neighbor((3, 4))   # the second path
"""

from __future__ import annotations

import heapq
import logging
import math
from itertools import islice
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

import numpy as np
import shapely
from shapely.strtree import STRtree

from ..domain.primitives import Coordinate, Point, Rect
from .protocols import SpatialObject

_logger = logging.getLogger(__name__)

S = TypeVar('S', bound=SpatialObject)

# Search windows are widened by this factor so rounding never excludes an
# object lying exactly on the window boundary; refinement drops extras.
_WINDOW_SLACK = 1.0 + 1e-9


def _box(rect: Rect) -> Any:
    return shapely.box(*rect.to_tuple())


def _window(coord: Coordinate, radius: float) -> Any:
    """Square of half-size ``radius`` (plus slack) centered on ``coord``."""
    half = radius * _WINDOW_SLACK
    if half == 0:
        return shapely.Point(coord.x, coord.y)
    return shapely.box(coord.x - half, coord.y - half, coord.x + half, coord.y + half)


class PathIndex(Generic[S]):
    """Static spatial index over envelope/distance capable objects.

    Attributes:
        size: Number of indexed objects.

    Raises:
        TypeError: If an object does not provide the SpatialObject
            capabilities.
    """

    def __init__(self, objects: Iterable[S] = ()):
        self._objects: List[S] = list(objects)
        for obj in self._objects:
            if not isinstance(obj, SpatialObject):
                raise TypeError(
                    f"{type(obj).__name__} does not provide envelope() and distance_2()"
                )

        self._envelopes: List[Rect] = [obj.envelope() for obj in self._objects]
        self._tree = STRtree([_box(rect) for rect in self._envelopes]) if self._objects else None
        self._step = self._initial_step()

        _logger.debug("Bulk-loaded %d objects into PathIndex", len(self._objects))

    def _initial_step(self) -> float:
        """Window growth used when a search window has collapsed to a point."""
        if not self._envelopes:
            return 1.0
        bounds = np.array([rect.to_tuple() for rect in self._envelopes], dtype=np.float64)
        # Envelopes of empty paths span the whole float range
        with np.errstate(over='ignore'):
            span = float(np.max(bounds[:, 2:] - bounds[:, :2]))
        return span / math.sqrt(len(self._envelopes)) or 1.0

    @property
    def size(self) -> int:
        return len(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[S]:
        return iter(self._objects)

    def _candidates(self, geometry: Any) -> List[int]:
        """Positions whose boxes meet ``geometry``'s bounds, in index order."""
        if self._tree is None:
            return []
        return sorted(int(i) for i in self._tree.query(geometry))

    # ------------------------------------------------------------------
    # Range queries
    # ------------------------------------------------------------------

    def locate_in_envelope(self, rect: Rect) -> List[S]:
        """Objects whose envelope lies entirely inside ``rect``."""
        return [
            self._objects[i] for i in self._candidates(_box(rect))
            if rect.contains_rect(self._envelopes[i])
        ]

    def locate_in_envelope_intersecting(self, rect: Rect) -> List[S]:
        """Objects whose envelope shares at least one point with ``rect``."""
        return [
            self._objects[i] for i in self._candidates(_box(rect))
            if rect.intersects(self._envelopes[i])
        ]

    def locate_within_distance(self, point: Any, max_distance_2: Any) -> List[S]:
        """Objects whose squared distance to ``point`` is at most ``max_distance_2``.

        Args:
            point: Query point (Point, Coordinate or ``(x, y)`` pair).
            max_distance_2: Squared search radius.

        Returns:
            Matching objects in index order. A negative radius matches
            nothing.
        """
        if max_distance_2 < 0:
            return []
        query = Point.from_value(point)
        window = _window(query.coord, math.sqrt(max_distance_2))
        return [
            self._objects[i] for i in self._candidates(window)
            if self._objects[i].distance_2(query) <= max_distance_2
        ]

    def locate_at_point(self, point: Any) -> List[S]:
        """Objects that ``point`` lies exactly on."""
        query = Point.from_value(point)
        return [
            self._objects[i] for i in self._candidates(shapely.Point(query.x, query.y))
            if self._envelopes[i].contains(query.coord) and self._objects[i].distance_2(query) == 0
        ]

    # ------------------------------------------------------------------
    # Nearest-neighbor queries
    # ------------------------------------------------------------------

    def nearest_neighbor_iter(self, point: Any) -> Iterator[S]:
        """Yield every object in order of increasing distance to ``point``.

        Ties are broken by insertion order. Exact distances are computed
        lazily, window by window, so consuming only the first few results
        measures only the objects near the query.
        """
        n = len(self._objects)
        if n == 0:
            return

        query = Point.from_value(point)
        # The first window is the query point itself
        radius = 0.0

        seen = set()
        # Entries: (distance_2, position)
        heap = []

        while True:
            exhausted = len(seen) == n or not math.isfinite(radius * radius)
            if exhausted:
                fresh = [i for i in range(n) if i not in seen]
            else:
                fresh = [i for i in self._candidates(_window(query.coord, radius)) if i not in seen]

            for i in fresh:
                seen.add(i)
                heapq.heappush(heap, (float(self._objects[i].distance_2(query)), i))

            if exhausted:
                while heap:
                    yield self._objects[heapq.heappop(heap)[1]]
                return

            # Everything unseen is strictly farther than radius
            bound = radius * radius
            while heap and (heap[0][0] < bound or heap[0][0] == 0):
                yield self._objects[heapq.heappop(heap)[1]]

            radius = max(2 * radius, math.sqrt(heap[0][0]) if heap else 0.0) or self._step

    def nearest_neighbor(self, point: Any) -> Optional[S]:
        """The object closest to ``point``, or None for an empty index."""
        return next(self.nearest_neighbor_iter(point), None)

    def nearest_neighbors(self, point: Any, k: int) -> List[S]:
        """Up to ``k`` objects closest to ``point``, nearest first.

        Raises:
            ValueError: If ``k`` is negative.
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        return list(islice(self.nearest_neighbor_iter(point), k))
