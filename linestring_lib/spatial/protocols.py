"""Capability contract between geometries and a spatial index.

A spatial index needs exactly two things from the objects it holds: an
axis-aligned envelope to prune with, and a squared distance to a query
point to rank with. Anything providing both satisfies SpatialObject;
LineString does so without extra state.
"""

from typing import Any, Protocol, runtime_checkable

from ..domain.primitives import Point, Rect


@runtime_checkable
class SpatialObject(Protocol):
    """Protocol for objects that can be stored in a PathIndex."""

    def envelope(self) -> Rect:
        """Return the axis-aligned bounding rectangle of the object."""
        ...

    def distance_2(self, point: Point) -> Any:
        """Return the squared distance from ``point`` to the object.

        Must be zero exactly when the point lies on the object, and must
        order objects the same way their true Euclidean distances do.
        """
        ...
