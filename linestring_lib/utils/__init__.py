"""Utility functions for line strings.

Geometry utilities:
    get_bounding_rect: Minimal Rect around a collection of coordinates.
    line_segment_distance: Distance from a coordinate to a segment.
    line_string_contains_point: Exact on-path test.
    point_line_string_euclidean_distance: Distance from a coordinate to a path.
    squared_distance: Square a distance, keeping zero as zero.

Numeric utilities:
    scalar_extent: Full representable range of a scalar type.
"""

from .geometry import (
    euclidean_length,
    get_bounding_rect,
    line_segment_distance,
    line_string_contains_point,
    point_line_string_euclidean_distance,
    point_on_segment,
    squared_distance,
)
from .numeric import scalar_dtype, scalar_extent

__all__ = [
    'get_bounding_rect', 'euclidean_length', 'line_segment_distance',
    'point_on_segment', 'line_string_contains_point',
    'point_line_string_euclidean_distance', 'squared_distance',
    'scalar_extent', 'scalar_dtype',
]
