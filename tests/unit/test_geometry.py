"""Unit tests for envelope and distance utility functions.

Tests the pure functions in linestring_lib.utils.geometry:
    - get_bounding_rect: Minimal rectangle around coordinates
    - line_segment_distance: Point-to-segment distance
    - point_on_segment: Exact on-segment test
    - point_line_string_euclidean_distance: Point-to-path distance
    - squared_distance: Zero-preserving square
"""

import math
import unittest

from linestring_lib import LineString
from linestring_lib.domain import Coordinate, Rect
from linestring_lib.utils.geometry import (
    get_bounding_rect,
    line_segment_distance,
    line_string_contains_point,
    point_line_string_euclidean_distance,
    point_on_segment,
    squared_distance,
)


class TestGetBoundingRect(unittest.TestCase):
    """Tests for get_bounding_rect."""

    def test_empty_is_none(self):
        self.assertIsNone(get_bounding_rect([]))

    def test_single_coordinate(self):
        c = Coordinate(2, 3)
        self.assertEqual(get_bounding_rect([c]), Rect(c, c))

    def test_mixed_coordinates(self):
        coords = [Coordinate(1, 5), Coordinate(-2, 0), Coordinate(4, -3)]
        self.assertEqual(get_bounding_rect(coords), Rect(Coordinate(-2, -3), Coordinate(4, 5)))

    def test_accepts_generators(self):
        rect = get_bounding_rect(Coordinate(i, -i) for i in range(4))
        self.assertEqual(rect, Rect(Coordinate(0, -3), Coordinate(3, 0)))


class TestLineSegmentDistance(unittest.TestCase):
    """Tests for line_segment_distance."""

    def setUp(self):
        self.start = Coordinate(0.0, 0.0)
        self.end = Coordinate(10.0, 0.0)

    def test_perpendicular(self):
        self.assertEqual(line_segment_distance(Coordinate(5.0, 5.0), self.start, self.end), 5.0)

    def test_before_start(self):
        self.assertEqual(line_segment_distance(Coordinate(-3.0, 4.0), self.start, self.end), 5.0)

    def test_after_end(self):
        self.assertEqual(line_segment_distance(Coordinate(13.0, -4.0), self.start, self.end), 5.0)

    def test_degenerate_segment(self):
        p = Coordinate(3.0, 4.0)
        self.assertEqual(line_segment_distance(p, self.start, self.start), 5.0)

    def test_diagonal(self):
        d = line_segment_distance(Coordinate(0.0, 2.0), Coordinate(0.0, 0.0), Coordinate(2.0, 2.0))
        self.assertAlmostEqual(d, math.sqrt(2), places=10)


class TestPointOnSegment(unittest.TestCase):
    """Tests for point_on_segment and line_string_contains_point."""

    def test_collinear_inside(self):
        self.assertTrue(point_on_segment(Coordinate(2, 2), Coordinate(0, 0), Coordinate(4, 4)))

    def test_collinear_outside(self):
        self.assertFalse(point_on_segment(Coordinate(5, 5), Coordinate(0, 0), Coordinate(4, 4)))

    def test_off_line(self):
        self.assertFalse(point_on_segment(Coordinate(2, 3), Coordinate(0, 0), Coordinate(4, 4)))

    def test_empty_path_contains_nothing(self):
        self.assertFalse(line_string_contains_point(LineString(), Coordinate(0, 0)))

    def test_single_coordinate_path(self):
        ls = LineString([(1, 1)])
        self.assertTrue(line_string_contains_point(ls, Coordinate(1.0, 1.0)))
        self.assertFalse(line_string_contains_point(ls, Coordinate(1.0, 2.0)))


class TestPointLineStringDistance(unittest.TestCase):
    """Tests for point_line_string_euclidean_distance."""

    def test_empty_path_is_zero(self):
        self.assertEqual(point_line_string_euclidean_distance(Coordinate(1, 1), LineString()), 0.0)

    def test_single_coordinate_path(self):
        ls = LineString([(0, 0)])
        self.assertEqual(point_line_string_euclidean_distance(Coordinate(3, 4), ls), 5.0)

    def test_minimum_over_all_segments(self):
        ls = LineString([(0, 0), (10, 0), (10, 10)])
        self.assertAlmostEqual(point_line_string_euclidean_distance(Coordinate(12, 5), ls), 2.0, places=10)

    def test_uses_segments_not_just_vertices(self):
        ls = LineString([(0, 0), (100, 0)])
        self.assertAlmostEqual(point_line_string_euclidean_distance(Coordinate(50, 1), ls), 1.0, places=10)


class TestSquaredDistance(unittest.TestCase):
    """Tests for squared_distance."""

    def test_zero_passes_through(self):
        self.assertEqual(squared_distance(0.0), 0.0)

    def test_squares_nonzero(self):
        self.assertEqual(squared_distance(3.0), 9.0)
        self.assertEqual(squared_distance(0.5), 0.25)


if __name__ == '__main__':
    unittest.main()
