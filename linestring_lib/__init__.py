"""Line string geometry package.

Provides LineString, an ordered path of 2D coordinates, with the views
and reductions higher-level geometry code builds on: point, segment and
triangle iteration, closing a path into a ring, bounding envelopes and
point-to-path distances.

The package is organized into the following modules:
    domain: Value objects (Coordinate, Point, Line, Triangle, Rect) and
        the LineString type with its lazy views.
    utils: Envelope and distance computations, scalar-type extents.
    spatial: The SpatialObject capability protocol and PathIndex, an
        STRtree-backed index over paths. Requires the ``spatial`` extra
        and is not imported here.
    config: Package defaults.

Example usage:
    Segments of a path::

        from linestring_lib import LineString

        ls = LineString([(0., 0.), (5., 0.), (7., 9.)])
        print(len(ls.lines()))   # 2

    Nearest path to a point::

        from linestring_lib import LineString
        from linestring_lib.spatial import PathIndex

        index = PathIndex([LineString([(0, 0), (10, 0)]),
                           LineString([(0, 5), (10, 5)])])
        nearest = index.nearest_neighbor((3, 4))

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .domain import Coordinate, Line, LineString, Point, Rect, Triangle

__all__ = [
    'Coordinate', 'Point', 'Line', 'Triangle', 'Rect', 'LineString',
]

__version__ = '0.1.0'
