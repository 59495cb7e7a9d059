"""Spatial-index integration.

Provides the SpatialObject capability protocol (envelope plus squared
point distance) and PathIndex, a shapely STRtree backed index answering
range and nearest-neighbor queries over any objects that implement it.

This sub-package needs the optional ``spatial`` extra
(``pip install linestring-lib[spatial]``); the rest of linestring_lib
does not import it.
"""

from .index import PathIndex
from .protocols import SpatialObject

__all__ = ['PathIndex', 'SpatialObject']
