"""Shared configuration for linestring_lib.

This module centralizes default values used across the domain modules.
Spatial-index support is not switched here: it is the optional
``spatial`` packaging extra (see ``linestring_lib.spatial``).
"""

# Scalar type used when a LineString is built without an explicit one
DEFAULT_SCALAR = float
