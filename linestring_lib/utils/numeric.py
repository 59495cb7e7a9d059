"""Scalar-type helpers backed by numpy's type information."""

from __future__ import annotations

from typing import Any, Callable, Tuple

import numpy as np


def scalar_extent(scalar: Callable[[Any], Any]) -> Tuple[Any, Any]:
    """Smallest and largest finite values representable by a scalar type.

    Floating types use ``numpy.finfo``, integer types ``numpy.iinfo``.
    Python's ``float`` and ``int`` map to float64 and int64.

    Args:
        scalar: The scalar type, e.g. ``float``, ``int`` or ``numpy.float32``.

    Returns:
        Tuple of (min_value, max_value), both converted through ``scalar``.

    Raises:
        TypeError: If ``scalar`` is not a floating or integer type.

    Example:
        >>> scalar_extent(np.int8)
        (-128, 127)
    """
    try:
        dtype = np.dtype(scalar)
    except TypeError as exc:
        raise TypeError(f"{scalar!r} is not a numeric scalar type") from exc

    if np.issubdtype(dtype, np.floating):
        info = np.finfo(dtype)
    elif np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
    else:
        raise TypeError(f"{scalar!r} is not a numeric scalar type")

    return scalar(info.min), scalar(info.max)


def scalar_dtype(scalar: Callable[[Any], Any]) -> np.dtype:
    """numpy dtype matching a scalar type, for array export."""
    return np.dtype(scalar)
