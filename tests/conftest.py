"""Shared pytest fixtures for the linestring_lib test suite.

Fixtures:
    open_path: Three-coordinate open path [(0,0), (5,0), (7,9)]
    closed_path: Path whose first and last coordinates already match
    empty_path: Path with no coordinates
    unit_square: Closed square ring with side 10
    sample_paths: A handful of horizontal paths for index queries

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import sys
from pathlib import Path

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from linestring_lib import LineString  # noqa: E402


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


# -----------------------------------------------------------------------------
# Path Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def open_path():
    """Return the open path [(0,0), (5,0), (7,9)]."""
    return LineString([(0., 0.), (5., 0.), (7., 9.)])


@pytest.fixture
def closed_path():
    """Return [(0,0), (5,0), (0,0)], closed without calling close()."""
    return LineString([(0., 0.), (5., 0.), (0., 0.)])


@pytest.fixture
def empty_path():
    """Return a path with no coordinates."""
    return LineString()


@pytest.fixture
def unit_square():
    """Return a closed 10x10 square ring, counter-clockwise from the origin."""
    return LineString([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])


@pytest.fixture
def sample_paths():
    """Return three horizontal paths at y = 0, 5 and 20.

    Returns:
        list[LineString]: Paths spanning x in [0, 10].
    """
    return [
        LineString([(0, 0), (10, 0)]),
        LineString([(0, 5), (10, 5)]),
        LineString([(0, 20), (5, 20), (10, 20)]),
    ]
