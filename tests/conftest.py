# tests/conftest.py
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest

from framing_grid.geometry.curves import Line, Polyline
from framing_grid.spatial.grid1d import Grid1d


@pytest.fixture
def grid10() -> Grid1d:
    """10 ft grid along the X axis."""
    return Grid1d.from_length(10.0)


@pytest.fixture
def diagonal_wall() -> Line:
    """10 ft wall running along (0.6, 0.8) from (2, 3, 0)."""
    return Line((2.0, 3.0, 0.0), (8.0, 11.0, 0.0))


@pytest.fixture
def l_shaped_wall() -> Polyline:
    """6 ft along X then 4 ft along Y, 10 ft total."""
    return Polyline([(0, 0, 0), (6, 0, 0), (6, 4, 0)])
