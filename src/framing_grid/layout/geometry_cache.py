# File: src/framing_grid/layout/geometry_cache.py
"""
Cached cell geometry for a grid.

Consumers that draw or bake cell segments keep a CellGeometryCache instead
of calling get_cell_geometry() on every cell each time. The cache listens for
the grid's change notification and rebuilds on the next read.
"""

import logging
from typing import List, Optional

from ..geometry.curves import Line
from ..spatial.grid1d import Grid1d

logger = logging.getLogger(__name__)


class CellGeometryCache:
    """Lazily computed segments for every undivided cell of a grid.

    Only restructuring done through the watched grid's own methods
    invalidates the cache. Splits made directly on one of its cells are not
    reported to this grid.

    Attributes:
        grid: Watched grid
        invalidation_count: Number of change notifications received
    """

    def __init__(self, grid: Grid1d):
        self.grid = grid
        self.invalidation_count = 0
        self._lines: Optional[List[Line]] = None
        grid.add_change_listener(self._on_grid_change)

    def __enter__(self) -> "CellGeometryCache":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _on_grid_change(self, grid: Grid1d) -> None:
        self._lines = None
        self.invalidation_count += 1
        logger.debug("Cell geometry invalidated for %r", grid)

    @property
    def is_valid(self) -> bool:
        """True if cached segments are available without recomputation."""
        return self._lines is not None

    def get_lines(self) -> List[Line]:
        """Segments for every undivided cell, ordered by domain."""
        if self._lines is None:
            self._lines = [cell.get_cell_geometry() for cell in self.grid.get_cells()]
            logger.debug("Built %d cell segments for %r", len(self._lines), self.grid)
        return list(self._lines)

    def invalidate(self) -> None:
        """Drop cached segments, e.g. after splitting a cell directly."""
        self._lines = None

    def close(self) -> None:
        """Stop listening to the grid."""
        self.grid.remove_change_listener(self._on_grid_change)
