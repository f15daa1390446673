# File: tests/layout/test_geometry_cache.py
"""Tests for cached cell geometry driven by grid change notifications."""

import pytest

from framing_grid.geometry.points import point_to_tuple
from framing_grid.layout.geometry_cache import CellGeometryCache
from framing_grid.spatial.grid1d import Grid1d


class TestCellGeometryCache:
    """Tests for CellGeometryCache."""

    def test_lazy_build(self, grid10):
        """Test that segments are built on first read."""
        cache = CellGeometryCache(grid10)
        assert not cache.is_valid

        lines = cache.get_lines()

        assert cache.is_valid
        assert len(lines) == 1
        assert point_to_tuple(lines[0].end) == pytest.approx((10.0, 0.0, 0.0))

    def test_grid_change_invalidates(self, grid10):
        """Test that a split on the grid drops the cached segments."""
        cache = CellGeometryCache(grid10)
        cache.get_lines()

        grid10.split_at_position(4.0)

        assert not cache.is_valid
        assert cache.invalidation_count == 1
        assert len(cache.get_lines()) == 2

    def test_one_invalidation_per_division(self, grid10):
        """Test that a multi-split division invalidates once."""
        cache = CellGeometryCache(grid10)
        grid10.divide_by_fixed_length(3.0)
        assert cache.invalidation_count == 1
        assert len(cache.get_lines()) == 4

    def test_cached_lines_reused(self, grid10):
        """Test that reads without changes reuse the same segments."""
        cache = CellGeometryCache(grid10)
        first = cache.get_lines()
        second = cache.get_lines()
        assert all(a is b for a, b in zip(first, second))

    def test_direct_cell_split_needs_manual_invalidate(self, grid10):
        """Test that splitting a cell directly is not reported to the cache."""
        grid10.split_at_position(5.0)
        cache = CellGeometryCache(grid10)
        cache.get_lines()

        grid10.cells[0].split_at_position(2.0)
        assert cache.is_valid
        assert len(cache.get_lines()) == 2

        cache.invalidate()
        assert len(cache.get_lines()) == 3

    def test_close_stops_listening(self, grid10):
        """Test that a closed cache ignores later changes."""
        cache = CellGeometryCache(grid10)
        cache.get_lines()
        cache.close()

        grid10.split_at_position(4.0)

        assert cache.is_valid
        assert cache.invalidation_count == 0

    def test_context_manager(self, diagonal_wall):
        """Test use as a context manager."""
        grid = Grid1d.from_curve(diagonal_wall)
        with CellGeometryCache(grid) as cache:
            grid.divide_by_count(2)
            lines = cache.get_lines()
            assert point_to_tuple(lines[1].start) == pytest.approx((5.0, 7.0, 0.0))

        grid.split_at_position(1.0)
        assert cache.invalidation_count == 1
