# File: src/framing_grid/spatial/__init__.py
"""
One-dimensional subdivision engine.

Provides:
- Interval: immutable closed numeric range with split/divide helpers
- Grid1d: mutable tree of cells partitioning an Interval, optionally along a curve
- Division mode enums and the error taxonomy

Example:
    >>> from framing_grid.spatial import Grid1d, FixedDivisionMode
    >>> grid = Grid1d.from_length(10.0)
    >>> grid.divide_by_fixed_length(3.0, FixedDivisionMode.REMAINDER_AT_END)
    >>> len(grid.get_cells())
    4
"""

from .errors import (
    GridError,
    OutOfDomainError,
    GridAlreadySubdividedError,
    GridConsistencyError,
)

from .interval import (
    Interval,
    map_to_domain,
    map_from_domain,
)

from .grid1d import (
    Grid1d,
    CurveContext,
    EvenDivisionMode,
    FixedDivisionMode,
)

__all__ = [
    # Errors
    "GridError",
    "OutOfDomainError",
    "GridAlreadySubdividedError",
    "GridConsistencyError",
    # Intervals
    "Interval",
    "map_to_domain",
    "map_from_domain",
    # Grids
    "Grid1d",
    "CurveContext",
    "EvenDivisionMode",
    "FixedDivisionMode",
]
