# File: src/framing_grid/__init__.py
"""
Framing grid: hierarchical one-dimensional subdivision of wall lines.

Subpackages:
    spatial: Interval and Grid1d subdivision engine
    geometry: Curves and points (rhino3dm)
    layout: Panel and stud layout built on Grid1d
    config: Engine defaults
    utils: Logging configuration
"""

from .spatial import (
    Interval,
    Grid1d,
    EvenDivisionMode,
    FixedDivisionMode,
    GridError,
    OutOfDomainError,
    GridAlreadySubdividedError,
    GridConsistencyError,
)
from .geometry import Curve, Line, Polyline, Arc

__version__ = "0.1.0"

__all__ = [
    "Interval",
    "Grid1d",
    "EvenDivisionMode",
    "FixedDivisionMode",
    "GridError",
    "OutOfDomainError",
    "GridAlreadySubdividedError",
    "GridConsistencyError",
    "Curve",
    "Line",
    "Polyline",
    "Arc",
]
