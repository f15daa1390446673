# File: src/framing_grid/geometry/__init__.py
"""
Curve and point geometry for grids laid along wall lines.

Points are rhino3dm.Point3d. Curves wrap rhino3dm Line and Arc and are
parameterized 0..1 by arc length.
"""

from .points import (
    Point3DLike,
    to_point3d,
    point_to_tuple,
)

from .curves import (
    Curve,
    Line,
    Polyline,
    Arc,
)

__all__ = [
    # Points
    "Point3DLike",
    "to_point3d",
    "point_to_tuple",
    # Curves
    "Curve",
    "Line",
    "Polyline",
    "Arc",
]
