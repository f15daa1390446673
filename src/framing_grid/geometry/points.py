# File: src/framing_grid/geometry/points.py
"""
Point helpers built on rhino3dm.

Curves and cell geometry exchange points as ``rhino3dm.Point3d``. Callers may
pass plain ``(x, y)`` or ``(x, y, z)`` sequences wherever a point is accepted.
"""

from typing import Any, Sequence, Tuple, Union

import rhino3dm

# Type aliases for clarity
Point3DLike = Union[rhino3dm.Point3d, Sequence[float], Any]


def to_point3d(value: Point3DLike) -> rhino3dm.Point3d:
    """
    Convert a point-like value to a rhino3dm Point3d.

    Args:
        value: A Point3d, or a sequence of two or three numbers

    Returns:
        rhino3dm.Point3d

    Raises:
        ValueError: If the value cannot be read as a point
    """
    if isinstance(value, rhino3dm.Point3d):
        return value

    if hasattr(value, "X") and hasattr(value, "Y"):
        return rhino3dm.Point3d(
            float(value.X), float(value.Y), float(getattr(value, "Z", 0.0))
        )

    try:
        coords = [float(c) for c in value]
    except (TypeError, ValueError):
        raise ValueError(f"Cannot convert {value!r} to a point")

    if len(coords) == 2:
        coords.append(0.0)
    if len(coords) != 3:
        raise ValueError(f"Expected 2 or 3 coordinates, got {len(coords)}")

    return rhino3dm.Point3d(coords[0], coords[1], coords[2])


def point_to_tuple(point: rhino3dm.Point3d) -> Tuple[float, float, float]:
    """Extract coordinates as Python floats."""
    return (float(point.X), float(point.Y), float(point.Z))

