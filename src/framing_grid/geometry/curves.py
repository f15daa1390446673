# File: src/framing_grid/geometry/curves.py
"""
Parametric curves that grids can be laid along.

Every curve is evaluated with a normalized parameter ``t`` in [0, 1] that is
proportional to arc length, so a grid position ``u`` on a curve of length L
sits at ``t = u / L``.

Example:
    >>> wall = Line((0, 0, 0), (10, 0, 0))
    >>> wall.point_at_parameter(0.25).X
    2.5
"""

import bisect
import math
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Tuple

import rhino3dm

from ..config import EDGE_TOLERANCE
from .points import Point3DLike, point_to_tuple, to_point3d


class Curve(ABC):
    """Base class for arc-length parameterized curves."""

    @abstractmethod
    def length(self) -> float:
        """Total length of the curve."""

    @abstractmethod
    def point_at_parameter(self, t: float) -> rhino3dm.Point3d:
        """Point at normalized parameter t (0 = start, 1 = end)."""

    @property
    def start_point(self) -> rhino3dm.Point3d:
        return self.point_at_parameter(0.0)

    @property
    def end_point(self) -> rhino3dm.Point3d:
        return self.point_at_parameter(1.0)

    @staticmethod
    def _check_parameter(t: float) -> float:
        """Clamp t to [0, 1], rejecting values clearly outside it."""
        if t < -EDGE_TOLERANCE or t > 1.0 + EDGE_TOLERANCE:
            raise ValueError(f"Curve parameter {t} is outside [0, 1]")
        return min(max(t, 0.0), 1.0)


class Line(Curve):
    """Straight segment between two points, backed by ``rhino3dm.Line``.

    Attributes:
        line: The underlying rhino3dm line
    """

    def __init__(self, start: Point3DLike, end: Point3DLike):
        self.line = rhino3dm.Line(to_point3d(start), to_point3d(end))

    def __repr__(self) -> str:
        return f"Line({point_to_tuple(self.start)}, {point_to_tuple(self.end)})"

    @property
    def start(self) -> rhino3dm.Point3d:
        return self.line.From

    @property
    def end(self) -> rhino3dm.Point3d:
        return self.line.To

    def length(self) -> float:
        return self.line.Length

    def point_at_parameter(self, t: float) -> rhino3dm.Point3d:
        return self.line.PointAt(self._check_parameter(t))

    @property
    def start_point(self) -> rhino3dm.Point3d:
        return self.start

    @property
    def end_point(self) -> rhino3dm.Point3d:
        return self.end

    @property
    def direction(self) -> Tuple[float, float, float]:
        """Unit direction from start to end, (0, 0, 0) for a degenerate line."""
        length = self.length()
        if length == 0:
            return (0.0, 0.0, 0.0)
        vector = self.line.Direction
        return (vector.X / length, vector.Y / length, vector.Z / length)

    def to_dict(self) -> Dict[str, Tuple[float, float, float]]:
        """Convert to dictionary of coordinate tuples."""
        return {
            "start": point_to_tuple(self.start),
            "end": point_to_tuple(self.end),
        }


class Polyline(Curve):
    """Chain of straight segments through a list of vertices.

    Each segment is a ``rhino3dm.Line``. The parameter is distributed by
    length, not by vertex index.
    """

    def __init__(self, points: Sequence[Point3DLike]):
        if len(points) < 2:
            raise ValueError("Polyline needs at least 2 points")

        self.points: List[rhino3dm.Point3d] = [to_point3d(p) for p in points]
        self.segments: List[rhino3dm.Line] = [
            rhino3dm.Line(a, b) for a, b in zip(self.points, self.points[1:])
        ]

        # Cumulative length at each vertex
        self._stations = [0.0]
        for segment in self.segments:
            self._stations.append(self._stations[-1] + segment.Length)

        if self._stations[-1] <= 0:
            raise ValueError("Polyline has zero length")

    def __repr__(self) -> str:
        return f"Polyline({len(self.points)} points, length={self.length():.3f})"

    def length(self) -> float:
        return self._stations[-1]

    def point_at_parameter(self, t: float) -> rhino3dm.Point3d:
        station = self._check_parameter(t) * self.length()

        index = bisect.bisect_right(self._stations, station) - 1
        index = min(max(index, 0), len(self.segments) - 1)

        segment = self.segments[index]
        if segment.Length == 0:
            return segment.From

        return segment.PointAt((station - self._stations[index]) / segment.Length)


class Arc(Curve):
    """Circular arc in a plane parallel to XY, backed by ``rhino3dm.Arc``.

    Attributes:
        center: Arc center; its Z is the arc's elevation
        radius: Arc radius
        start_angle: Start angle in radians, measured from +X
        end_angle: End angle in radians; less than start_angle runs clockwise
        arc: The underlying rhino3dm arc, starting at +X with the same sweep
    """

    def __init__(
        self,
        center: Point3DLike,
        radius: float,
        start_angle: float,
        end_angle: float,
    ):
        if radius <= 0:
            raise ValueError(f"Arc radius must be positive, got {radius}")
        if start_angle == end_angle:
            raise ValueError("Arc sweep must be non-zero")
        if abs(end_angle - start_angle) > 2 * math.pi + EDGE_TOLERANCE:
            raise ValueError("Arc sweep cannot exceed a full circle")

        self.center = to_point3d(center)
        self.radius = radius
        self.start_angle = start_angle
        self.end_angle = end_angle
        self.arc = rhino3dm.Arc(
            self.center, radius, min(abs(self.sweep), 2 * math.pi)
        )

    def __repr__(self) -> str:
        return (
            f"Arc(center={point_to_tuple(self.center)}, radius={self.radius}, "
            f"start_angle={self.start_angle}, end_angle={self.end_angle})"
        )

    @property
    def sweep(self) -> float:
        """Signed sweep angle in radians."""
        return self.end_angle - self.start_angle

    def length(self) -> float:
        return self.arc.Length

    def point_at_parameter(self, t: float) -> rhino3dm.Point3d:
        # Arc.PointAt takes an angle on the arc's circle
        return self.arc.PointAt(self.start_angle + self._check_parameter(t) * self.sweep)
