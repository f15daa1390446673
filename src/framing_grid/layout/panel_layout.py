# File: src/framing_grid/layout/panel_layout.py
"""
Panel layout along a wall line.

Divides a wall line (a curve or a plain length) into fixed-length sheathing
panels with a single partial panel, using Grid1d.divide_by_fixed_length, and
reports each resulting cell with its position and end points.

Example:
    >>> grid, panels = layout_panels(Line((0, 0, 0), (10, 0, 0)))
    >>> [(p.u_start, p.u_end) for p in panels]
    [(0.0, 4.0), (4.0, 8.0), (8.0, 10.0)]
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from ..config import REMAINDER_TOLERANCE
from ..geometry.curves import Curve
from ..geometry.points import point_to_tuple
from ..spatial.grid1d import Grid1d
from .layout_config import LayoutConfig

logger = logging.getLogger(__name__)

WallLine = Union[Curve, float]


@dataclass
class PanelSegment:
    """One panel cell along a wall line.

    Attributes:
        index: Position of the panel from the wall start
        u_start: Start position along the wall
        u_end: End position along the wall
        start_point: Wall point at u_start (x, y, z)
        end_point: Wall point at u_end (x, y, z)
        is_full: True for a full-length panel, False for the partial one
    """
    index: int
    u_start: float
    u_end: float
    start_point: Tuple[float, float, float]
    end_point: Tuple[float, float, float]
    is_full: bool = True

    @property
    def length(self) -> float:
        return self.u_end - self.u_start

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "u_start": self.u_start,
            "u_end": self.u_end,
            "length": self.length,
            "start_point": list(self.start_point),
            "end_point": list(self.end_point),
            "is_full": self.is_full,
        }


def build_wall_grid(wall_line: WallLine) -> Grid1d:
    """Create a root grid from a curve or a length.

    Raises:
        ValueError: If the curve or length is not positive
    """
    if isinstance(wall_line, Curve):
        return Grid1d.from_curve(wall_line)
    return Grid1d.from_length(float(wall_line))


def layout_panels(
    wall_line: WallLine,
    config: Optional[LayoutConfig] = None,
) -> Tuple[Grid1d, List[PanelSegment]]:
    """Divide a wall line into fixed-length panels.

    Args:
        wall_line: Curve the wall follows, or its length
        config: Layout configuration (defaults to LayoutConfig())

    Returns:
        Tuple of (grid, panels). The grid stays available for further
        subdivision by the caller.

    Raises:
        ValueError: If the configuration or wall line is invalid
    """
    config = config or LayoutConfig()
    config.validate()

    grid = build_wall_grid(wall_line)
    grid.divide_by_fixed_length(
        config.panel_length,
        config.panel_division_mode,
        config.sacrificial_panels,
    )

    panels = panels_from_grid(grid, config.panel_length)

    logger.info(
        "Panel layout: %d panels over %.3f (%s)",
        len(panels), grid.domain.length, config.panel_division_mode.value,
    )
    return grid, panels


def panels_from_grid(grid: Grid1d, panel_length: float) -> List[PanelSegment]:
    """Describe every undivided cell of a grid as a PanelSegment.

    Args:
        grid: Grid to read
        panel_length: Nominal panel length, used to flag partial panels

    Returns:
        Panels ordered from the wall start
    """
    panels = []
    for index, cell in enumerate(grid.get_cells()):
        geometry = cell.get_cell_geometry()
        panels.append(PanelSegment(
            index=index,
            u_start=cell.domain.min,
            u_end=cell.domain.max,
            start_point=point_to_tuple(geometry.start),
            end_point=point_to_tuple(geometry.end),
            is_full=abs(cell.domain.length - panel_length) <= REMAINDER_TOLERANCE,
        ))
    return panels
