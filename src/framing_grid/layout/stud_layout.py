# File: src/framing_grid/layout/stud_layout.py
"""
Stud placement along a wall line.

Studs sit on the cell edges of a grid divided at the stud spacing. The bay
that does not fit the spacing is placed according to the configured
FixedDivisionMode (at the wall end by default, like a layout measured from
the wall start).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..geometry.points import point_to_tuple
from ..spatial.grid1d import Grid1d
from .layout_config import LayoutConfig
from .panel_layout import WallLine, build_wall_grid

logger = logging.getLogger(__name__)


@dataclass
class StudLocation:
    """Centerline location of one stud.

    Attributes:
        index: Position of the stud from the wall start
        u: Position along the wall
        point: Wall point at u (x, y, z)
        is_end: True for studs at either wall end
    """
    index: int
    u: float
    point: Tuple[float, float, float]
    is_end: bool = False


def layout_studs(
    wall_line: WallLine,
    config: Optional[LayoutConfig] = None,
) -> List[StudLocation]:
    """Place studs along a wall line at the configured spacing.

    Args:
        wall_line: Curve the wall follows, or its length
        config: Layout configuration (defaults to LayoutConfig())

    Returns:
        Stud locations ordered from the wall start
    """
    config = config or LayoutConfig()
    config.validate()

    grid = build_wall_grid(wall_line)
    grid.divide_by_fixed_length(config.stud_spacing, config.stud_division_mode)

    studs = studs_from_grid(grid, include_end_studs=config.include_end_studs)
    logger.info(
        "Stud layout: %d studs at %.3f spacing over %.3f",
        len(studs), config.stud_spacing, grid.domain.length,
    )
    return studs


def studs_from_grid(grid: Grid1d, include_end_studs: bool = True) -> List[StudLocation]:
    """Place one stud on every cell edge of a grid.

    Args:
        grid: Divided (or single-cell) grid
        include_end_studs: Whether to keep the studs at the grid's two ends

    Returns:
        Stud locations ordered from the grid start
    """
    cells = grid.get_cells()

    edges = []
    first_geometry = cells[0].get_cell_geometry()
    edges.append((cells[0].domain.min, first_geometry.start, True))
    for i, cell in enumerate(cells):
        geometry = first_geometry if i == 0 else cell.get_cell_geometry()
        edges.append((cell.domain.max, geometry.end, i == len(cells) - 1))

    if not include_end_studs:
        edges = [edge for edge in edges if not edge[2]]

    return [
        StudLocation(index=i, u=u, point=point_to_tuple(point), is_end=is_end)
        for i, (u, point, is_end) in enumerate(edges)
    ]
