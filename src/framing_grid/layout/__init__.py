# File: src/framing_grid/layout/__init__.py
"""
Grid consumers for wall framing layout.

This module turns a wall line into framing layout data using Grid1d:
- Layout configuration (panel length, stud spacing, remainder placement)
- Fixed-length sheathing panel layout
- Stud placement on cell edges
- Cached cell geometry invalidated by grid change notifications

Example:
    >>> from framing_grid.layout import LayoutConfig, layout_panels, layout_studs
    >>> config = LayoutConfig.for_24_oc()
    >>> grid, panels = layout_panels(12.0, config)
    >>> studs = layout_studs(12.0, config)
    >>> print(f"{len(panels)} panels, {len(studs)} studs")
    3 panels, 7 studs
"""

from .layout_config import LayoutConfig

from .panel_layout import (
    PanelSegment,
    build_wall_grid,
    layout_panels,
    panels_from_grid,
)

from .stud_layout import (
    StudLocation,
    layout_studs,
    studs_from_grid,
)

from .geometry_cache import CellGeometryCache

__all__ = [
    # Configuration
    "LayoutConfig",
    # Panels
    "PanelSegment",
    "build_wall_grid",
    "layout_panels",
    "panels_from_grid",
    # Studs
    "StudLocation",
    "layout_studs",
    "studs_from_grid",
    # Geometry cache
    "CellGeometryCache",
]
