# File: src/framing_grid/config/__init__.py

"""
Configuration package for the framing grid engine.
Provides the system-wide defaults shared by the grid and its layout consumers:
- Tolerances used by fixed-length division and edge detection
- Default panel and stud dimensions (feet)
- Reference units
"""

# Remainders shorter than this are treated as zero by fixed-length division,
# which then falls back to an even division. Expressed in reference units.
REMAINDER_TOLERANCE = 0.01

# Positions closer than this to an existing cell edge do not create a new cell.
EDGE_TOLERANCE = 1e-9

# Reference units for lengths passed to the grid and layout helpers
DEFAULT_UNITS = "feet"

# Framing defaults (feet)
DEFAULT_PANEL_LENGTH = 4.0   # 4x8 sheet
DEFAULT_STUD_SPACING = 1.333  # 16" OC (16/12 = 1.333)
WIDE_STUD_SPACING = 2.0       # 24" OC

# Metric equivalents (meters)
METRIC_PANEL_LENGTH = 1.2
METRIC_STUD_SPACING = 0.6

# Debug flag for development
DEBUG = False


def get_system_info() -> dict:
    """
    Returns an overview of the engine defaults.
    Useful for debugging and validation.
    """
    return {
        "units": DEFAULT_UNITS,
        "remainder_tolerance": REMAINDER_TOLERANCE,
        "edge_tolerance": EDGE_TOLERANCE,
        "defaults": {
            "panel_length": DEFAULT_PANEL_LENGTH,
            "stud_spacing": DEFAULT_STUD_SPACING,
        },
        "metric_defaults": {
            "panel_length": METRIC_PANEL_LENGTH,
            "stud_spacing": METRIC_STUD_SPACING,
        },
        "debug": DEBUG,
    }
