# File: src/framing_grid/layout/layout_config.py
"""
Layout configuration for grid-based panel and stud placement.

Example:
    >>> config = LayoutConfig(
    ...     panel_length=4.0,
    ...     panel_division_mode=FixedDivisionMode.REMAINDER_NEAR_MIDDLE,
    ... )
    >>> config.validate()
    []
"""

from dataclasses import dataclass, field
from typing import List

from ..config import (
    DEFAULT_PANEL_LENGTH,
    DEFAULT_STUD_SPACING,
    METRIC_PANEL_LENGTH,
    METRIC_STUD_SPACING,
    WIDE_STUD_SPACING,
)
from ..spatial.grid1d import FixedDivisionMode, coerce_mode


@dataclass
class LayoutConfig:
    """Parameters for dividing a wall line into panels and stud bays.

    Attributes:
        panel_length: Full sheathing panel length (default 4.0 ft)
        panel_division_mode: Where the partial panel goes
        sacrificial_panels: Full panels given up to lengthen the partial panel
        stud_spacing: On-center stud spacing (default 1.333 ft, 16" OC)
        stud_division_mode: Where the short stud bay goes
        include_end_studs: Whether studs are placed at both wall ends

    Example:
        >>> config = LayoutConfig(stud_spacing=2.0)
        >>> config.validate()  # Raises ValueError if invalid
    """
    # Panels
    panel_length: float = DEFAULT_PANEL_LENGTH
    panel_division_mode: FixedDivisionMode = field(
        default_factory=lambda: FixedDivisionMode.REMAINDER_AT_END
    )
    sacrificial_panels: int = 0

    # Studs
    stud_spacing: float = DEFAULT_STUD_SPACING
    stud_division_mode: FixedDivisionMode = field(
        default_factory=lambda: FixedDivisionMode.REMAINDER_AT_END
    )
    include_end_studs: bool = True

    def __post_init__(self):
        """Convert division mode strings to enums if needed."""
        self.panel_division_mode = coerce_mode(FixedDivisionMode, self.panel_division_mode)
        self.stud_division_mode = coerce_mode(FixedDivisionMode, self.stud_division_mode)

    def validate(self) -> List[str]:
        """Validate configuration parameters.

        Returns:
            List of validation error messages (empty if valid)

        Raises:
            ValueError: If any validation fails
        """
        errors = []

        if self.panel_length <= 0:
            errors.append("panel_length must be positive")
        if self.sacrificial_panels < 0:
            errors.append("sacrificial_panels cannot be negative")
        if self.stud_spacing <= 0:
            errors.append("stud_spacing must be positive")
        if self.stud_spacing > self.panel_length > 0:
            errors.append(
                f"stud_spacing ({self.stud_spacing}) cannot exceed "
                f"panel_length ({self.panel_length})"
            )

        if errors:
            raise ValueError("LayoutConfig validation failed:\n" + "\n".join(errors))

        return errors

    def to_dict(self) -> dict:
        """Convert config to dictionary.

        Returns:
            Dictionary representation of config
        """
        return {
            "panel_length": self.panel_length,
            "panel_division_mode": self.panel_division_mode.value,
            "sacrificial_panels": self.sacrificial_panels,
            "stud_spacing": self.stud_spacing,
            "stud_division_mode": self.stud_division_mode.value,
            "include_end_studs": self.include_end_studs,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LayoutConfig":
        """Create config from dictionary.

        Args:
            data: Dictionary with config parameters

        Returns:
            LayoutConfig instance
        """
        return cls(
            panel_length=data.get("panel_length", DEFAULT_PANEL_LENGTH),
            panel_division_mode=data.get("panel_division_mode", "remainder_at_end"),
            sacrificial_panels=data.get("sacrificial_panels", 0),
            stud_spacing=data.get("stud_spacing", DEFAULT_STUD_SPACING),
            stud_division_mode=data.get("stud_division_mode", "remainder_at_end"),
            include_end_studs=data.get("include_end_studs", True),
        )

    @classmethod
    def for_16_oc(cls) -> "LayoutConfig":
        """Create config for 16" on-center studs and 4 ft panels."""
        return cls(stud_spacing=DEFAULT_STUD_SPACING)

    @classmethod
    def for_24_oc(cls) -> "LayoutConfig":
        """Create config for 24" on-center studs and 4 ft panels."""
        return cls(stud_spacing=WIDE_STUD_SPACING)

    @classmethod
    def for_metric(cls) -> "LayoutConfig":
        """Create config for 1.2 m panels and 600 mm stud spacing (meters)."""
        return cls(
            panel_length=METRIC_PANEL_LENGTH,
            stud_spacing=METRIC_STUD_SPACING,
        )
