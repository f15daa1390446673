# File: src/framing_grid/spatial/errors.py
"""Exceptions raised by the interval and grid subdivision engine."""


class GridError(Exception):
    """Base class for grid subdivision errors."""


class OutOfDomainError(GridError, ValueError):
    """A split or lookup position lies outside a domain."""

    def __init__(self, position: float, domain_min: float, domain_max: float):
        self.position = position
        self.domain_min = domain_min
        self.domain_max = domain_max
        super().__init__(
            f"Position {position} is outside the domain [{domain_min}, {domain_max}]"
        )


class GridAlreadySubdividedError(GridError):
    """An even division was requested on a grid that already has cells."""

    def __init__(self, message: str = None):
        super().__init__(
            message
            or "This grid already has subdivisions. "
            "Select one of its cells to divide instead."
        )


class GridConsistencyError(GridError, AssertionError):
    """Child cells no longer partition their parent's domain.

    Indicates a defect in the engine, not a caller error.
    """
