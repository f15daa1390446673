# File: src/framing_grid/spatial/interval.py
"""
Closed numeric intervals used as grid domains.

An Interval is an immutable ``[min, max]`` range. Splitting and dividing
return new Intervals; nothing is modified in place.

Example:
    >>> wall = Interval(0.0, 10.0)
    >>> wall.split_at(4.0)
    (Interval(min=0.0, max=4.0), Interval(min=4.0, max=10.0))
    >>> [cell.length for cell in wall.divide_by_count(4)]
    [2.5, 2.5, 2.5, 2.5]
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

from .errors import OutOfDomainError


@dataclass(frozen=True)
class Interval:
    """Closed range of real numbers.

    Attributes:
        min: Start of the range
        max: End of the range, never less than min
    """
    min: float
    max: float

    def __post_init__(self):
        """Validate bounds."""
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise ValueError(
                f"Interval bounds must be finite, got [{self.min}, {self.max}]"
            )
        if self.max < self.min:
            raise ValueError(
                f"Interval max ({self.max}) must be >= min ({self.min})"
            )

    @property
    def length(self) -> float:
        """Width of the interval."""
        return self.max - self.min

    def includes(self, pos: float) -> bool:
        """Check if a value lies within [min, max], bounds included."""
        return self.min <= pos <= self.max

    def split_at(self, pos: float) -> Tuple["Interval", "Interval"]:
        """Split into [min, pos] and [pos, max].

        Raises:
            OutOfDomainError: If pos is outside the interval
        """
        if not self.includes(pos):
            raise OutOfDomainError(pos, self.min, self.max)
        return Interval(self.min, pos), Interval(pos, self.max)

    def divide_by_count(self, n: int) -> List["Interval"]:
        """Divide into n equal-width contiguous intervals.

        The first interval starts at min and the last ends exactly at max.

        Raises:
            ValueError: If n is less than 1
        """
        if n < 1:
            raise ValueError(f"Division count must be at least 1, got {n}")

        bounds = [self.min + self.length * i / n for i in range(n)]
        bounds.append(self.max)
        return [Interval(bounds[i], bounds[i + 1]) for i in range(n)]

    def map_to(self, t: float) -> float:
        """Map a normalized parameter (0..1) to a value in this interval."""
        return map_to_domain(t, self)

    def map_from(self, pos: float) -> float:
        """Map a value in this interval to its normalized parameter (0..1)."""
        return map_from_domain(pos, self)


def map_to_domain(t: float, domain: Interval) -> float:
    """Map a normalized parameter to an absolute value in a domain.

    Args:
        t: Parameter, 0 at domain.min and 1 at domain.max
        domain: Target domain

    Returns:
        domain.min + t * domain.length
    """
    return domain.min + t * domain.length


def map_from_domain(pos: float, domain: Interval) -> float:
    """Map an absolute value to its normalized fraction within a domain.

    Args:
        pos: Value to normalize
        domain: Reference domain, must have non-zero length

    Returns:
        (pos - domain.min) / domain.length

    Raises:
        ValueError: If the domain has zero length
    """
    if domain.length == 0:
        raise ValueError("Cannot map into a zero-length domain")
    return (pos - domain.min) / domain.length
