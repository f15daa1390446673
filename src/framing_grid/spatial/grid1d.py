# File: src/framing_grid/spatial/grid1d.py
"""
Hierarchical one-dimensional grid.

A Grid1d partitions a domain (an Interval) into ordered, contiguous child
cells. Cells are themselves Grid1d instances and can be subdivided further.
A grid may be laid along a curve; every cell keeps a reference to the same
curve and to the root domain so cell extents can be mapped back onto it.

Division strategies:
    - split_at_position / split_at_parameter: split at explicit locations
    - divide_by_count: N equal cells
    - divide_by_approximate_length: N equal cells, N rounded from a target length
    - divide_by_fixed_length: fixed-size panels with remainder placement
    - divide_by_fixed_length_from_position: fixed-size panels anchored at a position

Example:
    >>> grid = Grid1d.from_length(10.0)
    >>> grid.divide_by_fixed_length(3.0, FixedDivisionMode.REMAINDER_AT_START)
    >>> [(c.domain.min, c.domain.max) for c in grid.get_cells()]
    [(0.0, 1.0), (1.0, 4.0), (4.0, 7.0), (7.0, 10.0)]

Notes:
    Grids are single-owner mutable trees. Do not split a grid while iterating
    the result of get_cells() on it or on an ancestor.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple, Union

from ..config import EDGE_TOLERANCE, REMAINDER_TOLERANCE
from ..geometry.curves import Curve, Line
from ..utils.logging_config import TRACE_LEVEL
from .errors import GridAlreadySubdividedError, GridConsistencyError, OutOfDomainError
from .interval import Interval, map_from_domain, map_to_domain

logger = logging.getLogger(__name__)


class EvenDivisionMode(Enum):
    """How a target length is rounded to a whole number of equal cells.

    Attributes:
        NEAREST: Closest count; cells may end up longer or shorter than the target
        ROUND_UP: Round the count up; cells are never longer than the target
        ROUND_DOWN: Round the count down; cells are never shorter than the target
    """
    NEAREST = "nearest"
    ROUND_UP = "round_up"
    ROUND_DOWN = "round_down"


class FixedDivisionMode(Enum):
    """Where the leftover length goes when dividing by a fixed panel size.

    Attributes:
        REMAINDER_AT_BOTH_ENDS: Split the remainder across the first and last cell
        REMAINDER_AT_START: Remainder is the first cell
        REMAINDER_AT_END: Remainder is the last cell
        REMAINDER_NEAR_MIDDLE: Remainder follows the left half of the full panels
    """
    REMAINDER_AT_BOTH_ENDS = "remainder_at_both_ends"
    REMAINDER_AT_START = "remainder_at_start"
    REMAINDER_AT_END = "remainder_at_end"
    REMAINDER_NEAR_MIDDLE = "remainder_near_middle"


def coerce_mode(enum_cls, value):
    """Accept an enum member or its string value."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.lower())
        except ValueError:
            raise ValueError(f"Unsupported {enum_cls.__name__}: {value}")
    raise ValueError(
        f"Mode must be {enum_cls.__name__} or string, got {type(value)}"
    )


@dataclass(frozen=True)
class CurveContext:
    """Curve shared by every cell of one grid tree.

    Attributes:
        curve: Curve the grid lies along, or None for a grid along the X axis
        curve_domain: Domain of the root grid when the curve was attached
    """
    curve: Optional[Curve]
    curve_domain: Interval


ChangeListener = Callable[["Grid1d"], None]


class Grid1d:
    """Node of a one-dimensional subdivision tree.

    A grid with no cells is a single cell. A subdivided grid has two or more
    cells, sorted by domain, whose domains exactly cover its own.

    Attributes:
        domain: Span of this grid
    """

    def __init__(self, domain: Interval, context: Optional[CurveContext] = None):
        if not math.isfinite(domain.length) or domain.length <= 0:
            raise ValueError(
                f"Grid domain must have positive length, got [{domain.min}, {domain.max}]"
            )

        self.domain = domain
        self._context = context or CurveContext(curve=None, curve_domain=domain)
        self._cells: List["Grid1d"] = []
        self._listeners: List[ChangeListener] = []

    @classmethod
    def from_length(cls, length: float = 1.0) -> "Grid1d":
        """Create a grid over [0, length] lying along the X axis.

        Raises:
            ValueError: If length is not a positive finite number
        """
        if not math.isfinite(length) or length <= 0:
            raise ValueError(f"Grid length must be positive, got {length}")
        return cls(Interval(0.0, float(length)))

    @classmethod
    def from_interval(cls, domain: Interval) -> "Grid1d":
        """Create a grid over an existing domain lying along the X axis."""
        return cls(domain)

    @classmethod
    def from_curve(cls, curve: Curve) -> "Grid1d":
        """Create a grid over [0, curve length] laid along a curve.

        Raises:
            ValueError: If the curve has no length
        """
        length = curve.length()
        if not math.isfinite(length) or length <= 0:
            raise ValueError(f"Curve length must be positive, got {length}")
        domain = Interval(0.0, length)
        return cls(domain, CurveContext(curve=curve, curve_domain=domain))

    def __repr__(self) -> str:
        return (
            f"Grid1d(domain=[{self.domain.min}, {self.domain.max}], "
            f"cells={len(self._cells)})"
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def cells(self) -> Tuple["Grid1d", ...]:
        """Immediate child cells; empty for a single cell."""
        return tuple(self._cells)

    @property
    def is_single_cell(self) -> bool:
        """True if this grid has no subdivisions."""
        return not self._cells

    @property
    def curve(self) -> Optional[Curve]:
        return self._context.curve

    @property
    def curve_domain(self) -> Interval:
        return self._context.curve_domain

    @property
    def context(self) -> CurveContext:
        return self._context

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def add_change_listener(self, listener: ChangeListener) -> None:
        """Register a callback invoked as listener(grid) after this grid is restructured.

        Only changes made through this grid's own methods are reported;
        listeners on cells or ancestors are not called.
        """
        self._listeners.append(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        """Unregister a callback.

        Raises:
            ValueError: If the listener was not registered
        """
        self._listeners.remove(listener)

    def _notify_change(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Splitting
    # ------------------------------------------------------------------

    def split_at_parameter(self, t: float) -> None:
        """Split at a normalized parameter from 0 to 1 along the domain."""
        self.split_at_position(map_to_domain(t, self.domain))

    def split_at_parameters(self, parameters: Iterable[float]) -> None:
        """Split at several normalized parameters, in order.

        Splits already applied stay applied if a later parameter fails.
        """
        self._apply_splits(map_to_domain(t, self.domain) for t in parameters)

    def split_at_position(self, pos: float, from_end: bool = False) -> None:
        """Split the grid at a position along its domain.

        If the grid is already subdivided, the cell containing the position
        is split and replaced by its two halves. Splitting on an existing
        cell edge leaves the grid unchanged.

        Args:
            pos: Absolute position along the domain
            from_end: If True, pos is measured back from the domain end

        Raises:
            OutOfDomainError: If pos is outside the domain; nothing is changed
        """
        if from_end:
            pos = self.domain.max - pos

        if self._split(pos):
            self._notify_change()

    def split_at_positions(self, positions: Iterable[float], from_end: bool = False) -> None:
        """Split at several positions, in order.

        Splits already applied stay applied if a later position fails.
        """
        if from_end:
            positions = (self.domain.max - pos for pos in positions)
        self._apply_splits(positions)

    def _apply_splits(self, positions: Iterable[float]) -> int:
        """Split at each position, notifying once if anything changed.

        If a position fails, the splits made before it are still reported and
        the original error is raised. A listener error on that path is logged
        rather than raised in its place.
        """
        changed = 0
        try:
            for pos in positions:
                if self._split(pos):
                    changed += 1
        except Exception:
            if changed:
                logger.debug("%r: applied %d splits before an error", self, changed)
                try:
                    self._notify_change()
                except Exception:
                    logger.exception("%r: change listener failed after a partial split", self)
            raise

        if changed:
            logger.debug("%r: applied %d splits", self, changed)
            self._notify_change()
        return changed

    def _split(self, pos: float) -> bool:
        """Split without notifying. Returns True if the tree changed."""
        if not self.domain.includes(pos):
            raise OutOfDomainError(pos, self.domain.min, self.domain.max)

        if self.is_single_cell:
            if self._is_at_edge(pos):
                logger.debug("Split at %s skipped: on edge of %r", pos, self)
                return False
            left, right = self.domain.split_at(pos)
            self._cells = [self._make_cell(left), self._make_cell(right)]
            logger.log(TRACE_LEVEL, "Split [%s, %s] at %s", self.domain.min, self.domain.max, pos)
            return True

        index = self._find_cell_index(pos)
        cell = self._cells[index]
        if not cell._split(pos):
            return False

        self._cells[index:index + 1] = cell._cells
        return True

    def _is_at_edge(self, pos: float) -> bool:
        return (
            abs(pos - self.domain.min) <= EDGE_TOLERANCE
            or abs(self.domain.max - pos) <= EDGE_TOLERANCE
        )

    def _make_cell(self, domain: Interval) -> "Grid1d":
        return Grid1d(domain, self._context)

    # ------------------------------------------------------------------
    # Division
    # ------------------------------------------------------------------

    def divide_by_count(self, n: int) -> None:
        """Divide the grid into n equal cells.

        A count of 1 leaves the grid as a single cell.

        Raises:
            GridAlreadySubdividedError: If the grid already has cells
            ValueError: If n is less than 1
        """
        if not self.is_single_cell:
            raise GridAlreadySubdividedError()

        domains = self.domain.divide_by_count(n)
        if len(domains) < 2:
            return

        self._cells = [self._make_cell(d) for d in domains]
        logger.debug("%r: divided into %d equal cells", self, n)
        self._notify_change()

    def divide_by_approximate_length(
        self,
        target_length: float,
        mode: Union[EvenDivisionMode, str] = EvenDivisionMode.NEAREST,
    ) -> None:
        """Divide into equal cells as close as possible to a target length.

        Args:
            target_length: Desired cell length
            mode: How to round the resulting cell count

        Raises:
            ValueError: If target_length is not positive or rounds to zero cells
            GridAlreadySubdividedError: If the grid already has cells
        """
        if not math.isfinite(target_length) or target_length <= 0:
            raise ValueError(f"Target length must be positive, got {target_length}")
        mode = coerce_mode(EvenDivisionMode, mode)

        num_divisions = self.domain.length / target_length
        if mode == EvenDivisionMode.ROUND_UP:
            rounded = math.ceil(num_divisions)
        elif mode == EvenDivisionMode.ROUND_DOWN:
            rounded = math.floor(num_divisions)
        else:
            rounded = round(num_divisions)

        self.divide_by_count(int(rounded))

    def divide_by_fixed_length_from_position(self, length: float, position: float) -> None:
        """Divide into cells of a fixed length anchored at a position.

        Splits are placed at position, position + length, ... up to the end of
        the domain, then at position - length, position - 2 * length, ... down
        to the start. Partial cells are left at both ends.

        Raises:
            ValueError: If length is not a positive finite number
            OutOfDomainError: If position is outside the domain
        """
        if not math.isfinite(length) or length <= 0:
            raise ValueError(f"Division length must be positive, got {length}")
        if not self.domain.includes(position):
            raise OutOfDomainError(position, self.domain.min, self.domain.max)

        positions = []
        step = 0
        while self.domain.includes(position + step * length):
            positions.append(position + step * length)
            step += 1

        step = 1
        while self.domain.includes(position - step * length):
            positions.append(position - step * length)
            step += 1

        self._apply_splits(positions)

    def divide_by_fixed_length(
        self,
        length: float,
        mode: Union[FixedDivisionMode, str] = FixedDivisionMode.REMAINDER_AT_END,
        sacrificial_panels: int = 0,
    ) -> None:
        """Divide into full panels of a fixed length plus one remainder.

        Args:
            length: Panel length
            mode: Where to place the leftover length
            sacrificial_panels: Full panels to give up so the remainder grows

        If fewer than one full panel fits, nothing happens. If the remainder
        is below REMAINDER_TOLERANCE, the grid is divided evenly instead.

        Raises:
            ValueError: If length is not positive or sacrificial_panels is negative
        """
        if not math.isfinite(length) or length <= 0:
            raise ValueError(f"Division length must be positive, got {length}")
        if sacrificial_panels < 0:
            raise ValueError(
                f"sacrificial_panels cannot be negative, got {sacrificial_panels}"
            )
        mode = coerce_mode(FixedDivisionMode, mode)

        length_to_fill = self.domain.length
        max_panel_count = int(math.floor(length_to_fill / length)) - sacrificial_panels
        if max_panel_count < 1:
            logger.debug(
                "%r: no full %s panels fit, division skipped", self, length
            )
            return

        remainder = length_to_fill - max_panel_count * length
        if remainder < REMAINDER_TOLERANCE:
            self.divide_by_count(max_panel_count)
            return

        offsets = _fixed_length_offsets(
            length_to_fill, length, max_panel_count, remainder, mode
        )
        self._apply_splits(self.domain.min + offset for offset in offsets)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_cell_at_position(self, pos: float) -> "Grid1d":
        """Return the immediate cell containing pos, or self if not subdivided.

        This does not descend below the first level of cells.

        Raises:
            OutOfDomainError: If pos is outside the domain
        """
        index = self._find_cell_index(pos)
        if index < 0:
            return self
        return self._cells[index]

    def _find_cell_index(self, pos: float) -> int:
        """Index of the immediate cell at pos; -1 for a single cell.

        A position strictly inside a cell resolves to that cell. A position on
        a shared edge resolves to the cell that starts there. The domain end
        resolves to the last cell.
        """
        if not self.domain.includes(pos):
            raise OutOfDomainError(pos, self.domain.min, self.domain.max)

        if self.is_single_cell:
            return -1

        for index, cell in enumerate(self._cells):
            if cell.domain.min < pos < cell.domain.max:
                return index

        for index, cell in enumerate(self._cells):
            if cell.domain.min == pos:
                return index

        last = len(self._cells) - 1
        if pos == self.domain.max and self._cells[last].domain.max == pos:
            return last

        raise GridConsistencyError(
            f"No cell of {self!r} contains position {pos}; "
            f"cell domains: {[(c.domain.min, c.domain.max) for c in self._cells]}"
        )

    def get_cells(self) -> List["Grid1d"]:
        """Return all undivided cells below this grid, ordered by domain.

        A single cell returns a list containing only itself. For just the
        first level of cells, use the cells property.
        """
        if self.is_single_cell:
            return [self]

        result = []
        for cell in self._cells:
            if cell.is_single_cell:
                result.append(cell)
            else:
                result.extend(cell.get_cells())
        return result

    def get_cell_geometry(self) -> Line:
        """Return the straight segment spanning this cell.

        For a grid laid along a curve, the cell's domain bounds are mapped
        through the root domain onto the curve and the segment joins the two
        curve points. Otherwise the segment lies along the X axis.
        """
        curve = self._context.curve
        if curve is None:
            return Line(
                (self.domain.min, 0.0, 0.0),
                (self.domain.max, 0.0, 0.0),
            )

        curve_domain = self._context.curve_domain
        t1 = map_from_domain(self.domain.min, curve_domain)
        t2 = map_from_domain(self.domain.max, curve_domain)

        return Line(curve.point_at_parameter(t1), curve.point_at_parameter(t2))


def _fixed_length_offsets(
    length_to_fill: float,
    length: float,
    max_panel_count: int,
    remainder: float,
    mode: FixedDivisionMode,
) -> List[float]:
    """Split offsets from the domain start for a fixed-length division."""
    offsets = []

    if mode == FixedDivisionMode.REMAINDER_AT_BOTH_ENDS:
        offsets.extend(_steps_below(remainder / 2.0, length, length_to_fill))

    elif mode == FixedDivisionMode.REMAINDER_AT_START:
        offsets.extend(_steps_below(remainder, length, length_to_fill))

    elif mode == FixedDivisionMode.REMAINDER_AT_END:
        offsets.extend(i * length for i in range(1, max_panel_count + 1))

    elif mode == FixedDivisionMode.REMAINDER_NEAR_MIDDLE:
        panels_on_left = max_panel_count // 2
        offsets.extend(i * length for i in range(1, panels_on_left + 1))
        offsets.extend(
            _steps_below(panels_on_left * length + remainder, length, length_to_fill)
        )

    return offsets


def _steps_below(start: float, step: float, limit: float) -> List[float]:
    """start, start + step, ... for every value strictly below limit."""
    values = []
    i = 0
    while start + i * step < limit:
        values.append(start + i * step)
        i += 1
    return values
