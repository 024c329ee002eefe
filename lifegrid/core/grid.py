"""Dense cell store and 2D geometry for the Game of Life.

The grid keeps its cells in a numpy boolean array of shape (height, width)
in row-major order, so ``state.ravel()`` is the flat sequence with
index ``y * width + x``. All coordinate access is bounds-checked; wrap-around
is a stepping policy owned by World and never applied here.
"""

import numpy as np
from typing import Iterable, List, Optional, Tuple
import logging

from .cell import Cell, as_alive
from ..errors import InvalidArgumentError, OutOfBoundsError

logger = logging.getLogger(__name__)


class CellCursor:
    """Checked handle to one stored cell.

    Acquired through ``Grid.cursor(x, y)``; the bounds check happens once on
    acquisition, reads and writes then go straight to storage. Usable as a
    context manager to keep its lifetime to a single block.
    """

    __slots__ = ('_state', '_row', '_col')

    def __init__(self, state: np.ndarray, x: int, y: int):
        self._state = state
        self._row = y
        self._col = x

    @property
    def value(self) -> Cell:
        return Cell.ALIVE if self._state[self._row, self._col] else Cell.DEAD

    @value.setter
    def value(self, value) -> None:
        self._state[self._row, self._col] = as_alive(value)

    @property
    def is_alive(self) -> bool:
        return bool(self._state[self._row, self._col])

    def __enter__(self) -> 'CellCursor':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._state = None


class Grid:
    """Rectangular grid of DEAD/ALIVE cells.

    Construction mirrors the usual forms:

        Grid()            # 0x0 empty grid
        Grid(8)           # 8x8, all DEAD
        Grid(8, 4)        # 8 wide, 4 high, all DEAD
        Grid(other)       # independent copy of another Grid

    Attributes:
        width: Grid width in cells
        height: Grid height in cells
        state: 2D numpy boolean array indexed [y, x] (True=alive)
    """

    def __init__(self, width=0, height: Optional[int] = None,
                 initial_state: Optional[np.ndarray] = None):
        """Initialize grid with given dimensions.

        Args:
            width: Grid width, or an existing Grid to copy
            height: Grid height (defaults to width for a square grid)
            initial_state: Optional boolean array of shape (height, width)

        Raises:
            InvalidArgumentError: If a dimension is negative or initial_state
                does not match the requested size
        """
        if isinstance(width, Grid):
            source = width
            self.width = source.width
            self.height = source.height
            self.state = source.state.copy()
            return

        if height is None:
            height = width
        width, height = _check_dimensions(width, height)

        self.width = width
        self.height = height

        if initial_state is not None:
            initial_state = np.asarray(initial_state)
            if initial_state.shape != (height, width):
                raise InvalidArgumentError(
                    f"Initial state shape {initial_state.shape} doesn't match grid size {(height, width)}")
            if initial_state.dtype != bool:
                raise InvalidArgumentError("Initial state must be boolean array")
            self.state = np.array(initial_state, dtype=bool, order='C')
        else:
            self.state = np.zeros((height, width), dtype=bool)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> 'Grid':
        """Build a grid from equal-length strings of '#' and ' '.

        Args:
            rows: One string per row, top to bottom

        Returns:
            Grid: New grid sized to the rows

        Raises:
            InvalidArgumentError: If rows differ in length
            FormatError: If a character is neither '#' nor ' '
        """
        rows = list(rows)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise InvalidArgumentError("All rows must have the same length")

        state = np.array([[as_alive(ch) for ch in row] for row in rows],
                         dtype=bool).reshape(len(rows), width)
        return cls(width, len(rows), state)

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid."""
        return Grid(self)

    def clear(self) -> None:
        """Reset all cells to dead state."""
        self.state.fill(False)

    # Element access

    def _check_coordinates(self, x: int, y: int) -> None:
        if not 0 <= x < self.width:
            raise OutOfBoundsError(f"x={x} out of bounds for {self.width}x{self.height} grid")
        if not 0 <= y < self.height:
            raise OutOfBoundsError(f"y={y} out of bounds for {self.width}x{self.height} grid")

    def get_index(self, x: int, y: int) -> int:
        """Flat row-major index of (x, y)."""
        self._check_coordinates(x, y)
        return y * self.width + x

    def get(self, x: int, y: int) -> Cell:
        """Get cell state at coordinates.

        Raises:
            OutOfBoundsError: If coordinates are out of bounds
        """
        self._check_coordinates(x, y)
        return Cell.ALIVE if self.state[y, x] else Cell.DEAD

    def set(self, x: int, y: int, value) -> None:
        """Set cell state at coordinates.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)
            value: Cell, or bool where True means ALIVE

        Raises:
            OutOfBoundsError: If coordinates are out of bounds
        """
        self._check_coordinates(x, y)
        self.state[y, x] = as_alive(value)

    def cursor(self, x: int, y: int) -> CellCursor:
        """Acquire a checked read/write handle to the cell at (x, y).

        Raises:
            OutOfBoundsError: If coordinates are out of bounds
        """
        self._check_coordinates(x, y)
        return CellCursor(self.state, x, y)

    def __getitem__(self, key: Tuple[int, int]) -> Cell:
        """Access cell state using grid[x, y] syntax."""
        x, y = key
        return self.get(x, y)

    def __setitem__(self, key: Tuple[int, int], value) -> None:
        """Set cell state using grid[x, y] = value syntax."""
        x, y = key
        self.set(x, y, value)

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """All cells as a flat row-major sequence."""
        return tuple(Cell.ALIVE if alive else Cell.DEAD for alive in self.state.ravel())

    # Counting

    def get_total_cells(self) -> int:
        return self.width * self.height

    def get_alive_cells(self) -> int:
        return int(np.count_nonzero(self.state))

    def get_dead_cells(self) -> int:
        return self.get_total_cells() - self.get_alive_cells()

    def alive_coordinates(self) -> List[Tuple[int, int]]:
        """Sorted (x, y) positions of all alive cells."""
        rows, cols = np.nonzero(self.state)
        return sorted(zip(cols.tolist(), rows.tolist()))

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Half-open box (x0, y0, x1, y1) around alive cells, None if none are alive."""
        if not self.state.any():
            return None

        rows, cols = np.nonzero(self.state)
        return (int(cols.min()), int(rows.min()), int(cols.max()) + 1, int(rows.max()) + 1)

    # Geometry

    def resize(self, new_width: int, new_height: Optional[int] = None) -> None:
        """Resize in place, keeping the overlapping top-left region.

        Cells inside both the old and new bounds keep their value, newly
        introduced cells are DEAD and cells outside the new bounds are
        discarded. The same rule covers growing, shrinking and mixed resizes.

        Args:
            new_width: New width (or square size if new_height is omitted)
            new_height: New height

        Raises:
            InvalidArgumentError: If a dimension is negative
        """
        if new_height is None:
            new_height = new_width
        new_width, new_height = _check_dimensions(new_width, new_height)

        keep_w = min(self.width, new_width)
        keep_h = min(self.height, new_height)

        resized = np.zeros((new_height, new_width), dtype=bool)
        resized[:keep_h, :keep_w] = self.state[:keep_h, :keep_w]

        logger.debug(f"Resized grid {self.width}x{self.height} -> {new_width}x{new_height}")
        self.width = new_width
        self.height = new_height
        self.state = resized

    def crop(self, x0: int, y0: int, x1: int, y1: int) -> 'Grid':
        """Extract the window [x0, x1) x [y0, y1) as a new grid.

        The receiver is left unchanged.

        Raises:
            InvalidArgumentError: If a coordinate lies outside [0, width] x
                [0, height] or the window has negative size
        """
        for name, value, limit in (('x0', x0, self.width), ('x1', x1, self.width),
                                   ('y0', y0, self.height), ('y1', y1, self.height)):
            if not 0 <= value <= limit:
                raise InvalidArgumentError(f"{name}={value} is not a valid coordinate for "
                                           f"{self.width}x{self.height} grid")
        if x1 < x0 or y1 < y0:
            raise InvalidArgumentError(f"Window ({x0}, {y0})-({x1}, {y1}) has a negative size")

        return Grid(x1 - x0, y1 - y0, self.state[y0:y1, x0:x1])

    def merge(self, other: 'Grid', x0: int, y0: int, alive_only: bool = False) -> None:
        """Overlay another grid with its top-left corner at (x0, y0).

        Plain merge copies every cell of other's footprint, dead or alive.
        With alive_only the result is the logical OR of both grids, so alive
        cells are never killed.

        Raises:
            InvalidArgumentError: If other does not fit inside this grid at
                the given offset (nothing is modified)
        """
        if x0 < 0 or y0 < 0 or x0 + other.width > self.width or y0 + other.height > self.height:
            raise InvalidArgumentError(
                f"{other.width}x{other.height} grid doesn't fit at ({x0}, {y0}) "
                f"within {self.width}x{self.height} grid")

        window = self.state[y0:y0 + other.height, x0:x0 + other.width]
        if alive_only:
            window |= other.state
        else:
            window[:] = other.state

    def rotate(self, rotation: int) -> 'Grid':
        """Return a copy rotated by a multiple of 90 degrees.

        Positive rotation turns clockwise, negative counter-clockwise. The
        count is reduced modulo 4 first, so the cost is one pass over the
        cells whatever the magnitude. For a clockwise quarter turn the
        result is height x width with result(x, y) == source(y, height-1-x).
        """
        turns = rotation % 4
        if turns == 0:
            return self.copy()

        # np.rot90 turns counter-clockwise for positive k
        rotated = np.ascontiguousarray(np.rot90(self.state, k=-turns))
        height, width = rotated.shape
        return Grid(width, height, rotated)

    # Rendering

    def render(self) -> str:
        """Bordered ASCII block: '#' for alive, ' ' for dead."""
        border = '+' + '-' * self.width + '+'
        lines = [border]
        for row in self.state:
            lines.append('|' + ''.join(Cell.ALIVE.value if alive else Cell.DEAD.value
                                       for alive in row) + '|')
        lines.append(border)
        return '\n'.join(lines)

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid."""
        if not isinstance(other, Grid):
            return False
        return (self.width == other.width and
                self.height == other.height and
                np.array_equal(self.state, other.state))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"Grid({self.width}x{self.height}, alive={self.get_alive_cells()})"


def _check_dimensions(width: int, height: int) -> Tuple[int, int]:
    if width < 0 or height < 0:
        raise InvalidArgumentError(f"Grid dimensions must be non-negative, got {width}x{height}")
    return int(width), int(height)
