"""Game of Life simulation world.

A World owns two equally sized grids: ``current`` holds the visible state
and ``next`` is the scratch buffer each step writes into before the two are
swapped. Neighbour counting can treat the grid edges as dead space or wrap
them around into a torus.
"""

from typing import Optional
import logging

from .grid import Grid
from .rules import next_state
from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# Moore neighbourhood offsets, centre excluded
NEIGHBOUR_OFFSETS = tuple((dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1)
                          if not (dx == 0 and dy == 0))


class World:
    """Double-buffered Game of Life simulation.

    Construction mirrors Grid:

        World()              # 0x0
        World(16)            # 16x16, all dead
        World(16, 8)         # 16 wide, 8 high
        World(initial_grid)  # current is a copy of initial_grid

    Attributes:
        generation: Number of steps applied since construction
    """

    def __init__(self, width=0, height: Optional[int] = None):
        if isinstance(width, Grid):
            self._current = Grid(width)
        else:
            self._current = Grid(width, height)
        self._next = Grid(self._current.width, self._current.height)
        self.generation = 0

        logger.debug(f"Created world {self.width}x{self.height}")

    @property
    def width(self) -> int:
        return self._current.width

    @property
    def height(self) -> int:
        return self._current.height

    def get_width(self) -> int:
        return self._current.width

    def get_height(self) -> int:
        return self._current.height

    def get_total_cells(self) -> int:
        return self._current.get_total_cells()

    def get_alive_cells(self) -> int:
        return self._current.get_alive_cells()

    def get_dead_cells(self) -> int:
        return self._current.get_dead_cells()

    def get_state(self) -> Grid:
        """The current grid, not a copy.

        The returned object stops being the world's state after the next
        step or resize, since buffers are swapped or reallocated.
        """
        return self._current

    def resize(self, new_width: int, new_height: Optional[int] = None) -> None:
        """Resize the current grid (keeping its overlap) and reallocate the scratch buffer."""
        self._current.resize(new_width, new_height)
        self._next = Grid(self._current.width, self._current.height)

    def count_alive_neighbours(self, x: int, y: int, toroidal: bool = False) -> int:
        """Count alive cells in the 3x3 neighbourhood around (x, y), centre excluded.

        Off-grid neighbours count as dead unless toroidal, in which case
        coordinates wrap modulo width and height.

        Returns:
            Number of alive neighbours (0-8)

        Raises:
            OutOfBoundsError: If (x, y) is not a cell of the world
        """
        self._current.get_index(x, y)

        state = self._current.state
        width, height = self.width, self.height
        count = 0

        for dx, dy in NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy

            if toroidal:
                nx %= width
                ny %= height
            elif not (0 <= nx < width and 0 <= ny < height):
                continue

            if state[ny, nx]:
                count += 1

        return count

    def step(self, toroidal: bool = False) -> None:
        """Advance one generation.

        Every cell of the scratch buffer is written from the current state,
        then the buffers are swapped without copying.
        """
        current = self._current
        if (self._next.width, self._next.height) != (current.width, current.height):
            # current was resized through get_state()
            self._next = Grid(current.width, current.height)

        for y in range(self.height):
            for x in range(self.width):
                neighbours = self.count_alive_neighbours(x, y, toroidal)
                with self._next.cursor(x, y) as cell:
                    cell.value = next_state(current.get(x, y), neighbours)

        self._current, self._next = self._next, self._current
        self.generation += 1

    def advance(self, steps: int, toroidal: bool = False) -> None:
        """Apply step(toroidal) exactly steps times.

        Raises:
            InvalidArgumentError: If steps is negative
        """
        if steps < 0:
            raise InvalidArgumentError(f"Cannot advance a negative number of steps ({steps})")

        for _ in range(steps):
            self.step(toroidal)

        logger.debug(f"Advanced {steps} steps (toroidal={toroidal}) to generation "
                     f"{self.generation}, alive={self.get_alive_cells()}")

    def __str__(self) -> str:
        return self._current.render()

    def __repr__(self) -> str:
        return (f"World({self.width}x{self.height}, generation={self.generation}, "
                f"alive={self.get_alive_cells()})")
