"""Canonical Game of Life creatures.

Each factory returns a fresh Grid sized exactly to the creature's bounding
box, ready to be merged into a larger grid or handed to a World.
"""

from typing import Callable, Dict

from ..core.grid import Grid
from ..errors import InvalidArgumentError


def glider() -> Grid:
    """3x3 glider, travels (+1, +1) every 4 generations."""
    return Grid.from_rows([
        ' # ',
        '  #',
        '###',
    ])


def r_pentomino() -> Grid:
    """3x3 r-pentomino, a methuselah that explodes for ~1100 generations."""
    return Grid.from_rows([
        ' ##',
        '## ',
        ' # ',
    ])


def light_weight_spaceship() -> Grid:
    """5x4 lightweight spaceship, travels left 2 cells every 4 generations."""
    return Grid.from_rows([
        ' #  #',
        '#    ',
        '#   #',
        '#### ',
    ])


def blinker() -> Grid:
    """Horizontal 3x1 blinker (period 2 oscillator)."""
    return Grid.from_rows(['###'])


def block() -> Grid:
    """Stable 2x2 block still life."""
    return Grid.from_rows(['##', '##'])


SHAPES: Dict[str, Callable[[], Grid]] = {
    'glider': glider,
    'r_pentomino': r_pentomino,
    'light_weight_spaceship': light_weight_spaceship,
    'blinker': blinker,
    'block': block,
}


def get_shape(name: str) -> Grid:
    """Build a named creature.

    Raises:
        InvalidArgumentError: If name is not a known shape
    """
    try:
        factory = SHAPES[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown shape {name!r}, expected one of {sorted(SHAPES)}") from None
    return factory()


def corner_gliders(width: int, height: int) -> Grid:
    """Four gliders in the corners flying towards an r-pentomino at the centre.

    Gliders are rotated 0, 90, 180 and 270 degrees and merged alive-only, one
    cell in from each edge.

    Raises:
        InvalidArgumentError: If the grid is too small to hold the scene
    """
    if width < 10 or height < 10:
        raise InvalidArgumentError(f"Corner glider scene needs at least 10x10, got {width}x{height}")

    grid = Grid(width, height)
    base = glider()

    nw = base
    ne = base.rotate(1)
    se = base.rotate(2)
    sw = base.rotate(3)

    grid.merge(nw, 1, 1, alive_only=True)
    grid.merge(ne, width - 1 - ne.width, 1, alive_only=True)
    grid.merge(se, width - 1 - se.width, height - 1 - se.height, alive_only=True)
    grid.merge(sw, 1, height - 1 - sw.height, alive_only=True)

    grid.merge(r_pentomino(), width // 2 - 1, height // 2 - 1, alive_only=True)
    return grid
