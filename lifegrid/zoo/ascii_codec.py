"""Plain-text .gol grid files.

Layout:

    <width> <height>\\n
    <row 0: width characters of '#' or ' '>\\n
    ...
    <row height-1>\\n

Rows must be exactly width characters and each one must end with a newline.
Anything after the last declared row is ignored.
"""

from pathlib import Path
from typing import Tuple, Union
import logging

import numpy as np

from ..core.cell import Cell
from ..core.grid import Grid
from ..errors import FormatError, GridIOError, InvalidArgumentError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _parse_header(line: str) -> Tuple[int, int]:
    fields = line.split()
    if len(fields) != 2:
        raise FormatError(f"Header must be '<width> <height>', got {line!r}")
    try:
        width, height = int(fields[0]), int(fields[1])
    except ValueError:
        raise FormatError(f"Header dimensions are not integers: {line!r}") from None
    if width <= 0 or height <= 0:
        raise FormatError(f"Width and height must be positive, got {width}x{height}")
    return width, height


def parse_ascii(text: str) -> Grid:
    """Decode .gol content into a Grid.

    Raises:
        FormatError: On a bad header, short/long or unterminated row, or a
            cell character other than '#' and ' '
    """
    # A trailing '\n' leaves an empty final element, so every element but
    # the last was newline-terminated.
    lines = text.split('\n')
    width, height = _parse_header(lines[0])

    terminated = len(lines) - 1
    state = np.zeros((height, width), dtype=bool)
    for y in range(height):
        line_no = y + 1
        if line_no >= terminated:
            if line_no < len(lines) and lines[line_no]:
                raise FormatError(f"Row {y} is missing its terminating newline")
            raise FormatError(f"Expected {height} rows, found {y}")

        row = lines[line_no]
        if len(row) != width:
            raise FormatError(f"Row {y} has {len(row)} cells, expected {width}")
        for x, char in enumerate(row):
            state[y, x] = Cell.from_char(char).is_alive

    return Grid(width, height, state)


def format_ascii(grid: Grid) -> str:
    """Encode a Grid as .gol content.

    Raises:
        InvalidArgumentError: If the grid has a zero width or height, which
            the .gol header cannot express
    """
    if grid.width <= 0 or grid.height <= 0:
        raise InvalidArgumentError(
            f"Cannot encode {grid.width}x{grid.height} grid as .gol, dimensions must be positive")
    lines = [f"{grid.width} {grid.height}"]
    for row in grid.state:
        lines.append(''.join(Cell.ALIVE.value if alive else Cell.DEAD.value for alive in row))
    return '\n'.join(lines) + '\n'


def load_ascii(path: PathLike) -> Grid:
    """Read a .gol file.

    Raises:
        GridIOError: If the file cannot be read
        FormatError: If the content is malformed
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='ascii', newline='') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise FormatError(f"{path} is not an ASCII .gol file: {e}") from e
    except OSError as e:
        raise GridIOError(f"Cannot read {path}: {e}") from e

    # Accept CRLF files written on Windows
    text = text.replace('\r\n', '\n')
    grid = parse_ascii(text)
    logger.debug(f"Loaded {grid.width}x{grid.height} grid from {path}")
    return grid


def save_ascii(path: PathLike, grid: Grid) -> None:
    """Write a Grid as a .gol file.

    Raises:
        InvalidArgumentError: If the grid has a zero width or height
        GridIOError: If the file cannot be written
    """
    path = Path(path)
    content = format_ascii(grid)
    try:
        with open(path, 'w', encoding='ascii', newline='\n') as f:
            f.write(content)
    except OSError as e:
        raise GridIOError(f"Cannot write {path}: {e}") from e

    logger.debug(f"Saved {grid.width}x{grid.height} grid to {path}")
