"""
lifegrid: Conway's Game of Life on bounded, optionally toroidal grids.

Grid is the dense cell store with its geometry (resize, crop, merge,
rotate); World advances a Grid under the Game of Life rules with a
double buffer. The zoo subpackage provides canonical creatures and the
.gol/.bgol file codecs.
"""

from .core import Cell, Grid, CellCursor, World
from .errors import OutOfBoundsError, InvalidArgumentError, FormatError, GridIOError

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'Grid',
    'CellCursor',
    'World',
    'OutOfBoundsError',
    'InvalidArgumentError',
    'FormatError',
    'GridIOError',
]
