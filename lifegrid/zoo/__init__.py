"""
Creature library and grid file codecs.

Shapes are pure constructors; the codecs read and write .gol (ASCII) and
.bgol (packed binary) files. ``load``/``save`` pick the codec from the
file suffix.
"""

from pathlib import Path
from typing import Union

from ..core.grid import Grid
from ..errors import InvalidArgumentError
from .shapes import (
    glider, r_pentomino, light_weight_spaceship, blinker, block,
    corner_gliders, get_shape, SHAPES
)
from .ascii_codec import load_ascii, save_ascii, parse_ascii, format_ascii
from .binary_codec import load_binary, save_binary, decode_binary, encode_binary

ASCII_SUFFIX = '.gol'
BINARY_SUFFIX = '.bgol'


def _codec_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in (ASCII_SUFFIX, BINARY_SUFFIX):
        raise InvalidArgumentError(
            f"Unsupported grid file {path}, expected {ASCII_SUFFIX} or {BINARY_SUFFIX}")
    return suffix


def load(path: Union[str, Path]) -> Grid:
    """Load a grid, choosing the codec from the file suffix."""
    path = Path(path)
    if _codec_for(path) == ASCII_SUFFIX:
        return load_ascii(path)
    return load_binary(path)


def save(path: Union[str, Path], grid: Grid) -> None:
    """Save a grid, choosing the codec from the file suffix."""
    path = Path(path)
    if _codec_for(path) == ASCII_SUFFIX:
        save_ascii(path, grid)
    else:
        save_binary(path, grid)


__all__ = [
    'glider',
    'r_pentomino',
    'light_weight_spaceship',
    'blinker',
    'block',
    'corner_gliders',
    'get_shape',
    'SHAPES',
    'load_ascii',
    'save_ascii',
    'parse_ascii',
    'format_ascii',
    'load_binary',
    'save_binary',
    'decode_binary',
    'encode_binary',
    'load',
    'save',
]
