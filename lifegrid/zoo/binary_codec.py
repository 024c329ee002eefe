"""Packed binary .bgol grid files.

Layout:
    bytes 0-3   width as a native-order C int
    bytes 4-7   height as a native-order C int
    bytes 8-    ceil(width*height / 8) payload bytes

Cell i (row-major, i = y*width + x) is bit (i % 8) of payload byte i // 8,
1 meaning alive. Unused high bits of the last byte are zero.
"""

from pathlib import Path
from typing import Union
import logging

import numpy as np

from ..core.grid import Grid
from ..errors import FormatError, GridIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

HEADER_DTYPE = np.dtype(np.intc)
HEADER_SIZE = 2 * HEADER_DTYPE.itemsize


def payload_size(cell_count: int) -> int:
    """Bytes needed for cell_count bits: exact when a multiple of 8, else one extra partial byte."""
    full, remainder = divmod(cell_count, 8)
    return full + (1 if remainder else 0)


def encode_binary(grid: Grid) -> bytes:
    """Encode a Grid as .bgol content."""
    header = np.array([grid.width, grid.height], dtype=HEADER_DTYPE).tobytes()
    payload = np.packbits(grid.state.ravel(), bitorder='little').tobytes()
    return header + payload


def decode_binary(data: bytes) -> Grid:
    """Decode .bgol content into a Grid.

    Raises:
        FormatError: If the header is incomplete, declares negative
            dimensions, or the payload is shorter than the declared cell count
    """
    if len(data) < HEADER_SIZE:
        raise FormatError(f"Truncated header: {len(data)} bytes, expected {HEADER_SIZE}")

    width, height = (int(v) for v in np.frombuffer(data, dtype=HEADER_DTYPE, count=2))
    if width < 0 or height < 0:
        raise FormatError(f"Negative dimensions in header: {width}x{height}")

    cell_count = width * height
    needed = payload_size(cell_count)
    payload = np.frombuffer(data, dtype=np.uint8)[HEADER_SIZE:]
    if payload.size < needed:
        raise FormatError(f"Truncated payload: {payload.size} bytes, expected {needed} "
                          f"for {width}x{height} cells")

    bits = np.unpackbits(payload[:needed], count=cell_count, bitorder='little')
    return Grid(width, height, bits.astype(bool).reshape(height, width))


def load_binary(path: PathLike) -> Grid:
    """Read a .bgol file.

    Raises:
        GridIOError: If the file cannot be read
        FormatError: If the content is truncated or malformed
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise GridIOError(f"Cannot read {path}: {e}") from e

    grid = decode_binary(data)
    logger.debug(f"Loaded {grid.width}x{grid.height} grid from {path}")
    return grid


def save_binary(path: PathLike, grid: Grid) -> None:
    """Write a Grid as a .bgol file.

    Raises:
        GridIOError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.write_bytes(encode_binary(grid))
    except OSError as e:
        raise GridIOError(f"Cannot write {path}: {e}") from e

    logger.debug(f"Saved {grid.width}x{grid.height} grid to {path}")
