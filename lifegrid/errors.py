"""Exception types raised by the lifegrid package.

Each one subclasses the builtin that plain-Python callers already catch
(IndexError, ValueError, OSError).
"""


class OutOfBoundsError(IndexError):
    """Coordinate access outside the grid extent."""


class InvalidArgumentError(ValueError):
    """Argument rejected before any state was mutated (bad window, offset, size)."""


class FormatError(ValueError):
    """Malformed .gol or .bgol content."""


class GridIOError(OSError):
    """File could not be opened, read or written."""
