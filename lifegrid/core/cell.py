"""Binary cell state for the Game of Life grid."""

from enum import Enum

from ..errors import FormatError


class Cell(Enum):
    """Cell state. The value is the character used in renderings and .gol files."""
    DEAD = ' '
    ALIVE = '#'

    @property
    def is_alive(self) -> bool:
        return self is Cell.ALIVE

    @classmethod
    def from_bool(cls, alive) -> 'Cell':
        """Map a truthy flag to ALIVE, falsy to DEAD."""
        return cls.ALIVE if alive else cls.DEAD

    @classmethod
    def from_char(cls, char: str) -> 'Cell':
        """Parse a single '#' or ' ' character.

        Raises:
            FormatError: If char is any other character
        """
        if char == cls.ALIVE.value:
            return cls.ALIVE
        if char == cls.DEAD.value:
            return cls.DEAD
        raise FormatError(f"Invalid cell character {char!r}")


def as_alive(value) -> bool:
    """Normalise a Cell, cell character or bool to the stored boolean flag."""
    if isinstance(value, Cell):
        return value is Cell.ALIVE
    if isinstance(value, str):
        return Cell.from_char(value).is_alive
    return bool(value)
