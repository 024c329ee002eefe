"""Core grid, world and rules for the Game of Life engine."""

from .cell import Cell
from .grid import Grid, CellCursor
from .world import World
from .rules import next_state, rule_table, SURVIVAL_COUNTS, BIRTH_COUNTS

__all__ = [
    'Cell',
    'Grid',
    'CellCursor',
    'World',
    'next_state',
    'rule_table',
    'SURVIVAL_COUNTS',
    'BIRTH_COUNTS',
]
