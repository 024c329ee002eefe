"""
Conway's Game of Life transition rules.

The classic B3/S23 rule set; no other rules are supported.
"""

from typing import Dict, FrozenSet, Tuple

from .cell import Cell


SURVIVAL_COUNTS: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbours
BIRTH_COUNTS: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbours


def next_state(cell: Cell, live_neighbours: int) -> Cell:
    """Apply Conway's rules to determine the next cell state.

    Args:
        cell: Current cell state
        live_neighbours: Number of live neighbours (0-8)

    Returns:
        Next cell state
    """
    if cell is Cell.ALIVE:
        return Cell.ALIVE if live_neighbours in SURVIVAL_COUNTS else Cell.DEAD
    return Cell.ALIVE if live_neighbours in BIRTH_COUNTS else Cell.DEAD


def rule_table() -> Dict[Tuple[Cell, int], Cell]:
    """Every (state, neighbour count) pair mapped to its outcome."""
    return {
        (cell, neighbours): next_state(cell, neighbours)
        for cell in (Cell.DEAD, Cell.ALIVE)
        for neighbours in range(9)
    }
