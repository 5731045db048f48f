"""
Conway's Game of Life Rules

Classic B3/S23 rule table. Evaluation is a pure function of the current
cell state and its live neighbor count; no history is consulted.
"""

from typing import Dict, Set, Tuple

from .cell import Cell


# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


def next_state(cell: Cell, live_neighbors: int) -> Cell:
    """Apply Conway's rules to determine next cell state.

    Args:
        cell: Current cell state
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state
    """
    if cell == Cell.LIVE:
        # Underpopulation below 2, overpopulation above 3
        return Cell.LIVE if live_neighbors in SURVIVAL_SET else Cell.DEAD
    else:
        # Reproduction
        return Cell.LIVE if live_neighbors in BIRTH_SET else Cell.DEAD


def rule_table() -> Dict[Tuple[Cell, int], Cell]:
    """Get the complete rule table.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    rules = {}

    for cell in Cell:
        for neighbors in range(9):
            rules[(cell, neighbors)] = next_state(cell, neighbors)

    return rules
