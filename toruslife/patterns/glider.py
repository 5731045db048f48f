"""Glider seed for the simulation.

The glider is placed around the grid midpoint:

    ..O
    O.O
    .OO

It translates by one cell down and to the right every 4 generations.
"""

from typing import List, Tuple

from ..core.cell import Cell
from ..core.world import World

# (dx, dy) offsets relative to the grid midpoint
GLIDER_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (1, -1),
    (-1, 0),
    (1, 0),
    (0, 1),
    (1, 1),
)

GLIDER_PERIOD = 4
GLIDER_DISPLACEMENT = (1, 1)


def glider_cells(mx: int, my: int) -> List[Tuple[int, int]]:
    """Get glider cell coordinates centred on (mx, my)."""
    return [(mx + dx, my + dy) for dx, dy in GLIDER_OFFSETS]


def seed_glider(world: World) -> List[Tuple[int, int]]:
    """Set the five glider cells live around the world's midpoint.

    Returns:
        Coordinates of the seeded cells
    """
    cells = glider_cells(world.width // 2, world.height // 2)
    for x, y in cells:
        world.set(x, y, Cell.LIVE)
    return cells
