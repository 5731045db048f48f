"""Cell states for the toroidal Game of Life grid."""

from enum import IntEnum


class Cell(IntEnum):
    """Two-valued cell state.

    The integer value is the cell's contribution when counted as a neighbor.
    """
    DEAD = 0
    LIVE = 1

    @property
    def symbol(self) -> str:
        """Character used when rendering the cell."""
        return _SYMBOLS[self]


_SYMBOLS = {
    Cell.DEAD: '.',
    Cell.LIVE: 'O',
}
