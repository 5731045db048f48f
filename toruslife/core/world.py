"""Toroidal grid state for Conway's Game of Life.

The World owns a 2D numpy array of cell states and implements neighbor
counting with wrap-around edges and the double-buffered generational
advance. Edges are seamlessly connected, so a glider leaving the right edge
re-enters on the left.
"""

import logging
from typing import Set, Tuple, Union

import numpy as np

from .cell import Cell
from .rules import next_state

logger = logging.getLogger(__name__)

# Below 3 cells a wrapped neighbor index would land on the cell itself
# or count the same neighbor twice.
MIN_DIMENSION = 3


class InvalidDimensions(ValueError):
    """Raised when a World is requested smaller than 3x3."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(
            f"the world cannot be smaller than {MIN_DIMENSION}x{MIN_DIMENSION} "
            f"(got {width}x{height})"
        )


class World:
    """2D toroidal grid of cells.

    Attributes:
        width: Grid width in cells
        height: Grid height in cells
        cells: 2D numpy uint8 array indexed [y, x] (0=dead, 1=live)
    """

    def __init__(self, width: int, height: int):
        """Initialize an all-dead world.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)

        Raises:
            InvalidDimensions: If either dimension is below 3
        """
        if width < MIN_DIMENSION or height < MIN_DIMENSION:
            raise InvalidDimensions(width, height)

        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.uint8)

        logger.debug(f"Created world {width}x{height}")

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid shape as (height, width)."""
        return (self.height, self.width)

    def get(self, x: int, y: int) -> Cell:
        """Get cell state at coordinates.

        Coordinates are not range checked.
        """
        return Cell(int(self.cells[y, x]))

    def set(self, x: int, y: int, value: Union[Cell, bool]) -> None:
        """Set cell state at coordinates.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)
            value: Cell state, or a boolean (True for live)

        Coordinates are not range checked; out-of-range indices raise
        IndexError and negative ones address from the far edge.

        Raises:
            TypeError: If value is neither a Cell nor a boolean
        """
        if not isinstance(value, (Cell, bool, np.bool_)):
            raise TypeError(f"Cell value must be a Cell or bool, got {type(value).__name__}")
        self.cells[y, x] = Cell.LIVE if value else Cell.DEAD

    def count_neighbors(self, x: int, y: int) -> int:
        """Count live cells in the Moore neighborhood with toroidal wrap.

        Args:
            x: X coordinate of cell (column)
            y: Y coordinate of cell (row)

        Returns:
            Number of living neighbors (0-8)
        """
        top = self.height - 1 if y == 0 else y - 1
        bottom = 0 if y == self.height - 1 else y + 1
        left = self.width - 1 if x == 0 else x - 1
        right = 0 if x == self.width - 1 else x + 1

        block = self.cells[np.ix_((top, y, bottom), (left, x, right))]
        return int(block.sum()) - int(self.cells[y, x])

    def advance(self, scratch: 'World') -> None:
        """Advance one generation using scratch as the write buffer.

        Every next state is computed from the unmodified current grid and
        written into scratch; scratch is then copied back over this world.

        Args:
            scratch: Distinct world with identical dimensions. Its prior
                contents are fully overwritten.

        Raises:
            ValueError: If scratch is this world or differs in shape
        """
        if scratch is self:
            raise ValueError("scratch buffer must be a separate world")
        if scratch.shape != self.shape:
            raise ValueError(
                f"scratch shape {scratch.shape} doesn't match world shape {self.shape}"
            )

        for y in range(self.height):
            for x in range(self.width):
                neighbors = self.count_neighbors(x, y)
                scratch.cells[y, x] = next_state(self.get(x, y), neighbors)

        self.cells[:] = scratch.cells

    def as_string(self) -> str:
        """Render one line per row, '.' for dead and 'O' for live."""
        dead, live = Cell.DEAD.symbol, Cell.LIVE.symbol
        lines = []
        for row in self.cells:
            line = ''.join(live if value else dead for value in row)
            lines.append(line + '\n')
        return ''.join(lines)

    def copy(self) -> 'World':
        """Create an independent world with identical contents."""
        world = World(self.width, self.height)
        world.cells[:] = self.cells
        return world

    def live_cells(self) -> Set[Tuple[int, int]]:
        """Get (x, y) coordinates of every live cell."""
        rows, cols = np.nonzero(self.cells)
        return {(int(x), int(y)) for y, x in zip(rows, cols)}

    def count_alive(self) -> int:
        """Count total number of live cells."""
        return int(np.sum(self.cells))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, World):
            return NotImplemented
        return (self.shape == other.shape and
                np.array_equal(self.cells, other.cells))

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"World({self.width}x{self.height}, alive={self.count_alive()})"
