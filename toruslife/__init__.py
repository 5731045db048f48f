"""Conway's Game of Life on a toroidal grid."""

from .config import SimulationConfig
from .core import Cell, InvalidDimensions, World
from .simulation import run_simulation

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "World",
    "InvalidDimensions",
    "SimulationConfig",
    "run_simulation",
]
