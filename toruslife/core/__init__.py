"""Grid state and rules for the toroidal Game of Life."""

from .cell import Cell
from .rules import BIRTH_SET, SURVIVAL_SET, next_state, rule_table
from .world import MIN_DIMENSION, InvalidDimensions, World

__all__ = [
    "Cell",
    "World",
    "InvalidDimensions",
    "MIN_DIMENSION",
    "SURVIVAL_SET",
    "BIRTH_SET",
    "next_state",
    "rule_table",
]
