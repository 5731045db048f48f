"""
Seed patterns.
"""

from .glider import GLIDER_OFFSETS, glider_cells, seed_glider

__all__ = ['GLIDER_OFFSETS', 'glider_cells', 'seed_glider']
