"""
Glider Simulation Loop

Seeds a glider into a fresh world, prints it, then repeatedly sleeps,
advances and prints for the configured number of generations.
"""

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from .config import SimulationConfig
from .core.world import World
from .patterns.glider import seed_glider

logger = logging.getLogger(__name__)


def print_world(world: World, out: TextIO) -> None:
    """Write one snapshot followed by a blank separator line."""
    print(world.as_string(), file=out, flush=True)


def run_simulation(config: SimulationConfig,
                   out: Optional[TextIO] = None,
                   sleep: Callable[[float], None] = time.sleep) -> World:
    """Run the simulation described by config.

    Args:
        config: Grid size, generation count and delay
        out: Stream receiving the snapshots (default stdout)
        sleep: Blocking delay function, called with seconds

    Returns:
        World in its final generation

    Raises:
        InvalidDimensions: If the configured grid is smaller than 3x3
    """
    out = out if out is not None else sys.stdout

    world = World(config.width, config.height)
    scratch = world.copy()
    seeded = seed_glider(world)

    logger.info(f"Starting {config.width}x{config.height} simulation: "
                f"{config.generations} generations, {config.delay_ms}ms delay")
    logger.debug(f"Glider seeded at {seeded}")

    print_world(world, out)
    for generation in range(1, config.generations + 1):
        sleep(config.delay_seconds)
        world.advance(scratch)
        logger.debug(f"Generation {generation}: live={world.count_alive()}")
        print_world(world, out)

    logger.info(f"Simulation finished with {world.count_alive()} live cells")
    return world
