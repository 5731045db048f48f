"""Command line entry point for the toroidal Game of Life."""

import logging
import sys
from typing import List, Optional

from .config import parse_args
from .core.world import InvalidDimensions
from .simulation import run_simulation

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the simulation and return the process exit status."""
    config = parse_args(argv)

    logging.basicConfig(level=config.log_level,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        run_simulation(config)
    except InvalidDimensions as e:
        logger.error(f"Simulation failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
