"""Simulation configuration parsed from the command line."""

import argparse
import re
from dataclasses import dataclass
from typing import List, Optional

DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 20
DEFAULT_GENERATIONS = 10
DEFAULT_DELAY_MS = 500

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SimulationConfig:
    """Parameters for one simulation run."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    generations: int = DEFAULT_GENERATIONS
    delay_ms: int = DEFAULT_DELAY_MS
    log_level: str = "WARNING"

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0


_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def _count(name: str):
    """Build an argparse type that accepts plain ASCII digits only."""
    def parse(value: str) -> int:
        if not _COUNT_PATTERN.fullmatch(value):
            raise argparse.ArgumentTypeError(f"invalid {name}: {value!r}")
        return int(value)
    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toruslife",
        description="Conway's Game of Life on a toroidal grid, seeded with a glider",
    )
    parser.add_argument("width", nargs="?", type=_count("width"),
                        default=DEFAULT_WIDTH, help="Grid width (default 40)")
    parser.add_argument("height", nargs="?", type=_count("height"),
                        default=DEFAULT_HEIGHT, help="Grid height (default 20)")
    parser.add_argument("generations", nargs="?", type=_count("generations"),
                        default=DEFAULT_GENERATIONS, help="Generations to run (default 10)")
    parser.add_argument("delay", nargs="?", type=_count("delay"),
                        default=DEFAULT_DELAY_MS,
                        help="Delay between generations in milliseconds (default 500)")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS,
                        help="Logging level for diagnostics on stderr")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> SimulationConfig:
    """Parse command line arguments into a SimulationConfig.

    Malformed values make argparse exit with status 2.
    """
    args = build_parser().parse_args(argv)
    return SimulationConfig(
        width=args.width,
        height=args.height,
        generations=args.generations,
        delay_ms=args.delay,
        log_level=args.log_level,
    )
