#!/usr/bin/env python3
"""
Game of Life Pattern Runner

Seeds a named pattern into a fixed-size universe, runs it for a number of
generations and logs the live cell count and the detected period.
"""

import argparse
import logging
import sys

from conway_life.core import LifeError, Universe
from conway_life.patterns import PATTERNS, detect_period, get_pattern

logger = logging.getLogger(__name__)


def run_pattern(pattern_name="glider", rows=20, cols=20, generations=30, x=None, y=None):
    """Run a named pattern and return summary metrics."""
    pattern = get_pattern(pattern_name)
    height, width = pattern.shape

    # Centre the pattern unless a position was given
    if x is None:
        x = (cols - width) // 2
    if y is None:
        y = (rows - height) // 2

    universe = Universe(rows, cols)
    universe.load_pattern(pattern, x, y)

    logger.info(f"Pattern: {pattern_name} at ({x}, {y})")
    logger.info(f"Universe: {universe!r}")

    initial_live_count = universe.live_count()
    period = detect_period(universe)

    live_counts = universe.run(generations)
    for generation, live_count in enumerate(live_counts, start=1):
        if generation % 5 == 0 or generation == generations:
            logger.info(f"Generation {generation}: Live={live_count}")

    final_live_count = live_counts[-1] if live_counts else initial_live_count
    logger.info(f"Final live cells: {final_live_count}")
    logger.info(f"Behavior: {period.kind.value}, period={period.period}, "
                f"from generation {period.first_generation}")

    return {
        "pattern": pattern_name,
        "rows": rows,
        "cols": cols,
        "generations": generations,
        "initial_live_count": initial_live_count,
        "final_live_count": final_live_count,
        "live_count_history": live_counts,
        "kind": period.kind.value,
        "period": period.period,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a Game of Life pattern on a bounded grid")
    parser.add_argument("--pattern", choices=sorted(PATTERNS), default="glider",
                        help="Seed pattern (default: glider)")
    parser.add_argument("--rows", type=int, default=20, help="Grid height in cells")
    parser.add_argument("--cols", type=int, default=20, help="Grid width in cells")
    parser.add_argument("--generations", type=int, default=30, help="Generations to run")
    parser.add_argument("--x", type=int, default=None, help="Pattern top-left column")
    parser.add_argument("--y", type=int, default=None, help="Pattern top-left row")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every generation")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        run_pattern(args.pattern, args.rows, args.cols, args.generations, args.x, args.y)
    except LifeError as e:
        logger.error(f"Invalid run configuration: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
