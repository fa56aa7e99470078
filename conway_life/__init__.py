"""
Conway's Game of Life on a fixed-size, hard-edged grid.

Build a Universe, seed it, tick it, read it back:

    universe = Universe(rows=5, cols=5)
    universe.seed([(1, 2), (2, 2), (3, 2)])
    universe.tick()
    universe.is_alive(2, 1)  # True
"""

from .core import (
    Cell,
    InvalidConfigurationError,
    LifeError,
    OutOfBoundsError,
    RuleParams,
    StaleGenerationError,
    TickEngine,
    Universe,
)

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'InvalidConfigurationError',
    'LifeError',
    'OutOfBoundsError',
    'RuleParams',
    'StaleGenerationError',
    'TickEngine',
    'Universe',
]
