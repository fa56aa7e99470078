"""Simulation core: cells, the universe grid, rules and the tick engine."""

from .cell import ALIVE, DEAD, Cell
from .engine import Generation, TickEngine, default_engine
from .errors import InvalidConfigurationError, LifeError, OutOfBoundsError, StaleGenerationError
from .rules import BIRTH_SET, SURVIVAL_SET, RuleParams, next_state
from .universe import NEIGHBOR_OFFSETS, Universe

__all__ = [
    'ALIVE',
    'DEAD',
    'Cell',
    'Generation',
    'TickEngine',
    'default_engine',
    'LifeError',
    'InvalidConfigurationError',
    'OutOfBoundsError',
    'StaleGenerationError',
    'BIRTH_SET',
    'SURVIVAL_SET',
    'RuleParams',
    'next_state',
    'NEIGHBOR_OFFSETS',
    'Universe',
]
