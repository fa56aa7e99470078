"""Still life and oscillator detection.

Runs a private copy of a universe forward and watches for a repeated
generation. The first repeat gives the period and the generation at which
the cycle was entered.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from ..core.errors import InvalidConfigurationError
from ..core.universe import Universe

logger = logging.getLogger(__name__)

DEFAULT_MAX_GENERATIONS = 256


class PatternKind(Enum):
    """Long-run behavior of a configuration."""
    EXTINCT = "extinct"          # Every cell dead
    STILL_LIFE = "still_life"    # Unchanged by ticking (period 1)
    OSCILLATOR = "oscillator"    # Repeats with period > 1
    UNSETTLED = "unsettled"      # No repeat within the generation limit


@dataclass
class PeriodResult:
    """Outcome of a period search."""
    kind: PatternKind
    period: Optional[int]     # Cycle length, None if extinct or unsettled
    first_generation: int     # Generation (relative to the input) the cycle or extinction starts
    generations_run: int      # Ticks applied to the copy


def detect_period(universe: Universe,
                  max_generations: int = DEFAULT_MAX_GENERATIONS) -> PeriodResult:
    """Classify a universe's configuration as extinct, still life or oscillator.

    The universe passed in is never ticked; a copy with the same rules is
    run instead.

    Args:
        universe: Universe whose current generation is analysed
        max_generations: Tick limit before giving up

    Returns:
        PeriodResult describing the behavior

    Raises:
        InvalidConfigurationError: If max_generations is not positive
    """
    if max_generations < 1:
        raise InvalidConfigurationError(f"max_generations must be positive, got {max_generations}")

    trial = Universe.from_array(universe.to_array(), universe.rules)
    seen: Dict[bytes, int] = {}

    for generation in range(max_generations + 1):
        if generation > 0:
            trial.tick()

        state = trial.to_array()
        if not state.any():
            logger.debug(f"Extinct at generation {generation}")
            return PeriodResult(PatternKind.EXTINCT, None, generation, generation)

        key = state.tobytes()
        if key in seen:
            first = seen[key]
            period = generation - first
            kind = PatternKind.STILL_LIFE if period == 1 else PatternKind.OSCILLATOR
            logger.debug(f"Cycle of period {period} entered at generation {first}")
            return PeriodResult(kind, period, first, generation)
        seen[key] = generation

    logger.debug(f"No cycle within {max_generations} generations")
    return PeriodResult(PatternKind.UNSETTLED, None, max_generations, max_generations)
