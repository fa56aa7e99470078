"""Conway's Game of Life tick engine.

Advances a Universe one generation in two phases. The decide phase reads
the current generation and records, for every cell, what it becomes. The
commit phase applies all recorded decisions at once. No decision ever sees
a state written during the same tick.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .cell import Cell
from .errors import StaleGenerationError
from .rules import RuleParams

if TYPE_CHECKING:
    from .universe import Universe

logger = logging.getLogger(__name__)


@dataclass
class Generation:
    """Next-generation decisions computed against an unchanged grid."""
    number: int                                         # Generation the decisions produce
    universe: 'Universe' = field(repr=False, compare=False)  # Universe decided from
    revision: int = 0                                   # Universe revision decided against
    to_live: List[Cell] = field(default_factory=list)   # Cells alive next generation
    to_die: List[Cell] = field(default_factory=list)    # Live cells that die
    births: int = 0                                     # Dead cells coming alive

    @property
    def deaths(self) -> int:
        return len(self.to_die)

    @property
    def live_count(self) -> int:
        return len(self.to_live)


class TickEngine:
    """Generation-advance driver.

    Stateless; the rules come from the universe being ticked, so one
    engine can drive any number of independent universes.
    """

    def decide(self, universe: 'Universe') -> Generation:
        """Compute the next generation without changing any cell.

        Args:
            universe: Universe in its current generation

        Returns:
            Generation holding the cells to bring alive and to kill
        """
        rules = universe.rules
        decision = Generation(number=universe.generation + 1,
                              universe=universe,
                              revision=universe.revision)

        for cell in universe.cells():
            neighbors = len(universe.live_neighbors(cell))
            alive = cell.is_alive

            if rules.next_state(alive, neighbors):
                decision.to_live.append(cell)
                if not alive:
                    decision.births += 1
            elif alive:
                decision.to_die.append(cell)

        return decision

    def commit(self, universe: 'Universe', decision: Generation) -> None:
        """Apply a decided generation to the universe it was computed from.

        Args:
            universe: Universe to update (modified in-place)
            decision: Result of decide() on this universe

        Raises:
            StaleGenerationError: If the decision came from another universe,
                or the universe changed after it was decided
        """
        if decision.universe is not universe:
            raise StaleGenerationError(
                f"Generation {decision.number} was decided for a different universe")
        if decision.revision != universe.revision:
            raise StaleGenerationError(
                f"Universe changed since generation {decision.number} was decided "
                f"(revision {decision.revision}, now {universe.revision})")

        universe._apply(decision.to_live, decision.to_die, decision.number)

    def tick(self, universe: 'Universe') -> int:
        """Advance the universe exactly one generation.

        Args:
            universe: Universe to update (modified in-place)

        Returns:
            Number of live cells after the tick
        """
        decision = self.decide(universe)
        self.commit(universe, decision)

        logger.debug(f"Generation {decision.number}: births={decision.births}, "
                     f"deaths={decision.deaths}, alive={decision.live_count}")
        return decision.live_count

    def rule_table(self, rules: Optional[RuleParams] = None) -> Dict[Tuple[bool, int], bool]:
        """Get the (current_state, neighbor_count) -> next_state table.

        Args:
            rules: Rule parameters (standard Conway rules if None)
        """
        if rules is None:
            rules = RuleParams.standard()
        return rules.rule_table()


# Singleton instance for convenience
default_engine = TickEngine()
