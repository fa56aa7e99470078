"""
Conway's Game of Life Rules

The birth/survival decision table, as data. Standard Conway rules (B3/S23)
are the default; RuleParams allows other life-like rule sets on the same
engine.
"""

from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from .errors import InvalidConfigurationError

# Standard Conway rules
SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors

MAX_NEIGHBORS = 8


def next_state(alive: bool, live_neighbors: int) -> bool:
    """Apply standard Conway rules to determine next cell state.

    alive, n < 2   -> dead  (underpopulation)
    alive, n 2-3   -> alive (stable)
    alive, n > 3   -> dead  (overpopulation)
    dead,  n == 3  -> alive (reproduction)
    dead,  n != 3  -> dead

    Args:
        alive: Current cell state
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state
    """
    if alive:
        return live_neighbors in SURVIVAL_SET
    else:
        return live_neighbors in BIRTH_SET


def _validate_counts(name: str, counts: Iterable[int]) -> FrozenSet[int]:
    counts = frozenset(counts)
    for n in counts:
        if not isinstance(n, int) or isinstance(n, bool) or not 0 <= n <= MAX_NEIGHBORS:
            raise InvalidConfigurationError(
                f"{name} must contain neighbor counts in 0..{MAX_NEIGHBORS}, got {n!r}")
    return counts


class RuleParams:
    """Birth and survival sets for a life-like rule.

    Defaults to standard Conway rules. The sets are frozen, so one
    instance can never be changed through another universe's reference.
    """

    def __init__(self,
                 survival_set: Optional[Iterable[int]] = None,
                 birth_set: Optional[Iterable[int]] = None):
        """Initialize rule parameters.

        Args:
            survival_set: Neighbor counts for live cell survival (default {2,3})
            birth_set: Neighbor counts for dead cell birth (default {3})

        Raises:
            InvalidConfigurationError: If a count is outside 0..8
        """
        self.survival_set: FrozenSet[int] = _validate_counts(
            "survival_set", SURVIVAL_SET if survival_set is None else survival_set)
        self.birth_set: FrozenSet[int] = _validate_counts(
            "birth_set", BIRTH_SET if birth_set is None else birth_set)

    @classmethod
    def standard(cls) -> 'RuleParams':
        """Create standard Conway rules."""
        return cls(SURVIVAL_SET, BIRTH_SET)

    @property
    def notation(self) -> str:
        """Rule in B/S notation, e.g. 'B3/S23'."""
        birth = ''.join(str(n) for n in sorted(self.birth_set))
        survival = ''.join(str(n) for n in sorted(self.survival_set))
        return f"B{birth}/S{survival}"

    def next_state(self, alive: bool, live_neighbors: int) -> bool:
        """Apply these rule parameters to a cell.

        Args:
            alive: Current cell state
            live_neighbors: Number of live neighbors

        Returns:
            Next cell state
        """
        if alive:
            return live_neighbors in self.survival_set
        else:
            return live_neighbors in self.birth_set

    def rule_table(self) -> Dict[Tuple[bool, int], bool]:
        """Get the complete rule table.

        Returns:
            Dictionary mapping (current_state, neighbor_count) to next_state,
            2 states x 9 counts = 18 entries
        """
        table = {}
        for alive in (False, True):
            for neighbors in range(MAX_NEIGHBORS + 1):
                table[(alive, neighbors)] = self.next_state(alive, neighbors)
        return table

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleParams):
            return NotImplemented
        return self.survival_set == other.survival_set and self.birth_set == other.birth_set

    def __hash__(self) -> int:
        return hash((self.survival_set, self.birth_set))

    def __repr__(self) -> str:
        return f"RuleParams({self.notation})"
