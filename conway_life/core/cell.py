"""Single cell of the Game of Life grid."""

from typing import Tuple

DEAD = 0
ALIVE = 1


class Cell:
    """A cell at a fixed grid coordinate.

    Coordinates are fixed at creation. State is read-only from outside;
    only the owning Universe writes it. A cell does not know its universe
    or its neighbors, all lookups go through the Universe.

    Attributes:
        x: Column index (zero-based)
        y: Row index (zero-based)
        state: ALIVE or DEAD
    """

    __slots__ = ('_x', '_y', '_state')

    def __init__(self, x: int, y: int, state: int = DEAD):
        self._x = x
        self._y = y
        self._state = ALIVE if state == ALIVE else DEAD

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def position(self) -> Tuple[int, int]:
        """(x, y) coordinate pair."""
        return (self._x, self._y)

    @property
    def state(self) -> int:
        return self._state

    @property
    def is_alive(self) -> bool:
        return self._state == ALIVE

    @property
    def is_dead(self) -> bool:
        return self._state == DEAD

    def _set_state(self, alive: bool) -> None:
        # Called by the owning Universe only
        self._state = ALIVE if alive else DEAD

    def __repr__(self) -> str:
        return f"Cell(x={self._x}, y={self._y}, {'alive' if self.is_alive else 'dead'})"
