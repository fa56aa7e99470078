"""Universe: the fixed-size grid of cells for Conway's Game of Life.

The universe owns every cell, answers neighbor queries, and is the only
place cell state is changed from outside the tick engine. The grid edge is
hard: positions outside it do not exist and are never counted as neighbors.

    x - columns, 0..cols-1
    y - rows,    0..rows-1

      0 1 2 3 4
    0
    1
    2
"""

import logging
from typing import Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import ALIVE, DEAD, Cell
from .engine import default_engine
from .errors import InvalidConfigurationError, OutOfBoundsError
from .rules import RuleParams

logger = logging.getLogger(__name__)

# Moore neighborhood as (dx, dy):
# top-left, top, top-right, left, right, bottom-left, bottom, bottom-right
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


def _is_dimension(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class Universe:
    """Fixed-size 2D grid of cells indexed grid[y][x].

    Attributes:
        rows: Grid height in cells
        cols: Grid width in cells
        rules: Birth/survival parameters used by tick()
        generation: Number of ticks applied since construction
        revision: Counter bumped by every change to any cell
    """

    def __init__(self, rows: int, cols: int, rules: Optional[RuleParams] = None):
        """Build a rows x cols grid with every cell dead.

        Args:
            rows: Grid height (cells)
            cols: Grid width (cells)
            rules: Rule parameters (standard Conway rules if None)

        Raises:
            InvalidConfigurationError: If a dimension is not a positive integer
        """
        if not (_is_dimension(rows) and _is_dimension(cols)):
            raise InvalidConfigurationError(
                f"Grid dimensions must be integers, got rows={rows!r}, cols={cols!r}")
        if rows <= 0 or cols <= 0:
            raise InvalidConfigurationError(
                f"Grid dimensions must be positive, got {cols}x{rows}")

        self._rows = int(rows)
        self._cols = int(cols)
        self.rules = rules if rules is not None else RuleParams.standard()
        self._generation = 0
        self._revision = 0
        self._grid: List[List[Cell]] = [
            [Cell(x, y, DEAD) for x in range(self._cols)]
            for y in range(self._rows)
        ]

        logger.debug(f"Created universe {self._cols}x{self._rows} with {self.rules.notation} rules")

    @classmethod
    def from_array(cls, array: np.ndarray, rules: Optional[RuleParams] = None) -> 'Universe':
        """Create a universe shaped like a 2D array, alive where it is truthy.

        Args:
            array: 2D array of shape (rows, cols)
            rules: Rule parameters (standard Conway rules if None)

        Returns:
            Universe: New universe at generation 0

        Raises:
            InvalidConfigurationError: If the array is not 2D or has an empty axis
        """
        state = np.asarray(array).astype(bool)
        if state.ndim != 2:
            raise InvalidConfigurationError(f"Expected a 2D array, got {state.ndim}D")

        rows, cols = state.shape
        universe = cls(rows, cols, rules)
        for y, x in zip(*np.nonzero(state)):
            universe._grid[y][x]._set_state(True)
        return universe

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def grid(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Read-only row view of the grid, indexed grid[y][x].

        Cell state cannot be changed through the returned cells.
        """
        return tuple(tuple(row) for row in self._grid)

    def in_bounds(self, x: int, y: int) -> bool:
        if not (_is_dimension(x) and _is_dimension(y)):
            return False
        return 0 <= x < self._cols and 0 <= y < self._rows

    def _cell_at(self, x: int, y: int) -> Cell:
        # Non-integer coordinates address no cell
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self._cols, self._rows)
        return self._grid[y][x]

    def _write(self, cells: Iterable[Cell], alive: bool) -> None:
        for cell in cells:
            cell._set_state(alive)
        self._revision += 1

    def _apply(self, to_live: Iterable[Cell], to_die: Iterable[Cell], generation: int) -> None:
        """Commit a decided generation. Used by the tick engine."""
        for cell in to_live:
            cell._set_state(True)
        for cell in to_die:
            cell._set_state(False)
        self._generation = generation
        self._revision += 1

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in self._grid:
            yield from row

    def live_neighbors(self, cell: Cell) -> Set[Cell]:
        """Get the live cells adjacent to a cell, diagonals included.

        Positions past the grid edge are skipped, so a corner has 3
        candidates, a non-corner edge cell 5 and an interior cell 8.
        Does not modify any cell.

        Args:
            cell: A cell of this universe

        Returns:
            Set of live neighboring cells
        """
        neighbors = set()
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = cell.x + dx, cell.y + dy
            if not (0 <= nx < self._cols and 0 <= ny < self._rows):
                continue
            neighbor = self._grid[ny][nx]
            if neighbor.is_alive:
                neighbors.add(neighbor)
        return neighbors

    def live_neighbor_count(self, x: int, y: int) -> int:
        """Count live neighbors of the cell at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is outside the grid or not integers
        """
        return len(self.live_neighbors(self._cell_at(x, y)))

    def set_alive(self, x: int, y: int) -> None:
        """Mark the cell at (x, y) alive.

        Raises:
            OutOfBoundsError: If (x, y) is outside the grid or not integers
        """
        self._write([self._cell_at(x, y)], True)

    def set_dead(self, x: int, y: int) -> None:
        """Mark the cell at (x, y) dead.

        Raises:
            OutOfBoundsError: If (x, y) is outside the grid or not integers
        """
        self._write([self._cell_at(x, y)], False)

    def is_alive(self, x: int, y: int) -> bool:
        """Current state of the cell at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is outside the grid or not integers
        """
        return self._cell_at(x, y).is_alive

    def seed(self, coordinates: Iterable[Tuple[int, int]]) -> None:
        """Mark every (x, y) in coordinates alive.

        All coordinates are checked before any cell changes, so a bad
        coordinate leaves the grid untouched.

        Raises:
            OutOfBoundsError: If any coordinate is outside the grid
        """
        targets = [self._cell_at(x, y) for x, y in coordinates]
        self._write(targets, True)

    def load_pattern(self, pattern: np.ndarray, x: int, y: int) -> None:
        """Stamp a pattern into the grid with its top-left corner at (x, y).

        Only truthy pattern cells are written; cells under falsy pattern
        entries keep their state. No wrapping at the edges.

        Args:
            pattern: 2D boolean array representing the pattern
            x: Top-left x-coordinate for placement
            y: Top-left y-coordinate for placement

        Raises:
            InvalidConfigurationError: If the pattern is not a non-empty 2D array
            OutOfBoundsError: If any part of the pattern falls outside the grid
        """
        pattern = np.asarray(pattern).astype(bool)
        if pattern.ndim != 2 or pattern.size == 0:
            raise InvalidConfigurationError(
                f"Pattern must be a non-empty 2D array, got shape {pattern.shape}")

        pattern_height, pattern_width = pattern.shape
        # Both corners in bounds means the whole rectangle is
        self._cell_at(x, y)
        self._cell_at(x + pattern_width - 1, y + pattern_height - 1)

        self._write((self._grid[y + py][x + px] for py, px in zip(*np.nonzero(pattern))), True)

    def clear(self) -> None:
        """Set every cell dead."""
        self._write(self.cells(), False)

    def tick(self) -> int:
        """Advance one generation.

        Returns:
            Number of live cells after the tick
        """
        return default_engine.tick(self)

    def run(self, generations: int) -> List[int]:
        """Advance several generations.

        Args:
            generations: Number of ticks to apply (0 is allowed)

        Returns:
            Live cell count after each tick

        Raises:
            InvalidConfigurationError: If generations is negative
        """
        if generations < 0:
            raise InvalidConfigurationError(f"generations must be non-negative, got {generations}")
        return [self.tick() for _ in range(generations)]

    def live_cells(self) -> Set[Tuple[int, int]]:
        """Coordinates (x, y) of every live cell."""
        return {cell.position for cell in self.cells() if cell.is_alive}

    def live_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_alive)

    def to_array(self) -> np.ndarray:
        """Boolean snapshot of the grid with shape (rows, cols)."""
        return np.array(
            [[cell.state == ALIVE for cell in row] for row in self._grid],
            dtype=bool,
        )

    def __eq__(self, other: object) -> bool:
        """Same dimensions and same live cells."""
        if not isinstance(other, Universe):
            return NotImplemented
        return (self._rows == other._rows and
                self._cols == other._cols and
                self.live_cells() == other.live_cells())

    def __repr__(self) -> str:
        return (f"Universe({self._cols}x{self._rows}, generation={self.generation}, "
                f"alive={self.live_count()}, rules={self.rules.notation})")
