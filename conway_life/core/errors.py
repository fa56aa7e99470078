"""Error types raised by the Game of Life core.

Both kinds are caller-input errors detected at the API boundary. They also
subclass the builtin exception a caller would expect (ValueError for bad
configuration, IndexError for bad coordinates).
"""


class LifeError(Exception):
    """Base class for all Game of Life errors."""


class InvalidConfigurationError(LifeError, ValueError):
    """Raised for non-positive grid dimensions or malformed rule parameters."""


class StaleGenerationError(LifeError, ValueError):
    """Raised when a decided generation no longer matches its universe.

    Either the decision came from a different universe, or cells were
    changed (or another tick ran) between decide and commit.
    """


class OutOfBoundsError(LifeError, IndexError):
    """Raised when a coordinate falls outside the universe grid."""

    def __init__(self, x: int, y: int, cols: int, rows: int):
        self.x = x
        self.y = y
        self.cols = cols
        self.rows = rows
        super().__init__(f"Coordinates ({x!r}, {y!r}) out of bounds for {cols}x{rows} grid")
