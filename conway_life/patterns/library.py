"""Classic Conway seed patterns.

Each factory returns a fresh 2D boolean numpy array (rows x cols) that can
be stamped into a universe with Universe.load_pattern().
"""

from typing import Callable, Dict

import numpy as np


def block() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def beehive() -> np.ndarray:
    """Create six-cell beehive still life."""
    return np.array([
        [False, True, True, False],
        [True, False, False, True],
        [False, True, True, False]
    ], dtype=bool)


def blinker(vertical: bool = False) -> np.ndarray:
    """Create blinker oscillator (3 cells, period 2).

    Args:
        vertical: Return the vertical phase instead of the horizontal one
    """
    pattern = np.array([[True, True, True]], dtype=bool)
    return pattern.T.copy() if vertical else pattern


def toad() -> np.ndarray:
    """Create toad oscillator (6 cells, period 2)."""
    return np.array([
        [False, True, True, True],
        [True, True, True, False]
    ], dtype=bool)


def glider() -> np.ndarray:
    """Create classic glider.

    Travels one cell right and one cell down every 4 generations.
    """
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


PATTERNS: Dict[str, Callable[[], np.ndarray]] = {
    "block": block,
    "beehive": beehive,
    "blinker": blinker,
    "toad": toad,
    "glider": glider,
}


def get_pattern(name: str) -> np.ndarray:
    """Look up a pattern by name.

    Raises:
        KeyError: If the name is unknown
    """
    try:
        factory = PATTERNS[name]
    except KeyError:
        raise KeyError(f"Unknown pattern {name!r}, expected one of {sorted(PATTERNS)}") from None
    return factory()
