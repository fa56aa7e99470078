"""Seed patterns and still life / oscillator detection."""

from .detector import PatternKind, PeriodResult, detect_period
from .library import PATTERNS, beehive, blinker, block, get_pattern, glider, toad

__all__ = [
    'PatternKind',
    'PeriodResult',
    'detect_period',
    'PATTERNS',
    'beehive',
    'blinker',
    'block',
    'get_pattern',
    'glider',
    'toad',
]
