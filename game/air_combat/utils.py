"""
Utility functions for game mechanics
"""

from __future__ import annotations
import random
from typing import Optional


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Build an isolated random generator (seeded when a seed is given)"""
    return random.Random(seed)
