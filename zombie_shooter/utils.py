"""Small math helpers shared by the enemy and hit-test code."""

from __future__ import annotations

import math
import random


def rand_range(rng: random.Random, lo: float, hi: float) -> float:
    """Uniform float in [lo, hi)."""
    return rng.random() * (hi - lo) + lo


def random_sign(rng: random.Random) -> int:
    return 1 if rng.random() < 0.5 else -1


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x1 - x2, y1 - y2)
