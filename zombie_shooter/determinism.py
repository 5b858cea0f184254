"""
Seeded gameplay randomness.

Enemy sizes, spawn points, motion parameters, kind rolls and the per-tick
hide / re-center rolls all draw from one `random.Random`, so a run started
with the same `--seed` replays the same population.
"""

from __future__ import annotations

import random

_SEED_MASK = 0xFFFFFFFF

_seed = 1
_rng = random.Random(_seed)


def set_sim_seed(seed: int) -> int:
    """
    Reseed the gameplay RNG and return the effective 32-bit seed.

    The RNG object is reseeded in place, so enemies and spawners that
    already hold it follow the new sequence.
    """
    global _seed
    _seed = int(seed) & _SEED_MASK
    _rng.seed(_seed)
    return _seed


def get_rng() -> random.Random:
    return _rng
