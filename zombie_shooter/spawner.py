from __future__ import annotations

import random

from .constants import ENEMY_COUNT, HEIGHT, LINEAR_KIND_CHANCE, WIDTH
from .determinism import get_rng
from .enemy import Enemy
from .models import EnemyKind


class Spawner:
    """
    Builds the enemy population.

    Notes
    - Each enemy's kind is rolled independently: LINEAR with probability
      0.55, otherwise CIRCULAR.
    - Populating replaces the whole collection; nothing carries over.
    """

    def __init__(self, rng: random.Random | None = None,
                 width: int = WIDTH, height: int = HEIGHT) -> None:
        self.rng = rng if rng is not None else get_rng()
        self.width = width
        self.height = height

    def roll_kind(self) -> EnemyKind:
        return EnemyKind.LINEAR if self.rng.random() < LINEAR_KIND_CHANCE else EnemyKind.CIRCULAR

    def populate(self, enemies: list[Enemy], count: int = ENEMY_COUNT) -> list[Enemy]:
        """
        Clear `enemies` in place and fill it with `count` fresh enemies.

        Parameters
        ----------
        enemies : list[Enemy]
            Collection to refill. The same list object is kept so views
            onto it stay valid.
        count : int
            Number of enemies to create.

        Returns
        -------
        list[Enemy]
            The refilled collection.
        """
        if count < 0:
            raise ValueError(f"enemy count must be >= 0, got {count}")
        enemies.clear()
        for _ in range(count):
            enemies.append(Enemy(self.roll_kind(), rng=self.rng, width=self.width, height=self.height))
        return enemies
