from __future__ import annotations

import pygame

from .constants import BG_COLOR
from .models import EnemyKind
from .sprites import SpriteProvider


class PygameRenderer:
    """Draws onto the fixed-size canvas surface."""

    def __init__(self, surface: pygame.Surface, sprites: SpriteProvider,
                 background: pygame.Surface | None = None) -> None:
        self.surface = surface
        self.sprites = sprites
        self.background = background
        self._background_scaled: pygame.Surface | None = None

    def clear(self, width: int, height: int) -> None:
        if self.background is None:
            self.surface.fill(BG_COLOR, pygame.Rect(0, 0, width, height))
            return
        if self._background_scaled is None or self._background_scaled.get_size() != (width, height):
            self._background_scaled = pygame.transform.scale(self.background, (width, height))
        self.surface.blit(self._background_scaled, (0, 0))

    def draw_sprite(self, kind: EnemyKind, x: float, y: float, w: float, h: float) -> None:
        """Blit the sprite for `kind` with its top-left corner at (x, y)."""
        sprite = self.sprites.get(kind, int(max(w, h)))
        if sprite is None:
            return
        self.surface.blit(sprite, (int(x), int(y)))

    def draw_circle(self, x: float, y: float, radius: float, color: tuple[int, int, int]) -> None:
        pygame.draw.circle(self.surface, color, (int(x), int(y)), max(1, int(radius)), 2)
