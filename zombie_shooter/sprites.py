from __future__ import annotations

import os

import pygame

from .constants import BACKGROUND_PATH, SPRITE_PATHS
from .models import EnemyKind

# Fallback art palette
ZOMBIE_GREEN = (82, 180, 95)
ZOMBIE_DARK = (42, 100, 50)
MUMMY_CLOTH = (226, 214, 180)
MUMMY_SHADE = (150, 138, 110)
EYE_WHITE = (250, 250, 250)
EYE_GLOW = (255, 200, 40)
PUPIL = (10, 10, 10)

BASE_SPRITE_SIZE = 96


class SpriteProvider:
    """
    Resolves an enemy kind to a drawable surface.

    Images are read from disk once by `load()`; a kind whose image is missing
    or unreadable gets procedurally drawn art instead, so the provider is
    always ready after loading. Scaled copies are cached per (kind, size).
    """

    def __init__(self, paths: dict[str, str] | None = None) -> None:
        self.paths = dict(SPRITE_PATHS if paths is None else paths)
        self.originals: dict[EnemyKind, pygame.Surface] = {}
        self.procedural: set[EnemyKind] = set()
        self._scaled: dict[tuple[EnemyKind, int], pygame.Surface] = {}

    def load(self) -> bool:
        """Load every kind's sprite. Returns True once all kinds are drawable."""
        for kind in EnemyKind:
            if kind in self.originals:
                continue
            image = self._load_image(self.paths.get(kind.value))
            if image is None:
                image = make_procedural_sprite(kind)
                self.procedural.add(kind)
            self.originals[kind] = image
        self._scaled.clear()
        return self.is_ready()

    def is_ready(self) -> bool:
        return all(kind in self.originals for kind in EnemyKind)

    def get(self, kind: EnemyKind, size: int) -> pygame.Surface | None:
        """Sprite for `kind` scaled to size x size, or None before loading."""
        original = self.originals.get(kind)
        if original is None:
            return None
        size = max(1, int(size))
        key = (kind, size)
        scaled = self._scaled.get(key)
        if scaled is None:
            scaled = pygame.transform.scale(original, (size, size))
            self._scaled[key] = scaled
        return scaled

    @staticmethod
    def _load_image(path: str | None) -> pygame.Surface | None:
        if not path or not os.path.exists(path):
            print(f"Sprite not found, using fallback art: {path}")
            return None
        try:
            image = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                image = image.convert_alpha()
            return image
        except Exception as e:
            print(f"Failed to load sprite {path}: {e}")
            return None


def load_background(path: str = BACKGROUND_PATH) -> pygame.Surface | None:
    """Background image for the canvas, or None to use the flat color."""
    if not os.path.exists(path):
        print(f"Background image not found: {path}")
        return None
    try:
        image = pygame.image.load(path)
        if pygame.display.get_surface() is not None:
            image = image.convert()
        return image
    except Exception as e:
        print(f"Failed to load background: {e}")
        return None


def make_procedural_sprite(kind: EnemyKind, size: int = BASE_SPRITE_SIZE) -> pygame.Surface:
    """Draw a simple head for `kind` on a transparent square surface."""
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    c = size // 2
    r = int(size * 0.45)

    if kind is EnemyKind.LINEAR:
        pygame.draw.circle(surf, ZOMBIE_GREEN, (c, c), r)
        pygame.draw.circle(surf, ZOMBIE_DARK, (c, c), int(r * 0.8), width=2)
        eye_dx = int(r * 0.35)
        eye_y = c - int(r * 0.10)
        eye_r = max(2, int(r * 0.14))
        for ex in (c - eye_dx, c + eye_dx):
            pygame.draw.circle(surf, EYE_WHITE, (ex, eye_y), eye_r)
            pygame.draw.circle(surf, PUPIL, (ex, eye_y), max(1, eye_r // 2))
        # scar
        pygame.draw.line(surf, ZOMBIE_DARK, (c - r // 2, c + r // 3), (c + r // 3, c + r // 2), 3)
    else:
        pygame.draw.circle(surf, MUMMY_CLOTH, (c, c), r)
        # bandage wraps
        for i in range(-2, 3):
            y = c + i * r // 3
            pygame.draw.line(surf, MUMMY_SHADE, (c - r, y - r // 8), (c + r, y + r // 8), 2)
        eye_dx = int(r * 0.35)
        eye_y = c - int(r * 0.15)
        eye_r = max(2, int(r * 0.12))
        for ex in (c - eye_dx, c + eye_dx):
            pygame.draw.circle(surf, PUPIL, (ex, eye_y), eye_r + 2)
            pygame.draw.circle(surf, EYE_GLOW, (ex, eye_y), eye_r)
    return surf
