"""
Per-frame steps: advance every enemy, draw every enemy, resolve a click.
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import MAX_FRAME_DT
from .enemy import Enemy
from .models import Hit


def clamp_dt(dt: float) -> float:
    """Cap a frame delta (seconds) so hitches don't tunnel enemies across the canvas."""
    return max(0.0, min(MAX_FRAME_DT, dt))


def advance_all(enemies: Sequence[Enemy], dt: float) -> None:
    """Advance each enemy by `dt` seconds, in list order."""
    for enemy in enemies:
        enemy.advance(dt)


def render_all(renderer, enemies: Sequence[Enemy], width: int, height: int,
               show_hitboxes: bool = False) -> None:
    """Clear the canvas and draw every visible enemy."""
    renderer.clear(width, height)
    for enemy in enemies:
        enemy.draw(renderer)
        if show_hitboxes:
            enemy.draw_hitbox(renderer)


def resolve_click(enemies: Sequence[Enemy], x: float, y: float) -> Hit | None:
    """
    Shoot the top-most enemy under (x, y).

    Later enemies are drawn on top, so the list is scanned back to front and
    only the first enemy hit is shot.

    Returns
    -------
    Hit | None
        Index and kind of the enemy shot, or None on a miss.
    """
    for index in range(len(enemies) - 1, -1, -1):
        enemy = enemies[index]
        if enemy.is_hit(x, y):
            enemy.on_shot()
            return Hit(index, enemy.kind)
    return None
