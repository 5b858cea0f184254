from __future__ import annotations

import math
import random

from .constants import (
    ANGULAR_SPEED_MAX,
    ANGULAR_SPEED_MIN,
    BOUNCE_MARGIN,
    CIRCLE_CENTER_MARGIN,
    CIRCLE_RADIUS_MAX,
    CIRCLE_RADIUS_MIN,
    CIRCLE_RECENTER_RADIUS_MAX,
    CIRCULAR_HIDE_CHANCE,
    ENEMY_SIZE_MAX,
    ENEMY_SIZE_MIN,
    FRAME_SCALE,
    FULL_TURN,
    HEIGHT,
    HIDE_TIMER_MAX,
    HIDE_TIMER_MIN,
    HITBOX_COLOR,
    HITBOX_MIN_RADIUS,
    HITBOX_SCALE,
    LINEAR_HIDE_CHANCE,
    LINEAR_SPEED_MAX,
    LINEAR_SPEED_MIN,
    RECENTER_ANGULAR_SPEED_MAX,
    RECENTER_CHANCE,
    SHOT_TIMER_MAX,
    SHOT_TIMER_MIN,
    SPAWN_MARGIN,
    WIDTH,
)
from .determinism import get_rng
from .models import CircularMotion, EnemyKind, LinearMotion
from .utils import distance, rand_range, random_sign


class Enemy:
    """
    One zombie or mummy wandering the canvas.

    Lifecycle:
    - VISIBLE:  moves every tick (straight line or orbit) and can be shot.
    - HIDDEN:   frozen in place while the respawn timer counts down, either
                after a random vanish or after being shot.
    - RESPAWN:  when the timer runs out the enemy resets to a fresh random
                spawn point and motion, and becomes visible again.

    Enemies are never destroyed; a kill only hides them for a while.
    Time is driven by `advance(dt)` with dt in seconds.
    """

    def __init__(self, kind: EnemyKind, rng: random.Random | None = None,
                 width: int = WIDTH, height: int = HEIGHT) -> None:
        self.kind = kind
        self.rng = rng if rng is not None else get_rng()
        self.width = width
        self.height = height
        self.size = math.floor(rand_range(self.rng, ENEMY_SIZE_MIN, ENEMY_SIZE_MAX))
        self.x = 0.0
        self.y = 0.0
        self.visible = True
        self.reappear_timer = 0.0
        self.motion: LinearMotion | CircularMotion
        self.reset()

    # ------------------------------- Update & State ----------------------------------

    def reset(self) -> None:
        """Respawn at a random point with freshly rolled motion."""
        rng = self.rng
        self.x = rand_range(rng, SPAWN_MARGIN, self.width - SPAWN_MARGIN)
        self.y = rand_range(rng, SPAWN_MARGIN, self.height - SPAWN_MARGIN)

        if self.kind is EnemyKind.LINEAR:
            speed = rand_range(rng, LINEAR_SPEED_MIN, LINEAR_SPEED_MAX)
            heading = rand_range(rng, 0, FULL_TURN)
            self.motion = LinearMotion(math.cos(heading) * speed, math.sin(heading) * speed)
        else:
            self.motion = CircularMotion(
                cx=rand_range(rng, CIRCLE_CENTER_MARGIN, self.width - CIRCLE_CENTER_MARGIN),
                cy=rand_range(rng, CIRCLE_CENTER_MARGIN, self.height - CIRCLE_CENTER_MARGIN),
                radius=rand_range(rng, CIRCLE_RADIUS_MIN, CIRCLE_RADIUS_MAX),
                angle=rand_range(rng, 0, FULL_TURN),
                angular_speed=rand_range(rng, ANGULAR_SPEED_MIN, ANGULAR_SPEED_MAX) * random_sign(rng),
            )

        self.visible = True
        self.reappear_timer = 0.0

    def advance(self, dt: float) -> None:
        """
        Step the enemy by `dt` seconds.

        A hidden enemy only counts its timer down; once it reaches zero the
        enemy respawns and does not move on that tick.
        """
        if not self.visible:
            self.reappear_timer -= dt
            if self.reappear_timer <= 0:
                self.reset()
            return

        step = dt * FRAME_SCALE
        if self.kind is EnemyKind.LINEAR:
            self._advance_linear(step)
        else:
            self._advance_circular(step)

    def _advance_linear(self, step: float) -> None:
        motion = self.motion
        self.x += motion.vx * step
        self.y += motion.vy * step

        # Flip direction near an edge; overshoot corrects itself next tick
        if self.x < BOUNCE_MARGIN or self.x > self.width - BOUNCE_MARGIN:
            motion.vx = -motion.vx
        if self.y < BOUNCE_MARGIN or self.y > self.height - BOUNCE_MARGIN:
            motion.vy = -motion.vy

        if self.rng.random() < LINEAR_HIDE_CHANCE:
            self.hide_temporarily()

    def _advance_circular(self, step: float) -> None:
        motion = self.motion
        motion.angle += motion.angular_speed * step
        self.x = motion.cx + math.cos(motion.angle) * motion.radius
        self.y = motion.cy + math.sin(motion.angle) * motion.radius

        if self.rng.random() < RECENTER_CHANCE:
            self.recenter()

        if self.rng.random() < CIRCULAR_HIDE_CHANCE:
            self.hide_temporarily()

    def recenter(self) -> None:
        """Move the orbit somewhere else. The phase angle is kept."""
        rng = self.rng
        motion = self.motion
        motion.cx = rand_range(rng, CIRCLE_CENTER_MARGIN, self.width - CIRCLE_CENTER_MARGIN)
        motion.cy = rand_range(rng, CIRCLE_CENTER_MARGIN, self.height - CIRCLE_CENTER_MARGIN)
        motion.radius = rand_range(rng, CIRCLE_RADIUS_MIN, CIRCLE_RECENTER_RADIUS_MAX)
        motion.angular_speed = rand_range(rng, ANGULAR_SPEED_MIN, RECENTER_ANGULAR_SPEED_MAX) * random_sign(rng)

    def hide_temporarily(self) -> None:
        """Vanish on its own and come back somewhere else later."""
        self.visible = False
        self.reappear_timer = rand_range(self.rng, HIDE_TIMER_MIN, HIDE_TIMER_MAX)

    def on_shot(self) -> None:
        """
        Hide after a confirmed hit. Scoring and sound are the caller's job.
        """
        self.visible = False
        self.reappear_timer = rand_range(self.rng, SHOT_TIMER_MIN, SHOT_TIMER_MAX)

    # ------------------------------- Hit Testing -------------------------------------

    @property
    def hitbox_radius(self) -> float:
        """Hitbox radius: 3/4 of the sprite radius, with a 20 px floor before scaling."""
        return max(self.size / 2, HITBOX_MIN_RADIUS) * HITBOX_SCALE

    def is_hit(self, px: float, py: float) -> bool:
        if not self.visible:
            return False
        return distance(px, py, self.x, self.y) <= self.hitbox_radius

    # ------------------------------- Rendering ---------------------------------------

    def draw(self, renderer) -> None:
        """Draw the sprite centered on the current position."""
        if not self.visible:
            return
        w = h = self.size
        renderer.draw_sprite(self.kind, self.x - w / 2, self.y - h / 2, w, h)

    def draw_hitbox(self, renderer) -> None:
        """Outline the hitbox for debugging."""
        if not self.visible:
            return
        renderer.draw_circle(self.x, self.y, self.hitbox_radius, HITBOX_COLOR)

    def __repr__(self) -> str:
        state = "visible" if self.visible else f"hidden {self.reappear_timer:.2f}s"
        return f"Enemy({self.kind.value}, x={self.x:.1f}, y={self.y:.1f}, size={self.size}, {state})"
