"""Lightweight data models used across the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import POINTS_CIRCULAR, POINTS_LINEAR


class EnemyKind(Enum):
    """
    Enemy variant. The value doubles as the sprite key.

    LINEAR enemies ("zombies") walk in straight lines and bounce off the
    canvas edges; CIRCULAR enemies ("mummies") orbit a center that moves
    now and then.
    """
    LINEAR = "zombie"
    CIRCULAR = "mummy"

    @property
    def points(self) -> int:
        return POINTS_LINEAR if self is EnemyKind.LINEAR else POINTS_CIRCULAR


@dataclass
class LinearMotion:
    """
    Straight-line motion state.

    Attributes
    ----------
    vx, vy : float
        Velocity in px per reference frame (~16 ms).
    """
    vx: float
    vy: float


@dataclass
class CircularMotion:
    """
    Orbit state for circular motion.

    Attributes
    ----------
    cx, cy : float
        Orbit center in canvas coordinates.
    radius : float
        Orbit radius in px.
    angle : float
        Current phase in radians.
    angular_speed : float
        Signed radians per reference frame.
    """
    cx: float
    cy: float
    radius: float
    angle: float
    angular_speed: float


@dataclass(frozen=True)
class Hit:
    """Result of a click that landed on an enemy."""
    index: int
    kind: EnemyKind

    @property
    def points(self) -> int:
        return self.kind.points
