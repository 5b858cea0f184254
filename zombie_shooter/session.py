"""
Game session: owns the enemy population, the score, and the frame loop.

The loop is a small state machine over STOPPED / RUNNING / PAUSED. While
RUNNING it keeps exactly one frame callback queued on the scheduler; each
frame advances the simulation by the elapsed time (capped) and renders.
Clicks, button presses and frames all run on the same thread.
"""

from __future__ import annotations

import random
from enum import Enum
from functools import partial

from .constants import (
    ENEMY_COUNT,
    HEIGHT,
    MSG_INTRO,
    MSG_INTRO_MS,
    MSG_PAUSED,
    MSG_PAUSED_MS,
    MSG_READY,
    MSG_READY_MS,
    MSG_STARTED,
    MSG_STARTED_MS,
    WIDTH,
)
from .determinism import get_rng
from .enemy import Enemy
from .logger import GameLogger
from .models import Hit
from .scheduler import FrameScheduler
from .simulation import advance_all, clamp_dt, render_all, resolve_click
from .spawner import Spawner


class LoopState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


class NullSink:
    """Score/message sink that discards everything."""

    def on_score(self, delta: int, total: int) -> None:
        pass

    def show_message(self, text: str, duration_ms: int = 0) -> None:
        pass


class GameSession:
    """
    One independent game: enemies, score, and loop state.

    Collaborators are optional so the session can run headless:
    - renderer: draw_sprite / draw_circle / clear (see render.PygameRenderer)
    - audio:    play_shot_effect / play_background_music / stop_background_music
    - sink:     on_score(delta, total) / show_message(text, duration_ms)
    - logger:   GameLogger
    """

    def __init__(self, scheduler: FrameScheduler, renderer=None, audio=None, sink=None,
                 logger: GameLogger | None = None, rng: random.Random | None = None,
                 width: int = WIDTH, height: int = HEIGHT, enemy_count: int = ENEMY_COUNT) -> None:
        self.scheduler = scheduler
        self.renderer = renderer
        self.audio = audio
        self.sink = sink if sink is not None else NullSink()
        self.logger = logger
        self.width = width
        self.height = height
        self.enemy_count = enemy_count
        self.spawner = Spawner(rng if rng is not None else get_rng(), width, height)
        self.show_hitboxes = False

        self._enemies: list[Enemy] = []
        self._score = 0
        self._state = LoopState.STOPPED
        self._frame_handle: int | None = None
        self._generation = 0
        self._last_frame_ms: int | None = None
        self.frames = 0

    # ------------------------------- Accessors ---------------------------------------

    @property
    def score(self) -> int:
        return self._score

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is LoopState.RUNNING

    @property
    def enemies(self) -> tuple[Enemy, ...]:
        return tuple(self._enemies)

    # ------------------------------- Controls ----------------------------------------

    def populate(self, count: int | None = None) -> None:
        """Fill the canvas once assets are ready and invite the player to start."""
        self.spawner.populate(self._enemies, self.enemy_count if count is None else count)
        self.sink.show_message(MSG_INTRO, MSG_INTRO_MS)

    def start(self, message: str = MSG_STARTED) -> None:
        """Run the loop. `message` is shown on success; empty text clears the banner."""
        if self._state is LoopState.RUNNING:
            return
        self._state = LoopState.RUNNING
        self._last_frame_ms = None
        if self.audio is not None:
            self.audio.play_background_music()
        self._schedule_frame()
        self.sink.show_message(message, MSG_STARTED_MS if message else 0)
        self._log_state("START", f"score {self._score}")

    def pause(self) -> None:
        if self._state is not LoopState.RUNNING:
            return
        self._state = LoopState.PAUSED
        self._cancel_frame()
        self.sink.show_message(MSG_PAUSED, MSG_PAUSED_MS)
        self._log_state("PAUSE", f"score {self._score}")

    def toggle_pause(self) -> None:
        """Pause when running, otherwise resume quietly."""
        if self._state is LoopState.RUNNING:
            self.pause()
        else:
            self.start(message="")

    def reset(self) -> None:
        self._state = LoopState.STOPPED
        self._cancel_frame()
        self._score = 0
        self.sink.on_score(0, 0)
        self.spawner.populate(self._enemies, self.enemy_count)
        if self.audio is not None:
            self.audio.stop_background_music()
        self.sink.show_message(MSG_READY, MSG_READY_MS)
        self._log_state("RESET", f"{len(self._enemies)} enemies")

    # ------------------------------- Input -------------------------------------------

    def handle_click(self, x: float, y: float) -> Hit | None:
        """
        Shoot at canvas point (x, y). Ignored unless the loop is running.

        Returns
        -------
        Hit | None
            The enemy shot, or None on a miss.
        """
        if self._state is not LoopState.RUNNING:
            return None

        hit = resolve_click(self._enemies, x, y)
        if hit is None:
            if self.logger is not None:
                self.logger.log_click((x, y), False, "No target hit")
            return None

        self._score += hit.points
        self.sink.on_score(hit.points, self._score)
        if self.audio is not None:
            self.audio.play_shot_effect()
        if self.logger is not None:
            self.logger.log_click((x, y), True, f"{hit.kind.value} #{hit.index} +{hit.points}")
        return hit

    # ------------------------------- Loop --------------------------------------------

    def _schedule_frame(self) -> None:
        self._generation += 1
        self._frame_handle = self.scheduler.schedule(partial(self._on_frame, self._generation))

    def _cancel_frame(self) -> None:
        self._generation += 1
        self.scheduler.cancel(self._frame_handle)
        self._frame_handle = None

    def _on_frame(self, generation: int, timestamp_ms: int) -> None:
        # stale callback queued before a pause or reset
        if self._state is not LoopState.RUNNING or generation != self._generation:
            return

        if self._last_frame_ms is None:
            self._last_frame_ms = timestamp_ms
        else:
            dt = clamp_dt((timestamp_ms - self._last_frame_ms) / 1000)
            self._last_frame_ms = timestamp_ms
            advance_all(self._enemies, dt)
        self.frames += 1
        self.render()
        self._schedule_frame()

    def render(self) -> None:
        if self.renderer is not None:
            render_all(self.renderer, self._enemies, self.width, self.height, self.show_hitboxes)

    def _log_state(self, event: str, details: str = "") -> None:
        if self.logger is not None:
            self.logger.log_state(event, details)
