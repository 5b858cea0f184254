"""
Tests for the game session: loop state machine, frame timing, scoring.
"""

import os
import random
import tempfile
import unittest

from zombie_shooter.constants import (
    FRAME_SCALE, MSG_PAUSED, MSG_READY, MSG_STARTED, MSG_STARTED_MS,
)
from zombie_shooter.logger import GameLogger
from zombie_shooter.models import EnemyKind
from zombie_shooter.scheduler import FrameScheduler
from zombie_shooter.session import GameSession, LoopState
from tests.helpers import FixedRandom, RecordingAudio, RecordingRenderer, RecordingSink


class LeakyScheduler(FrameScheduler):
    """Scheduler whose cancel() does nothing, so stale frames still fire."""

    def cancel(self, handle):
        pass


def make_session(value=0.5, scheduler=None, **kwargs):
    # FixedRandom(0.5) -> every enemy LINEAR at (480, 270) moving left at 1.3
    # FixedRandom(0.6) -> every enemy CIRCULAR spawned at (566, 314)
    session = GameSession(
        scheduler or FrameScheduler(),
        renderer=kwargs.pop("renderer", RecordingRenderer()),
        audio=kwargs.pop("audio", RecordingAudio()),
        sink=kwargs.pop("sink", RecordingSink()),
        rng=FixedRandom(value),
        **kwargs,
    )
    session.populate()
    return session


class TestStateMachine(unittest.TestCase):

    def test_initial_state(self):
        session = make_session()
        self.assertIs(session.state, LoopState.STOPPED)
        self.assertEqual(session.score, 0)
        self.assertEqual(len(session.enemies), 8)

    def test_start_schedules_one_frame(self):
        session = make_session()
        session.start()
        self.assertIs(session.state, LoopState.RUNNING)
        self.assertEqual(session.scheduler.pending, 1)
        self.assertEqual(session.audio.events, ["music"])
        self.assertEqual(session.sink.messages[-1][0], MSG_STARTED)

    def test_start_when_running_is_noop(self):
        session = make_session()
        session.start()
        messages = len(session.sink.messages)
        session.start()
        self.assertEqual(session.scheduler.pending, 1)
        self.assertEqual(len(session.sink.messages), messages)

    def test_pause_cancels_frame(self):
        session = make_session()
        session.start()
        session.pause()
        self.assertIs(session.state, LoopState.PAUSED)
        self.assertEqual(session.scheduler.pending, 0)
        self.assertEqual(session.sink.messages[-1][0], MSG_PAUSED)

    def test_pause_twice_is_noop(self):
        session = make_session()
        session.start()
        session.pause()
        messages = len(session.sink.messages)
        session.pause()
        self.assertIs(session.state, LoopState.PAUSED)
        self.assertEqual(len(session.sink.messages), messages)

    def test_pause_when_stopped_is_noop(self):
        session = make_session()
        session.pause()
        self.assertIs(session.state, LoopState.STOPPED)

    def test_resume_after_pause(self):
        session = make_session()
        session.start()
        session.pause()
        session.start()
        self.assertIs(session.state, LoopState.RUNNING)
        self.assertEqual(session.scheduler.pending, 1)

    def test_toggle_pause(self):
        session = make_session()
        session.toggle_pause()
        self.assertTrue(session.running)
        session.toggle_pause()
        self.assertIs(session.state, LoopState.PAUSED)

    def test_resume_through_toggle_clears_message(self):
        session = make_session()
        session.start()
        session.toggle_pause()
        session.toggle_pause()
        self.assertTrue(session.running)
        self.assertEqual(session.sink.messages[-1], ("", 0))

    def test_start_after_pause_announces_start(self):
        session = make_session()
        session.start()
        session.pause()
        session.start()
        self.assertEqual(session.sink.messages[-1], (MSG_STARTED, MSG_STARTED_MS))

    def test_reset_from_any_state(self):
        for prepare in (lambda s: None, lambda s: s.start(), lambda s: (s.start(), s.pause())):
            session = make_session(enemy_count=8)
            prepare(session)
            session.reset()
            self.assertIs(session.state, LoopState.STOPPED)
            self.assertEqual(session.score, 0)
            self.assertEqual(len(session.enemies), 8)
            self.assertEqual(session.scheduler.pending, 0)

    def test_reset_after_scoring(self):
        session = make_session()
        session.start()
        session.handle_click(480, 270)
        self.assertEqual(session.score, 10)
        old = session.enemies
        session.reset()
        self.assertEqual(session.score, 0)
        self.assertEqual(len(session.enemies), 8)
        self.assertTrue(all(e.visible for e in session.enemies))
        self.assertFalse(set(map(id, old)) & set(map(id, session.enemies)))
        self.assertEqual(session.sink.scores[-1], (0, 0))
        self.assertEqual(session.sink.messages[-1][0], MSG_READY)
        self.assertEqual(session.audio.events[-1], "stop")

    def test_enemies_view_is_read_only(self):
        session = make_session()
        self.assertIsInstance(session.enemies, tuple)


class TestFrames(unittest.TestCase):

    def test_first_frame_only_records_reference(self):
        session = make_session()
        session.start()
        session.scheduler.run_pending(1000)
        self.assertEqual(session.frames, 1)
        self.assertEqual(session.enemies[0].x, 480.0)
        self.assertEqual(session.scheduler.pending, 1)

    def test_second_frame_advances_by_elapsed_time(self):
        session = make_session()
        session.start()
        session.scheduler.run_pending(1000)
        session.scheduler.run_pending(1016)
        enemy = session.enemies[0]
        self.assertAlmostEqual(enemy.x, 480.0 - 1.3 * 0.016 * FRAME_SCALE)

    def test_long_gap_is_clamped(self):
        session = make_session()
        session.start()
        session.scheduler.run_pending(1000)
        session.scheduler.run_pending(2000)
        self.assertAlmostEqual(session.enemies[0].x, 480.0 - 1.3 * 0.05 * FRAME_SCALE)

    def test_each_frame_renders(self):
        renderer = RecordingRenderer()
        session = make_session(renderer=renderer)
        session.start()
        session.scheduler.run_pending(0)
        self.assertEqual(renderer.calls[0], ("clear", 960, 540))
        self.assertEqual(sum(1 for c in renderer.calls if c[0] == "sprite"), 8)

    def test_restart_drops_frame_reference(self):
        session = make_session()
        session.start()
        session.scheduler.run_pending(1000)
        session.pause()
        session.start()
        # five seconds later: first frame after resuming must not advance
        session.scheduler.run_pending(6000)
        self.assertEqual(session.enemies[0].x, 480.0)

    def test_stale_frames_are_discarded(self):
        session = make_session(scheduler=LeakyScheduler())
        session.start()
        session.pause()
        session.start()
        self.assertEqual(session.scheduler.pending, 2)
        session.scheduler.run_pending(1000)
        self.assertEqual(session.frames, 1)
        self.assertEqual(session.scheduler.pending, 1)

    def test_loop_stops_after_reset(self):
        session = make_session(scheduler=LeakyScheduler())
        session.start()
        session.reset()
        session.scheduler.run_pending(1000)
        self.assertEqual(session.frames, 0)
        self.assertEqual(session.scheduler.pending, 0)


class TestClicks(unittest.TestCase):

    def test_click_on_linear_enemy_scores_ten(self):
        session = make_session(0.5)
        session.start()
        hit = session.handle_click(480, 270)
        self.assertEqual(hit.kind, EnemyKind.LINEAR)
        self.assertEqual(session.score, 10)
        self.assertFalse(session.enemies[hit.index].visible)
        self.assertEqual(session.sink.scores[-1], (10, 10))
        self.assertEqual(session.audio.events[-1], "shot")

    def test_click_on_circular_enemy_scores_fifteen(self):
        session = make_session(0.6)
        session.start()
        self.assertIs(session.enemies[-1].kind, EnemyKind.CIRCULAR)
        hit = session.handle_click(566, 314)
        self.assertEqual(hit.index, 7)
        self.assertEqual(session.score, 15)

    def test_score_accumulates(self):
        session = make_session(0.5)
        session.start()
        for _ in range(3):
            session.handle_click(480, 270)
        self.assertEqual(session.score, 30)
        self.assertEqual(sum(not e.visible for e in session.enemies), 3)

    def test_miss(self):
        session = make_session()
        session.start()
        self.assertIsNone(session.handle_click(5, 5))
        self.assertEqual(session.score, 0)
        self.assertNotIn("shot", session.audio.events)

    def test_clicks_ignored_unless_running(self):
        session = make_session()
        self.assertIsNone(session.handle_click(480, 270))
        session.start()
        session.pause()
        self.assertIsNone(session.handle_click(480, 270))
        self.assertEqual(session.score, 0)
        self.assertTrue(all(e.visible for e in session.enemies))

    def test_headless_session(self):
        session = GameSession(FrameScheduler(), rng=random.Random(5))
        session.populate()
        session.start()
        session.scheduler.run_pending(0)
        session.scheduler.run_pending(16)
        session.handle_click(-100, -100)
        session.reset()
        self.assertEqual(session.score, 0)


class TestLogging(unittest.TestCase):

    def test_shots_and_transitions_are_logged(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "log.md")
            session = make_session(logger=GameLogger(path))
            session.start()
            session.handle_click(480, 270)
            session.handle_click(5, 5)
            session.pause()
            session.reset()
            with open(path, encoding="utf-8") as f:
                text = f.read()
        self.assertIn("| HIT | zombie #7 +10 |", text)
        self.assertIn("| MISS | No target hit |", text)
        for event in ("START", "PAUSE", "RESET"):
            self.assertIn(f"| {event} | SYSTEM |", text)


if __name__ == '__main__':
    unittest.main()
