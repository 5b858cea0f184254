"""Tests for command line parsing and the window event loop."""

import os
import tempfile
import unittest
from unittest import mock

import pygame

from main import Game, parse_args


class TestParseArgs(unittest.TestCase):

    def test_defaults(self):
        args = parse_args([])
        self.assertIsNone(args.seed)
        self.assertEqual(args.enemies, 8)
        self.assertFalse(args.mute)

    def test_flags(self):
        args = parse_args(["--seed", "3", "--enemies", "12", "--mute", "--log-file", "x.md"])
        self.assertEqual((args.seed, args.enemies, args.mute, args.log_file), (3, 12, True, "x.md"))

    def test_negative_enemy_count_rejected(self):
        with self.assertRaises(SystemExit):
            parse_args(["--enemies", "-1"])


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


class TestEventLoop(unittest.TestCase):

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.game = Game(enemy_count=2, muted=True, log_file=os.path.join(tmp.name, "log.md"))
        patcher = mock.patch.object(pygame, "quit")
        patcher.start()
        self.addCleanup(patcher.stop)

    def run_batches(self, *batches):
        """Run the loop over the given event batches; returns how many were consumed."""
        with mock.patch.object(pygame.event, "get", side_effect=list(batches)) as get:
            self.game.run()
        return get.call_count

    def test_quit_survives_later_keypress_in_same_batch(self):
        consumed = self.run_batches(
            [pygame.event.Event(pygame.QUIT), key(pygame.K_f)],
            [pygame.event.Event(pygame.QUIT)],
        )
        self.assertEqual(consumed, 1)

    def test_escape_survives_later_keypress_in_same_batch(self):
        consumed = self.run_batches(
            [key(pygame.K_ESCAPE), key(pygame.K_m)],
            [pygame.event.Event(pygame.QUIT)],
        )
        self.assertEqual(consumed, 1)

    def test_keys_keep_the_loop_running(self):
        consumed = self.run_batches(
            [key(pygame.K_f)],
            [key(pygame.K_SPACE)],
            [pygame.event.Event(pygame.QUIT)],
        )
        self.assertEqual(consumed, 3)
        self.assertTrue(self.game.show_fps)
        self.assertTrue(self.game.session.running)


if __name__ == '__main__':
    unittest.main()
