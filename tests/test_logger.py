"""Tests for the markdown event log."""

import os
import tempfile
import unittest

from zombie_shooter.logger import GameLogger


class TestGameLogger(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "log.md")

    def tearDown(self):
        self.tmp.cleanup()

    def read(self):
        with open(self.path, encoding="utf-8") as f:
            return f.read()

    def test_header(self):
        GameLogger(self.path)
        text = self.read()
        self.assertTrue(text.startswith("# Zombie Shooter Game Log"))
        self.assertIn("| Timestamp | Position (x,y) | Result | Details |", text)

    def test_click_rows(self):
        logger = GameLogger(self.path)
        logger.log_click((12.4, 99.6), True, "mummy #3 +15")
        logger.log_click((1, 2), False)
        text = self.read()
        self.assertIn("| (12, 100) | HIT | mummy #3 +15 |", text)
        self.assertIn("| (1, 2) | MISS |  |", text)

    def test_state_row(self):
        logger = GameLogger(self.path)
        logger.log_state("PAUSE", "score 40")
        self.assertIn("| PAUSE | SYSTEM | score 40 |", self.read())

    def test_unwritable_path_does_not_raise(self):
        logger = GameLogger(os.path.join(self.tmp.name, "missing", "log.md"))
        logger.log_click((0, 0), False)
        logger.log_state("RESET")


if __name__ == '__main__':
    unittest.main()
