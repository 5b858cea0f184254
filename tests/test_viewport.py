"""Tests for window <-> canvas coordinate mapping."""

import unittest

from zombie_shooter.viewport import fit_rect, to_canvas_coords

CANVAS = (960, 540)


class TestFitRect(unittest.TestCase):

    def test_same_size(self):
        self.assertEqual(fit_rect((960, 540), CANVAS), (0, 0, 960, 540))

    def test_uniform_upscale(self):
        self.assertEqual(fit_rect((1920, 1080), CANVAS), (0, 0, 1920, 1080))

    def test_pillarbox(self):
        self.assertEqual(fit_rect((1000, 540), CANVAS), (20, 0, 960, 540))

    def test_letterbox(self):
        self.assertEqual(fit_rect((960, 640), CANVAS), (0, 50, 960, 540))


class TestToCanvasCoords(unittest.TestCase):

    def test_identity(self):
        self.assertEqual(to_canvas_coords((100, 50), (0, 0, 960, 540), CANVAS), (100, 50))

    def test_scaled_window(self):
        self.assertEqual(to_canvas_coords((960, 540), (0, 0, 1920, 1080), CANVAS), (480, 270))

    def test_offset_view(self):
        self.assertEqual(to_canvas_coords((500, 270), (20, 0, 960, 540), CANVAS), (480, 270))


if __name__ == '__main__':
    unittest.main()
