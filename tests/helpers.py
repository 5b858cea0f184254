"""Shared fakes for the test suite."""

import random


class FixedRandom(random.Random):
    """random() always returns `value`, so uniform(a, b) == a + (b - a) * value."""

    def __init__(self, value=0.5):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def clear(self, width, height):
        self.calls.append(("clear", width, height))

    def draw_sprite(self, kind, x, y, w, h):
        self.calls.append(("sprite", kind, x, y, w, h))

    def draw_circle(self, x, y, radius, color):
        self.calls.append(("circle", x, y, radius))


class RecordingSink:
    def __init__(self):
        self.scores = []
        self.messages = []

    def on_score(self, delta, total):
        self.scores.append((delta, total))

    def show_message(self, text, duration_ms=0):
        self.messages.append((text, duration_ms))


class RecordingAudio:
    def __init__(self):
        self.events = []

    def play_shot_effect(self):
        self.events.append("shot")

    def play_background_music(self):
        self.events.append("music")

    def stop_background_music(self):
        self.events.append("stop")
