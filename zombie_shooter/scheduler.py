"""
Frame scheduling.

Callbacks queued with `schedule()` run on the next `run_pending()` pump, which
the main loop calls once per displayed frame with the current time. A callback
that schedules again lands on the following pump, so one frame callback runs
per frame. Cancelled handles never run.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable

import pygame

FrameCallback = Callable[[int], None]


def now_ms() -> int:
    """Milliseconds since pygame.init(); monotonic."""
    return int(pygame.time.get_ticks())


class FrameScheduler:
    """Queue of next-frame callbacks keyed by integer handle."""

    def __init__(self) -> None:
        self._callbacks: dict[int, FrameCallback] = {}
        self._ids = itertools.count(1)

    @property
    def pending(self) -> int:
        return len(self._callbacks)

    def schedule(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._callbacks[handle] = callback
        return handle

    def cancel(self, handle: int | None) -> None:
        if handle is not None:
            self._callbacks.pop(handle, None)

    def run_pending(self, timestamp_ms: int) -> int:
        """
        Run the callbacks queued before this call.

        Returns the number of callbacks run.
        """
        batch = sorted(self._callbacks)
        ran = 0
        for handle in batch:
            # may have been cancelled by an earlier callback in this batch
            callback = self._callbacks.pop(handle, None)
            if callback is None:
                continue
            callback(timestamp_ms)
            ran += 1
        return ran
