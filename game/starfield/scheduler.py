"""
Per-frame callback scheduling
"""

from __future__ import annotations

import itertools
from typing import Callable, Dict, Optional


class FrameScheduler:
    """
    One-shot callbacks run on the next display frame.

    The host calls `run_pending()` once per frame. A callback requested while
    the current batch is running waits for the following frame, so a
    self-rescheduling loop advances exactly one tick per frame.
    """

    def __init__(self):
        self._handles = itertools.count(1)
        self._pending: Dict[int, Callable[[], None]] = {}
        self._running: Dict[int, Callable[[], None]] = {}

    def request(self, callback: Callable[[], None]) -> int:
        handle = next(self._handles)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: Optional[int]) -> None:
        if handle is None:
            return
        self._pending.pop(handle, None)
        self._running.pop(handle, None)

    def run_pending(self) -> int:
        """Run the callbacks queued before this frame; return how many ran"""
        self._running, self._pending = self._pending, {}
        ran = 0
        while self._running:
            handle = next(iter(self._running))
            callback = self._running.pop(handle)
            callback()
            ran += 1
        return ran

    def __len__(self) -> int:
        return len(self._pending)
