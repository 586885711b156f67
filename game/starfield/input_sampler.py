"""
Keyboard state tracking and fire-rate limiting
"""

from __future__ import annotations

import time
from typing import Callable, Dict, Optional

KEY_LEFT = "ArrowLeft"
KEY_RIGHT = "ArrowRight"
KEY_FIRE = " "
KEY_START = "Enter"
KEY_QUIT = "Escape"


class InputSampler:
    """
    Held-key map plus a debounced fire request.

    Key notifications arrive whenever the host delivers them; the simulation
    only reads `is_held` at tick boundaries.
    """

    def __init__(
        self,
        fire_cooldown: float = 0.2,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.fire_cooldown = fire_cooldown
        self._clock = clock
        self._held: Dict[str, bool] = {}
        self._last_fire: Optional[float] = None

    def press(self, key: str) -> None:
        self._held[key] = True

    def release(self, key: str) -> None:
        self._held[key] = False

    def is_held(self, key: str) -> bool:
        return self._held.get(key, False)

    def clear(self) -> None:
        """Forget held keys (e.g. after the host loses focus)"""
        self._held.clear()

    def request_fire(self) -> bool:
        """Return True if a shot may be fired now.

        Requests within `fire_cooldown` seconds of the last honored one are
        dropped, not queued.
        """
        now = self._clock()
        if self._last_fire is not None and now - self._last_fire < self.fire_cooldown:
            return False
        self._last_fire = now
        return True
