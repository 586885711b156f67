"""
Key press / release handling for interactive front ends
"""

from __future__ import annotations

from typing import Optional

from .input_sampler import KEY_FIRE, KEY_LEFT, KEY_RIGHT, KEY_START
from .match import Match, MatchState

GAME_KEYS = (KEY_LEFT, KEY_RIGHT, KEY_FIRE)


def handle_key_press(match: Match, key: Optional[str]) -> Optional[str]:
    """Apply a key press to the match and return what it did.

    Returns "start", "restart", "fire", "press" or None when the key had no
    effect.
    """
    if key == KEY_START:
        if match.state is MatchState.MENU:
            match.start()
            return "start"
        if match.state is MatchState.GAME_OVER:
            match.restart()
            return "restart"
        return None
    if key in GAME_KEYS:
        bullet = match.key_down(key)
        return "fire" if bullet is not None else "press"
    return None


def handle_key_release(match: Match, key: Optional[str]) -> Optional[str]:
    if key in GAME_KEYS:
        match.key_up(key)
        return "release"
    return None
