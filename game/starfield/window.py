"""
Arcade window: hosting surface, input source and renderer for a Match
"""

from __future__ import annotations

import logging
import random
from typing import Optional

import arcade

from .controls import handle_key_press, handle_key_release
from .input_sampler import KEY_FIRE, KEY_LEFT, KEY_QUIT, KEY_RIGHT, KEY_START
from .match import Match, MatchSnapshot, MatchState

logger = logging.getLogger(__name__)

KEY_NAMES = {
    arcade.key.LEFT: KEY_LEFT,
    arcade.key.RIGHT: KEY_RIGHT,
    arcade.key.SPACE: KEY_FIRE,
    arcade.key.ENTER: KEY_START,
    arcade.key.RETURN: KEY_START,
    arcade.key.ESCAPE: KEY_QUIT,
}


class StarfieldWindow(arcade.Window):
    """Arcade window that drives and draws a Match

    With `interactive=False` the window only draws what it is given through
    `present()`; a headless driver (the gym env) owns the loop.
    """

    def __init__(
        self,
        match: Match,
        width: int,
        height: int,
        title: str = "Starfield Battle",
        interactive: bool = True,
        **window_kwargs,
    ):
        super().__init__(width, height, title, **window_kwargs)
        self.match = match
        self.interactive = interactive
        self._snapshot: Optional[MatchSnapshot] = None
        self._twinkle = random.Random()

        # Colors
        self.BG = (10, 14, 39)
        self.PLAYER_C = (168, 85, 247)
        self.ENGINE_C = (6, 182, 212)
        self.BULLET_C = (6, 182, 212)
        self.ENEMY_C = (239, 68, 68)
        self.HUD_C = (168, 85, 247)
        self.LIFE_C = (236, 72, 153)
        self.TEXT_C = (230, 230, 240)
        self.DANGER_C = (239, 68, 68)

        self.background_color = self.BG
        if self.interactive:
            self.match.attach(self)

    # ----------------------------
    # Surface contract
    # ----------------------------

    def present(self, snapshot: MatchSnapshot):
        self._snapshot = snapshot

    # ----------------------------
    # Arcade callbacks
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.interactive:
            self.match.scheduler.run_pending()

    def on_key_press(self, symbol: int, modifiers: int):
        if not self.interactive:
            return
        key = KEY_NAMES.get(symbol)
        if key == KEY_QUIT:
            self.close()
            return
        handle_key_press(self.match, key)

    def on_key_release(self, symbol: int, modifiers: int):
        if not self.interactive:
            return
        handle_key_release(self.match, KEY_NAMES.get(symbol))

    def on_deactivate(self):
        # key-up events are lost while unfocused
        if self.interactive:
            self.match.input.clear()

    def on_close(self):
        if self.interactive:
            self.match.teardown()
            logger.info("Window closed, score %d", self.match.score)
        super().on_close()

    def on_draw(self):
        self.clear()
        snapshot = self._snapshot
        # stopped or not started yet: nothing was presented for this state
        if snapshot is None or snapshot.state is not self.match.state:
            snapshot = self.match.snapshot()

        self._draw_world(snapshot)
        if snapshot.state is MatchState.PLAYING:
            self._draw_hud(snapshot)
        elif snapshot.state is MatchState.MENU:
            self._draw_menu()
        else:
            self._draw_game_over(snapshot)

    # ----------------------------
    # Drawing helpers
    # ----------------------------

    def _sy(self, y: float) -> float:
        """World y (down) -> screen y (up)"""
        return self.height - y

    def _draw_world(self, snapshot: MatchSnapshot):
        for s in snapshot.stars:
            alpha = int(255 * (0.5 + self._twinkle.random() * 0.5))
            size = max(s.size, 0.5)
            top = self._sy(s.y)
            arcade.draw_lrbt_rectangle_filled(
                s.x, s.x + size, top - size, top, (255, 255, 255, alpha)
            )

        for b in snapshot.bullets:
            if not b.active:
                continue
            arcade.draw_lrbt_rectangle_filled(
                b.x, b.x + b.width, self._sy(b.y + b.height), self._sy(b.y), self.BULLET_C
            )

        for e in snapshot.enemies:
            if not e.active:
                continue
            # Point-down triangle
            arcade.draw_triangle_filled(
                e.x + e.width / 2, self._sy(e.y + e.height),
                e.x, self._sy(e.y),
                e.x + e.width, self._sy(e.y),
                self.ENEMY_C,
            )

        p = snapshot.player
        if p is not None and snapshot.state is not MatchState.MENU:
            cx = p.x + p.width / 2
            arcade.draw_triangle_filled(
                cx, self._sy(p.y),
                p.x, self._sy(p.y + p.height),
                p.x + p.width, self._sy(p.y + p.height),
                self.PLAYER_C,
            )
            # Engine glow
            arcade.draw_lrbt_rectangle_filled(
                cx - 5, cx + 5,
                self._sy(p.y + p.height + 3), self._sy(p.y + p.height - 5),
                self.ENGINE_C,
            )

    def _draw_hud(self, snapshot: MatchSnapshot):
        arcade.draw_text(
            f"Score: {snapshot.score}", 32, self.height - 48, self.HUD_C, 22, bold=True
        )
        for i in range(max(snapshot.lives, 0)):
            arcade.draw_circle_filled(
                self.width - 48 - i * 40, self.height - 40, 16, self.LIFE_C
            )
        arcade.draw_text(
            "<- -> move | SPACE fire", self.width / 2, 24,
            (*self.TEXT_C, 128), 12, anchor_x="center",
        )

    def _draw_menu(self):
        cx, cy = self.width / 2, self.height / 2
        arcade.draw_text(
            "STARFIELD BATTLE", cx, cy + 60, self.HUD_C, 48,
            anchor_x="center", bold=True,
        )
        arcade.draw_text(
            "Arrow keys to move, space to fire", cx, cy, self.TEXT_C, 20,
            anchor_x="center",
        )
        arcade.draw_text(
            "Press ENTER to start", cx, cy - 60, self.TEXT_C, 20, anchor_x="center"
        )

    def _draw_game_over(self, snapshot: MatchSnapshot):
        cx, cy = self.width / 2, self.height / 2
        arcade.draw_text(
            "GAME OVER", cx, cy + 60, self.DANGER_C, 48, anchor_x="center", bold=True
        )
        arcade.draw_text(
            f"Final score: {snapshot.score}", cx, cy, self.HUD_C, 28,
            anchor_x="center", bold=True,
        )
        arcade.draw_text(
            "Press ENTER to play again", cx, cy - 60, self.TEXT_C, 20,
            anchor_x="center",
        )
