"""Tests for key press / release handling."""

from game.starfield.controls import handle_key_press, handle_key_release
from game.starfield.entities import Enemy
from game.starfield.input_sampler import (
    KEY_FIRE,
    KEY_LEFT,
    KEY_QUIT,
    KEY_RIGHT,
    KEY_START,
)
from game.starfield.match import MatchState


def end_match(match, scheduler):
    match.simulation.lives = 1
    match.simulation.enemies.append(Enemy(x=0, y=599, width=45, height=45, speed=3))
    scheduler.run_pending()
    assert match.state is MatchState.GAME_OVER


class TestStartKey:
    """ENTER starts from the menu and restarts after game over."""

    def test_starts_from_menu(self, match):
        assert handle_key_press(match, KEY_START) == "start"
        assert match.state is MatchState.PLAYING

    def test_ignored_while_playing(self, match, surface):
        match.start()
        frames = len(surface.presented)
        assert handle_key_press(match, KEY_START) is None
        assert match.state is MatchState.PLAYING
        assert len(surface.presented) == frames

    def test_restarts_after_game_over(self, match, scheduler):
        match.start()
        match.simulation.score = 500
        end_match(match, scheduler)
        assert handle_key_press(match, KEY_START) == "restart"
        assert match.state is MatchState.PLAYING
        assert match.score == 0
        assert match.lives == 3


class TestGameKeys:
    """Arrows and space reach the match."""

    def test_arrows_held_until_released(self, match):
        match.start()
        assert handle_key_press(match, KEY_LEFT) == "press"
        assert handle_key_press(match, KEY_RIGHT) == "press"
        assert match.input.is_held(KEY_LEFT)
        assert match.input.is_held(KEY_RIGHT)
        assert handle_key_release(match, KEY_LEFT) == "release"
        assert not match.input.is_held(KEY_LEFT)
        assert match.input.is_held(KEY_RIGHT)

    def test_arrow_moves_player_on_next_tick(self, match, scheduler):
        match.start()
        handle_key_press(match, KEY_RIGHT)
        scheduler.run_pending()
        assert match.simulation.player.x == 380

    def test_space_fires_while_playing(self, match):
        match.start()
        assert handle_key_press(match, KEY_FIRE) == "fire"
        assert len(match.simulation.bullets) == 1

    def test_space_debounced(self, match, clock):
        match.start()
        handle_key_press(match, KEY_FIRE)
        handle_key_release(match, KEY_FIRE)
        clock.now = 0.05
        assert handle_key_press(match, KEY_FIRE) == "press"
        assert len(match.simulation.bullets) == 1

    def test_space_in_menu_does_not_fire(self, match):
        assert handle_key_press(match, KEY_FIRE) == "press"
        assert match.simulation.bullets == []

    def test_space_after_game_over_does_not_fire(self, match, scheduler, clock):
        match.start()
        end_match(match, scheduler)
        clock.now = 5.0
        assert handle_key_press(match, KEY_FIRE) == "press"
        assert match.simulation.bullets == []


class TestUnmappedKeys:
    """Keys outside the game set are ignored."""

    def test_unknown_and_missing_keys(self, match):
        assert handle_key_press(match, None) is None
        assert handle_key_press(match, "a") is None
        assert handle_key_release(match, None) is None
        assert handle_key_release(match, KEY_START) is None

    def test_quit_is_left_to_the_host(self, match):
        assert handle_key_press(match, KEY_QUIT) is None
        assert match.state is MatchState.MENU
