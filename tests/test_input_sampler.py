"""Tests for held keys and the fire debounce."""

from game.starfield.input_sampler import KEY_LEFT, KEY_RIGHT, InputSampler


class TestHeldKeys:
    """Tests for the held-key map."""

    def test_unknown_key_not_held(self):
        assert not InputSampler().is_held(KEY_LEFT)

    def test_press_and_release(self):
        sampler = InputSampler()
        sampler.press(KEY_LEFT)
        assert sampler.is_held(KEY_LEFT)
        assert not sampler.is_held(KEY_RIGHT)
        sampler.release(KEY_LEFT)
        assert not sampler.is_held(KEY_LEFT)

    def test_clear(self):
        sampler = InputSampler()
        sampler.press(KEY_LEFT)
        sampler.press(KEY_RIGHT)
        sampler.clear()
        assert not sampler.is_held(KEY_LEFT)
        assert not sampler.is_held(KEY_RIGHT)


class TestFireDebounce:
    """Tests for request_fire."""

    def test_first_request_honored(self, clock):
        clock.now = 1000.0
        assert InputSampler(clock=clock).request_fire()

    def test_first_request_honored_at_time_zero(self, clock):
        assert InputSampler(clock=clock).request_fire()

    def test_requests_50ms_apart(self, clock):
        sampler = InputSampler(fire_cooldown=0.2, clock=clock)
        assert sampler.request_fire()
        clock.now = 0.05
        assert not sampler.request_fire()

    def test_requests_250ms_apart(self, clock):
        sampler = InputSampler(fire_cooldown=0.2, clock=clock)
        assert sampler.request_fire()
        clock.now = 0.25
        assert sampler.request_fire()

    def test_dropped_request_does_not_restart_cooldown(self, clock):
        sampler = InputSampler(fire_cooldown=0.2, clock=clock)
        assert sampler.request_fire()
        clock.now = 0.15
        assert not sampler.request_fire()
        clock.now = 0.21
        assert sampler.request_fire()

    def test_cooldown_restarts_after_honored_request(self, clock):
        sampler = InputSampler(fire_cooldown=0.2, clock=clock)
        sampler.request_fire()
        clock.now = 0.3
        assert sampler.request_fire()
        clock.now = 0.4
        assert not sampler.request_fire()
