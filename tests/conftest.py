"""Shared fixtures for the Starfield Battle tests."""

import random

import pytest

from game.starfield.config import GameConfig
from game.starfield.match import Match
from game.starfield.scheduler import FrameScheduler
from game.starfield.simulation import Simulation


class FakeClock:
    """Manually driven monotonic clock."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FixedRandom(random.Random):
    """Random whose random() always returns the same value."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


class RecordingSurface:
    """Surface that keeps every presented snapshot."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.presented = []

    def present(self, snapshot):
        self.presented.append(snapshot)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def no_spawn_rng():
    """0.5 is never below the spawn probability."""
    return FixedRandom(0.5)


@pytest.fixture
def sim(no_spawn_rng):
    return Simulation(800, 600, config=GameConfig(), rng=no_spawn_rng)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def match(scheduler, clock, no_spawn_rng, surface):
    m = Match(config=GameConfig(), scheduler=scheduler, clock=clock, rng=no_spawn_rng)
    m.attach(surface)
    return m
