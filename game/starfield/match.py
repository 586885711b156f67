"""
Match state machine and tick loop driver
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Optional, Protocol, Tuple

from .config import GameConfig
from .entities import Bullet, Enemy, Player, Star
from .input_sampler import KEY_FIRE, InputSampler
from .scheduler import FrameScheduler
from .simulation import Simulation

logger = logging.getLogger(__name__)


class MatchState(str, Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "gameover"


class MatchStateError(RuntimeError):
    """Raised for a transition the current state does not allow"""


@dataclass(frozen=True)
class MatchSnapshot:
    """Read-only copy of a completed tick, handed to the presentation layer"""
    state: MatchState
    score: int
    lives: int
    width: float
    height: float
    player: Optional[Player]
    bullets: Tuple[Bullet, ...]
    enemies: Tuple[Enemy, ...]
    stars: Tuple[Star, ...]


class Surface(Protocol):
    """Hosting surface: known pixel size and a sink for finished ticks"""
    width: float
    height: float

    def present(self, snapshot: MatchSnapshot) -> None: ...


class Match:
    """
    Menu -> Playing -> GameOver, driving one `Simulation`.

    Each tick schedules the next only while the state is still PLAYING, so
    the loop stops by itself on game over. `teardown()` cancels whatever is
    pending when the host goes away.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        scheduler: Optional[FrameScheduler] = None,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.scheduler = scheduler or FrameScheduler()
        self.rng = rng or random.Random()
        self.input = InputSampler(fire_cooldown=self.config.fire_cooldown, clock=clock)

        self.state = MatchState.MENU
        self.surface: Optional[Surface] = None
        self.simulation: Optional[Simulation] = None
        self.last_events: Dict[str, float] = {}
        self._tick_handle: Optional[int] = None

    # ----------------------------
    # Hosting surface
    # ----------------------------

    def attach(self, surface: Surface):
        """Bind a surface; the first one fixes the viewport and the starfield"""
        self.surface = surface
        if self.simulation is None:
            self.simulation = Simulation(
                surface.width, surface.height, config=self.config, rng=self.rng
            )
        logger.debug("Surface attached (%sx%s)", surface.width, surface.height)
        if self.state is MatchState.PLAYING and self._tick_handle is None:
            self._schedule_tick()

    def teardown(self):
        """Cancel any pending tick and drop the surface"""
        self._cancel_tick()
        self.surface = None
        logger.debug("Surface torn down")

    # ----------------------------
    # Transitions
    # ----------------------------

    def start(self):
        if self.state is not MatchState.MENU:
            raise MatchStateError(f"Cannot start from {self.state.value}")
        self._begin()

    def restart(self):
        if self.state is not MatchState.GAME_OVER:
            raise MatchStateError(f"Cannot restart from {self.state.value}")
        self._begin()

    def stop(self):
        """Abandon the running match and go back to the menu"""
        if self.state is not MatchState.PLAYING:
            raise MatchStateError(f"Cannot stop from {self.state.value}")
        self._cancel_tick()
        self.state = MatchState.MENU
        logger.info("Match stopped")

    def _begin(self):
        self._cancel_tick()
        self.state = MatchState.PLAYING
        self.last_events = {}
        if self.simulation is not None:
            self.simulation.reset()
        logger.info("Match started")
        self.tick()

    # ----------------------------
    # Loop
    # ----------------------------

    def tick(self):
        """Run one simulation step and present it"""
        self._cancel_tick()
        if self.state is not MatchState.PLAYING:
            return
        if self.surface is None or self.simulation is None:
            logger.debug("Tick skipped: no surface")
            return

        sim = self.simulation
        self.last_events = sim.step(self.input)

        if sim.lives <= 0:
            self.state = MatchState.GAME_OVER
            logger.info("Game over, final score %d", sim.score)

        self.surface.present(self.snapshot())

        if self.state is MatchState.PLAYING:
            self._schedule_tick()

    def _schedule_tick(self):
        self._tick_handle = self.scheduler.request(self.tick)

    def _cancel_tick(self):
        self.scheduler.cancel(self._tick_handle)
        self._tick_handle = None

    @property
    def tick_pending(self) -> bool:
        return self._tick_handle is not None

    # ----------------------------
    # Input
    # ----------------------------

    def key_down(self, key: str) -> Optional[Bullet]:
        """Record the press; space also fires while playing"""
        self.input.press(key)
        if key == KEY_FIRE and self.state is MatchState.PLAYING:
            return self.fire()
        return None

    def key_up(self, key: str):
        self.input.release(key)

    def fire(self) -> Optional[Bullet]:
        """Fire if playing and the debounce allows it"""
        if self.state is not MatchState.PLAYING or self.simulation is None:
            return None
        if not self.input.request_fire():
            return None
        return self.simulation.fire_bullet()

    # ----------------------------
    # Read-only views
    # ----------------------------

    @property
    def score(self) -> int:
        return self.simulation.score if self.simulation else 0

    @property
    def lives(self) -> int:
        return self.simulation.lives if self.simulation else self.config.starting_lives

    def snapshot(self) -> MatchSnapshot:
        sim = self.simulation
        if sim is None:
            return MatchSnapshot(
                state=self.state, score=0, lives=self.config.starting_lives,
                width=0, height=0, player=None, bullets=(), enemies=(), stars=(),
            )
        return MatchSnapshot(
            state=self.state,
            score=sim.score,
            lives=sim.lives,
            width=sim.width,
            height=sim.height,
            player=replace(sim.player),
            bullets=tuple(replace(b) for b in sim.bullets),
            enemies=tuple(replace(e) for e in sim.enemies),
            stars=tuple(replace(s) for s in sim.stars),
        )
