"""
Simulation - entity store and the per-tick update
-------------------------------------------------
- Owns the player, bullets, enemies and background stars
- Advances everything by one tick in a fixed order:
  player -> stars -> bullets -> enemies (collisions) -> spawn
- Enemy resolution is two-phase: every enemy first gets an outcome, then
  the collections are filtered on those outcomes
- Spawning is an independent Bernoulli trial per tick

All randomness goes through `self.rng` so a seeded match replays exactly.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Dict, List, Optional

from .config import GameConfig
from .entities import Bullet, Enemy, Player, Star
from .input_sampler import KEY_LEFT, KEY_RIGHT, InputSampler
from .utils import clamp, overlaps, uniform_half_open


class EnemyOutcome(Enum):
    RETAINED = "retained"
    BREACHED = "breached"
    DESTROYED = "destroyed"
    COLLIDED = "collided"
    OUT_OF_BOUNDS = "out_of_bounds"


class Simulation:
    """Mutable world state for one viewport, advanced by `step()`"""

    def __init__(
        self,
        width: float,
        height: float,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

        cfg = self.config
        self.player = Player(
            x=0.0, y=0.0,
            width=cfg.player_width, height=cfg.player_height,
            speed=cfg.player_speed,
        )
        self.bullets: List[Bullet] = []
        self.enemies: List[Enemy] = []
        # Stars live as long as the viewport, not the match
        self.stars: List[Star] = [self._make_star() for _ in range(cfg.star_count)]

        self.score = 0
        self.lives = cfg.starting_lives
        self._events: Dict[str, float] = {}

        self.center_player()

    # ----------------------------
    # Match lifecycle
    # ----------------------------

    def reset(self):
        """Fresh match: score, lives, empty bullet/enemy lists, centered player"""
        self.score = 0
        self.lives = self.config.starting_lives
        self.bullets = []
        self.enemies = []
        self._events = {}
        self.center_player()

    def center_player(self):
        self.player.x = self.width / 2 - self.player.width / 2
        self.player.y = self.height - self.config.player_bottom_offset

    # ----------------------------
    # Spawning
    # ----------------------------

    def _make_star(self) -> Star:
        cfg = self.config
        return Star(
            x=self.rng.random() * self.width,
            y=self.rng.random() * self.height,
            size=self.rng.random() * cfg.star_max_size,
            speed=uniform_half_open(self.rng, *cfg.star_speed_range),
        )

    def spawn_enemy(self) -> Enemy:
        cfg = self.config
        enemy = Enemy(
            x=self.rng.random() * max(0.0, self.width - cfg.enemy_width),
            y=-cfg.enemy_height,
            width=cfg.enemy_width,
            height=cfg.enemy_height,
            speed=uniform_half_open(self.rng, *cfg.enemy_speed_range),
            health=cfg.enemy_health,
        )
        self.enemies.append(enemy)
        return enemy

    def fire_bullet(self) -> Bullet:
        """Add a bullet at the player's muzzle (top edge, centered)"""
        cfg = self.config
        bullet = Bullet(
            x=self.player.center_x - cfg.bullet_width / 2,
            y=self.player.y,
            width=cfg.bullet_width,
            height=cfg.bullet_height,
            speed=cfg.bullet_speed,
        )
        self.bullets.append(bullet)
        self._events["shot"] = self._events.get("shot", 0.0) + 1.0
        return bullet

    # ----------------------------
    # Tick
    # ----------------------------

    def step(self, inputs: InputSampler) -> Dict[str, float]:
        """Advance one tick and return the event tally for it.

        Shots fired between ticks are counted in the following tick's tally.
        """
        events = {"shot": self._events.get("shot", 0.0), "hit": 0.0, "kill": 0.0,
                  "breach": 0.0, "collision": 0.0, "spawn": 0.0}
        self._events = events

        score_before, lives_before = self.score, self.lives

        self._update_player(inputs)
        self._update_stars()
        self._update_bullets()
        self._update_enemies()
        self._spawn_logic()

        events["score"] = float(self.score - score_before)
        events["lives_lost"] = float(lives_before - self.lives)
        self._events = {}
        return events

    def _update_player(self, inputs: InputSampler):
        p = self.player
        max_x = self.width - p.width
        if inputs.is_held(KEY_LEFT) and p.x > 0:
            p.x -= p.speed
        if inputs.is_held(KEY_RIGHT) and p.x < max_x:
            p.x += p.speed
        p.x = clamp(p.x, 0.0, max(0.0, max_x))

    def _update_stars(self):
        for star in self.stars:
            star.y += star.speed
            if star.y > self.height:
                star.y = 0.0
                star.x = self.rng.random() * self.width

    def _update_bullets(self):
        for b in self.bullets:
            b.y -= b.speed
        self.bullets = [b for b in self.bullets if b.active and b.y > -b.height]

    def _update_enemies(self):
        # Phase 1: move and resolve each enemy against the current bullets
        outcomes = [self._resolve_enemy(e) for e in self.enemies]

        # Phase 2: filter on the outcomes
        self.enemies = [
            e for e, outcome in zip(self.enemies, outcomes)
            if outcome is EnemyOutcome.RETAINED
        ]
        self.bullets = [b for b in self.bullets if b.active]

    def _resolve_enemy(self, enemy: Enemy) -> EnemyOutcome:
        events = self._events
        enemy.y += enemy.speed

        if enemy.y > self.height:
            self.lives -= 1
            events["breach"] += 1.0
            return EnemyOutcome.BREACHED

        for b in self.bullets:
            if not b.active or not overlaps(b, enemy):
                continue
            # deactivate before looking at the next enemy: one kill per bullet
            b.active = False
            enemy.health -= 1
            events["hit"] += 1.0
            if enemy.health <= 0:
                enemy.active = False
                self.score += self.config.kill_score
                events["kill"] += 1.0
                break

        # ramming costs a life even if a bullet already destroyed the enemy
        if overlaps(self.player, enemy):
            enemy.active = False
            self.lives -= 1
            events["collision"] += 1.0
            return EnemyOutcome.COLLIDED

        if not enemy.active:
            return EnemyOutcome.DESTROYED

        if enemy.y >= self.height + enemy.height:
            return EnemyOutcome.OUT_OF_BOUNDS
        return EnemyOutcome.RETAINED

    def _spawn_logic(self):
        if self.rng.random() < self.config.spawn_probability:
            self.spawn_enemy()
            self._events["spawn"] += 1.0
