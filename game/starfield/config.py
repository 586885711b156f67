"""
Gameplay tuning defaults
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple


@dataclass
class GameConfig:
    """Tunable gameplay constants. Speeds are px per tick."""

    # Player
    player_width: float = 50.0
    player_height: float = 50.0
    player_speed: float = 5.0
    player_bottom_offset: float = 100.0  # player.y = viewport height - offset

    # Bullets
    bullet_width: float = 4.0
    bullet_height: float = 15.0
    bullet_speed: float = 8.0
    fire_cooldown: float = 0.2  # seconds between honored shots

    # Enemies
    enemy_width: float = 45.0
    enemy_height: float = 45.0
    enemy_speed_range: Tuple[float, float] = (2.0, 4.0)  # [lo, hi)
    enemy_health: int = 1
    spawn_probability: float = 0.02  # per tick

    # Background
    star_count: int = 100
    star_max_size: float = 2.0
    star_speed_range: Tuple[float, float] = (1.0, 3.0)

    # Match rules
    starting_lives: int = 3
    kill_score: int = 100

    def __post_init__(self):
        self.enemy_speed_range = tuple(self.enemy_speed_range)
        self.star_speed_range = tuple(self.star_speed_range)
        self.validate()

    def validate(self):
        for name in ("player_width", "player_height", "bullet_width",
                     "bullet_height", "enemy_width", "enemy_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if not 0.0 <= self.spawn_probability <= 1.0:
            raise ValueError("spawn_probability must be in [0, 1]")
        if self.fire_cooldown < 0:
            raise ValueError("fire_cooldown must be non-negative")
        if self.star_count < 0:
            raise ValueError("star_count must be non-negative")
        if self.starting_lives < 1:
            raise ValueError("starting_lives must be at least 1")
        lo, hi = self.enemy_speed_range
        if lo > hi:
            raise ValueError("enemy_speed_range must be (lo, hi) with lo <= hi")
        lo, hi = self.star_speed_range
        if lo > hi:
            raise ValueError("star_speed_range must be (lo, hi) with lo <= hi")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        """Build from a config dict, ignoring keys that are not fields"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
