"""
Game entity dataclasses
"""

from dataclasses import dataclass


@dataclass
class Rect:
    """Axis-aligned box, top-left origin, y grows downward"""
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Rect size must be positive, got {self.width}x{self.height}"
            )

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass
class Player(Rect):
    """Player ship, moves along the bottom of the viewport"""
    speed: float = 5.0  # px/tick


@dataclass
class Bullet(Rect):
    """Player projectile, travels upward"""
    speed: float = 8.0  # px/tick
    active: bool = True


@dataclass
class Enemy(Rect):
    """Descending enemy"""
    speed: float = 3.0  # px/tick
    active: bool = True
    health: int = 1


@dataclass
class Star:
    """Background star, no gameplay interaction"""
    x: float
    y: float
    size: float
    speed: float
