"""
Utility functions for game mechanics
"""

from __future__ import annotations
import logging
import random
import sys
from typing import Optional, Union
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def overlaps(a, b) -> bool:
    """Check if two axis-aligned boxes intersect.

    Boxes that only share an edge do not overlap.
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def uniform_half_open(rng: random.Random, lo: float, hi: float) -> float:
    """Draw from [lo, hi)"""
    return lo + rng.random() * (hi - lo)


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)


def setup_logging(level: Union[int, str] = logging.INFO):
    """Configure root logging for the entry-point scripts"""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            handlers=[logging.StreamHandler(sys.stdout)],
        )
    logging.getLogger().setLevel(level)
    return logging.getLogger("game.starfield")
