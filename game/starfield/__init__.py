"""Starfield Battle - vertical arcade shooter simulation"""

from .config import GameConfig
from .match import Match, MatchSnapshot, MatchState, MatchStateError
from .scheduler import FrameScheduler
from .simulation import Simulation
from .starfield_env import StarfieldEnv, run_random_episode
from .utils import overlaps

__all__ = [
    'GameConfig',
    'Match',
    'MatchSnapshot',
    'MatchState',
    'MatchStateError',
    'FrameScheduler',
    'Simulation',
    'StarfieldEnv',
    'run_random_episode',
    'overlaps',
]
