"""
Interactive Starfield Battle in an Arcade window

Controls: arrow keys move, space fires, ENTER starts / restarts, ESC quits.

Usage:
    python -m play.play
    python -m play.play --width 800 --height 600 --seed 7
"""

import argparse
import random

import arcade

from game.starfield import GameConfig, Match
from game.starfield.utils import seed_everything, setup_logging
from game.starfield.window import StarfieldWindow
from play.configs.starfield_config import GAME_CONFIG, WINDOW_CONFIG


def play(
    width: int = WINDOW_CONFIG["width"],
    height: int = WINDOW_CONFIG["height"],
    fullscreen: bool = WINDOW_CONFIG["fullscreen"],
    seed=None,
):
    """Open the window in the menu and run until it is closed"""
    seed_everything(seed)
    match = Match(
        config=GameConfig.from_dict(GAME_CONFIG),
        rng=random.Random(seed),
    )
    window = StarfieldWindow(
        match,
        width,
        height,
        title=WINDOW_CONFIG["title"],
        fullscreen=fullscreen,
        update_rate=WINDOW_CONFIG["update_rate"],
    )
    print(f"Starfield Battle {window.width}x{window.height} - press ENTER to start")
    arcade.run()
    print(f"Last score: {match.score}")
    return match


def main():
    parser = argparse.ArgumentParser(description="Play Starfield Battle")
    parser.add_argument(
        "--width",
        type=int,
        default=WINDOW_CONFIG["width"],
        help=f"Window width (default: {WINDOW_CONFIG['width']})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=WINDOW_CONFIG["height"],
        help=f"Window height (default: {WINDOW_CONFIG['height']})",
    )
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        help="Run fullscreen",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for spawns and stars",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    args = parser.parse_args()
    setup_logging(args.log_level)

    play(
        width=args.width,
        height=args.height,
        fullscreen=args.fullscreen,
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
