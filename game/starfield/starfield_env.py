"""
StarfieldEnv - headless Gymnasium driver for a Match
----------------------------------------------------
- Runs the real Match loop: every env step flushes one frame of the
  FrameScheduler, which runs exactly one tick
- Simulated clock (step * dt) so the fire debounce is frame-exact
- Discrete MultiDiscrete action space: [move(3), fire(2)]
- Vector observation: player state + k nearest enemies
- Optional Arcade rendering ("human" window or "rgb_array")

Quick test:
    python -m game.starfield.starfield_env
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import GameConfig
from .input_sampler import KEY_FIRE, KEY_LEFT, KEY_RIGHT
from .match import Match, MatchSnapshot, MatchState
from .scheduler import FrameScheduler
from .utils import clamp, seed_everything


class HeadlessSurface:
    """Surface with a fixed size that keeps the last presented snapshot"""

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        self.last_snapshot: Optional[MatchSnapshot] = None
        self.frames = 0

    def present(self, snapshot: MatchSnapshot) -> None:
        self.last_snapshot = snapshot
        self.frames += 1


class StarfieldEnv(gym.Env):
    """Starfield Battle as a Gymnasium environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        dt: float = 1 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 5,
        game_config: Optional[Dict[str, Any]] = None,
        r_kill: float = 1.0,
        r_life: float = 1.0,
        r_shot: float = 0.01,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.config = GameConfig.from_dict(game_config or {})

        # Reward weights
        self.r_kill = r_kill
        self.r_life = r_life
        self.r_shot = r_shot

        # move: 0 stay, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Player: x(1) lives(1) fire-ready(1)
        # Each enemy: rel pos(2) speed(1)
        obs_dim = 3 + self.k_enemies * 3
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.match: Match = None  # type: ignore
        self.surface = HeadlessSurface(width, height)
        self.scheduler: FrameScheduler = None  # type: ignore
        self._step_count = 0
        self._last_fire_step: Optional[int] = None

        self._window = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        self._step_count = 0
        self._last_fire_step = None
        self.scheduler = FrameScheduler()
        self.surface = HeadlessSurface(self.width, self.height)
        self.match = Match(
            config=self.config,
            scheduler=self.scheduler,
            clock=self._clock,
            rng=random.Random(seed),
        )
        self.match.attach(self.surface)
        self.match.start()

        if self._window is not None:
            self._window.match = self.match

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire = int(action[0]), int(action[1])

        self._apply_move(move)
        if fire:
            self._apply_fire()

        self._step_count += 1
        ran = self.scheduler.run_pending()
        # past game over no tick runs, so there is nothing new to reward
        events = self.match.last_events if ran else {}

        reward = self._compute_reward(events)
        terminated = self.match.state is MatchState.GAME_OVER
        truncated = not terminated and self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()
        info["events"] = dict(events)

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def _clock(self) -> float:
        return self._step_count * self.dt

    def _apply_move(self, move: int):
        keys = {1: KEY_LEFT, 2: KEY_RIGHT}
        for m, key in keys.items():
            if m == move:
                self.match.key_down(key)
            else:
                self.match.key_up(key)

    def _apply_fire(self):
        # Space press + release: an edge, like a key tap
        if self.match.key_down(KEY_FIRE) is not None:
            self._last_fire_step = self._step_count
        self.match.key_up(KEY_FIRE)

    def _fire_ready(self) -> bool:
        if self._last_fire_step is None:
            return True
        return (self._step_count - self._last_fire_step) * self.dt >= self.config.fire_cooldown

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        sim = self.match.simulation
        p = sim.player

        span = max(1e-6, self.width - p.width)
        obs_parts = [
            clamp(p.x / span, 0.0, 1.0) * 2 - 1,
            clamp(sim.lives / self.config.starting_lives, 0.0, 1.0) * 2 - 1,
            1.0 if self._fire_ready() else -1.0,
        ]

        px, py = p.center_x, p.y
        enemies_sorted = sorted(
            sim.enemies,
            key=lambda e: (e.center_x - px) ** 2 + (e.y - py) ** 2,
        )
        max_speed = max(1e-6, self.config.enemy_speed_range[1])
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.center_x - px) / self.width, -1, 1),
                    clamp((e.y - py) / self.height, -1, 1),
                    clamp(e.speed / max_speed, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, events: Dict[str, float]) -> float:
        reward = 0.0
        reward += self.r_kill * events.get("kill", 0.0)
        reward -= self.r_life * events.get("lives_lost", 0.0)
        reward -= self.r_shot * events.get("shot", 0.0)
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        sim = self.match.simulation
        return {
            "score": sim.score,
            "lives": sim.lives,
            "state": self.match.state.value,
            "num_enemies": len(sim.enemies),
            "num_bullets": len(sim.bullets),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import StarfieldWindow

            self._window = StarfieldWindow(
                self.match, self.width, self.height,
                title="StarfieldEnv - Arcade",
                interactive=False,
                visible=self.render_mode == "human",
            )

        window = self._window
        window.present(self.surface.last_snapshot or self.match.snapshot())
        window.switch_to()
        window.dispatch_events()
        window.on_draw()

        if self.render_mode == "human":
            window.flip()
            return None
        return self._render_rgb_array()

    def _render_rgb_array(self) -> np.ndarray:
        import arcade

        image = arcade.get_image(0, 0, self.width, self.height)
        return np.asarray(image.convert("RGB"), dtype=np.uint8)

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: int = 42):
    """Run a random episode for testing"""
    env = StarfieldEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f}, score: {info['score']}, "
          f"steps: {info['step']}")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
