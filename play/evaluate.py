"""
Headless evaluation of scripted policies on StarfieldEnv
"""

import argparse
from typing import Callable, Dict, Optional

import numpy as np

from game.starfield import StarfieldEnv
from game.starfield.utils import setup_logging
from play.configs.starfield_config import ENV_CONFIG, EVAL_CONFIG, GAME_CONFIG


def random_policy(env: StarfieldEnv) -> np.ndarray:
    return env.action_space.sample()


def tracker_policy(env: StarfieldEnv) -> np.ndarray:
    """Steer under the lowest enemy and fire when lined up"""
    sim = env.match.simulation
    player = sim.player
    if not sim.enemies:
        return np.array([0, 0], dtype=np.int64)

    target = max(sim.enemies, key=lambda e: e.y)
    dx = target.center_x - player.center_x
    if abs(dx) <= player.speed:
        move = 0
    elif dx < 0:
        move = 1
    else:
        move = 2
    fire = 1 if abs(dx) < target.width / 2 else 0
    return np.array([move, fire], dtype=np.int64)


POLICIES: Dict[str, Callable[[StarfieldEnv], np.ndarray]] = {
    "random": random_policy,
    "tracker": tracker_policy,
}


def evaluate_policy(
    policy: str = "tracker",
    n_episodes: int = EVAL_CONFIG["n_episodes"],
    render: bool = False,
    seed: Optional[int] = EVAL_CONFIG["seed"],
):
    """
    Run a scripted policy for a number of episodes

    Args:
        policy: Policy name ('random' or 'tracker')
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Base random seed; episode i uses seed + i
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    act = POLICIES[policy]

    env = StarfieldEnv(
        render_mode="human" if render else None,
        game_config=GAME_CONFIG,
        **ENV_CONFIG,
    )

    episode_rewards = []
    episode_lengths = []
    episode_scores = []

    for episode in range(n_episodes):
        ep_seed = seed + episode if seed is not None else None
        obs, info = env.reset(seed=ep_seed)
        env.action_space.seed(ep_seed)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = act(env)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info["score"])

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Score = {info['score']}, Reward = {total_reward:.2f}, Length = {steps}")

    env.close()

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)
    mean_score = np.mean(episode_scores)
    std_score = np.std(episode_scores)
    mean_length = np.mean(episode_lengths)

    print("\n" + "="*50)
    print(f"{policy} policy ({n_episodes} episodes):")
    print(f"Mean Score: {mean_score:.1f} ± {std_score:.1f}")
    print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
    print(f"Mean Episode Length: {mean_length:.1f}")
    print("="*50)

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_score": mean_score,
        "std_score": std_score,
        "mean_length": mean_length,
        "episode_rewards": episode_rewards,
        "episode_scores": episode_scores,
        "episode_lengths": episode_lengths,
    }


def main():
    parser = argparse.ArgumentParser(description="Evaluate scripted policies")
    parser.add_argument(
        "--policy",
        type=str,
        default="tracker",
        choices=list(POLICIES),
        help="Policy to evaluate (default: tracker)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help=f"Number of evaluation episodes (default: {EVAL_CONFIG['n_episodes']})",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Show the episodes in a window",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help=f"Random seed (default: {EVAL_CONFIG['seed']})",
    )
    parser.add_argument(
        "--compare-random",
        action="store_true",
        help="Also evaluate the random policy for comparison",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()
    setup_logging(args.log_level)

    results = evaluate_policy(
        policy=args.policy,
        n_episodes=args.n_episodes,
        render=args.render,
        seed=args.seed,
    )

    if args.compare_random and args.policy != "random":
        print("\n")
        random_results = evaluate_policy(
            policy="random",
            n_episodes=args.n_episodes,
            seed=args.seed,
        )
        improvement = results["mean_score"] - random_results["mean_score"]
        print(f"\nScore improvement over random: {improvement:.1f}")


if __name__ == "__main__":
    main()
