"""
Run configuration for Starfield Battle
Gameplay tuning, window settings and headless evaluation settings
"""

# Gameplay parameters (fed to GameConfig.from_dict)
GAME_CONFIG = {
    "player_width": 50.0,
    "player_height": 50.0,
    "player_speed": 5.0,
    "player_bottom_offset": 100.0,
    "bullet_width": 4.0,
    "bullet_height": 15.0,
    "bullet_speed": 8.0,
    "fire_cooldown": 0.2,        # seconds
    "enemy_width": 45.0,
    "enemy_height": 45.0,
    "enemy_speed_range": (2.0, 4.0),
    "enemy_health": 1,
    "spawn_probability": 0.02,   # per tick, ~1.2 enemies/s at 60 FPS
    "star_count": 100,
    "star_max_size": 2.0,
    "star_speed_range": (1.0, 3.0),
    "starting_lives": 3,
    "kill_score": 100,
}

# Interactive window
WINDOW_CONFIG = {
    "width": 1024,
    "height": 768,
    "title": "Starfield Battle",
    "fullscreen": False,
    "update_rate": 1 / 60,
}

# Headless environment parameters
ENV_CONFIG = {
    "width": 800,
    "height": 600,
    "dt": 1 / 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
    "r_kill": 1.0,
    "r_life": 1.0,
    "r_shot": 0.01,
}

# Policy evaluation
EVAL_CONFIG = {
    "n_episodes": 10,
    "seed": 42,
    "policies": ["random", "tracker"],
}
