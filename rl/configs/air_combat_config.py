"""
Training configuration for the air combat environment
"""

# Environment parameters
ENV_CONFIG = {
    "width": 400,
    "height": 800,
    "tick_rate": 60.0,
    "max_steps": 3600,  # 60 seconds at 60 ticks/s
    "k_enemies": 5,
    "player_speed": 6.0,
    "enemy_spawn_interval": 1.0,
    "bullet_spawn_interval": 0.3,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG = {
    "name": "baseline",
    "description": "Score per kill, small time cost, large death penalty",
    "R_KILL": 1.0,       # Reward per enemy destroyed
    "R_TIME": 0.001,     # Small time penalty
    "R_DEATH": 5.0,      # Penalty when an enemy reaches the player
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

# PPO hyperparameters
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 1024,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}


def make_env_kwargs(reward_config=None):
    """Constructor kwargs for AirCombatEnv (reward keys only, no name/description)"""
    rewards = reward_config or REWARD_CONFIG
    return {
        **ENV_CONFIG,
        "reward_config": {k: v for k, v in rewards.items() if k.startswith("R_")},
    }
