"""
AirCombatEnv - the air combat session as an RL environment
----------------------------------------------------------
- Gymnasium API on top of GameClock/Session
- One env step = one simulation tick; enemies and bullets spawn on
  the game's own timers (1.0 s / 0.3 s at 60 ticks per second)
- Discrete action space: 0 stay, 1 left, 2 right
- Vector observation: player x + top-K nearest enemies + bullet load

Quick test:
    python -m game.air_combat --random
"""

from __future__ import annotations

from typing import Optional, Dict, Any

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .clock import ClockConfig, GameClock
from .errors import PreconditionViolation
from .geometry import Vector2
from .session import Session
from .utils import clamp, make_rng

# Upper bound used to normalise the bullet count in observations
_MAX_BULLETS_ON_SCREEN = 40


class AirCombatEnv(gym.Env):
    """Vertical air combat environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 400,
        height: int = 800,
        tick_rate: float = 60.0,
        max_steps: int = 3600,  # 60s at 60 ticks/s
        k_enemies: int = 5,
        player_speed: float = 6.0,
        enemy_spawn_interval: float = 1.0,  # seconds
        bullet_spawn_interval: float = 0.3,  # seconds
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        self.render_mode = render_mode

        # Arena
        self.width = width
        self.height = height
        self.max_steps = max_steps
        self.dt = 1.0 / tick_rate

        # Observation config
        self.k_enemies = k_enemies

        # Gameplay config
        self.player_speed = player_speed
        self.clock_config = ClockConfig(
            tick_rate=tick_rate,
            enemy_spawn_interval=enemy_spawn_interval,
            bullet_spawn_interval=bullet_spawn_interval,
            max_catchup_ticks=1,
        )
        self.reward_config = {"R_KILL": 1.0, "R_TIME": 0.001, "R_DEATH": 5.0}
        if reward_config:
            self.reward_config.update(reward_config)

        # move: 0 stay, 1 left, 2 right
        self.action_space = spaces.Discrete(3)

        # Player: x(1)
        # Each enemy: rel pos(2)
        # Bullet load(1)
        obs_dim = 1 + (self.k_enemies * 2) + 1
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._moves = {0: 0.0, 1: -self.player_speed, 2: self.player_speed}

        # Arcade rendering state
        self._window = None

        self.clock: Optional[GameClock] = None
        self._step_count = 0

    @property
    def session(self) -> Session:
        if self.clock is None or self.clock.session is None:
            raise PreconditionViolation("Environment must be reset before use")
        return self.clock.session

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        # Spawn placement comes from the env's seeded generator
        rng = make_rng(int(self.np_random.integers(0, 2**31 - 1)))
        self.clock = GameClock(self.clock_config, rng=rng)
        self.clock.new_game(self.width, self.height)

        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def step(self, action):
        session = self.session

        self.clock.apply_input(Vector2(self._moves[int(action)], 0.0))
        kills = self.clock.update(self.dt)

        terminated = session.is_game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        reward = self._compute_reward(kills, terminated)
        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        session = self.session
        player = session.player

        span = max(1e-6, self.width - player.size.width)
        px = player.position.x / span
        obs_parts = [clamp(px * 2 - 1, -1, 1)]

        # Enemies: top-K nearest, measured centre to centre
        pcx = player.position.x + player.size.width / 2
        pcy = player.position.y + player.size.height / 2

        def centre_dist(e):
            ex = e.position.x + e.size.width / 2
            ey = e.position.y + e.size.height / 2
            return (ex - pcx) ** 2 + (ey - pcy) ** 2

        enemies_sorted = sorted(session.enemies, key=centre_dist)
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                dx = (e.position.x + e.size.width / 2 - pcx) / self.width
                dy = (e.position.y + e.size.height / 2 - pcy) / self.height
                obs_parts += [clamp(dx, -1, 1), clamp(dy, -1, 1)]
            else:
                obs_parts += [0.0, 0.0]

        load = len(session.bullets) / _MAX_BULLETS_ON_SCREEN
        obs_parts.append(clamp(load * 2 - 1, -1, 1))

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, kills: int, game_over: bool) -> float:
        cfg = self.reward_config
        reward = cfg["R_KILL"] * kills - cfg["R_TIME"]
        if game_over:
            reward -= cfg["R_DEATH"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        session = self.session
        return {
            "score": session.score,
            "num_enemies": len(session.enemies),
            "num_bullets": len(session.bullets),
            "step": self._step_count,
            "game_over": session.is_game_over,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        """Draw the current state.

        ``human`` draws into an arcade window. ``rgb_array`` returns a blank
        frame of the arena size as a placeholder; pixels are not read back.
        """
        if self.render_mode is None:
            return None

        if self.render_mode == "human":
            if self._window is None:
                from .window import AirCombatWindow

                self._window = AirCombatWindow(self.clock, self.width, self.height, interactive=False)
            self._window.clock = self.clock
            self._window.on_draw()
            return None
        elif self.render_mode == "rgb_array":
            return np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> float:
    """Run a random episode for testing"""
    env = AirCombatEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to exit early.")

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.flip()
            time.sleep(env.dt)

    print(f"Random episode return: {total:.2f} (score {info['score']}, steps {info['step']})")

    env.close()
    return total
