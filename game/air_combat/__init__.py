"""Air combat - vertical arcade shooter core with an RL environment"""

from .geometry import Vector2, Size, Rect, overlaps
from .entities import Player, Enemy, Bullet
from .errors import AirCombatError, InvalidConfiguration, PreconditionViolation
from .spawner import Spawner
from .session import Lifecycle, Session, SessionSnapshot
from .clock import ClockConfig, GameClock
from .air_combat_env import AirCombatEnv, run_random_episode

__all__ = [
    'Vector2', 'Size', 'Rect', 'overlaps',
    'Player', 'Enemy', 'Bullet',
    'AirCombatError', 'InvalidConfiguration', 'PreconditionViolation',
    'Spawner', 'Lifecycle', 'Session', 'SessionSnapshot',
    'ClockConfig', 'GameClock',
    'AirCombatEnv', 'run_random_episode',
]
