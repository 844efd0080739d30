"""
Enemy and bullet spawning
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Optional

from .entities import Bullet, Enemy
from .geometry import Vector2

if TYPE_CHECKING:
    from .session import Session

logger = logging.getLogger(__name__)

ENEMY_SPAWN_Y = -50.0  # just above the visible top
MUZZLE_OFFSET = Vector2(24.0, 0.0)


class Spawner:
    """Creates enemies and bullets on behalf of a session.

    The random source is injected so that placement is reproducible;
    anything with a ``uniform(a, b)`` method (``random.Random``) works.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def spawn_enemy(self, session: "Session") -> Optional[Enemy]:
        if session.is_game_over:
            return None
        x = self.rng.uniform(0.0, session.width)
        enemy = Enemy(position=Vector2(x, ENEMY_SPAWN_Y))
        session.enemies.append(enemy)
        logger.debug("Spawned enemy at (%.1f, %.1f)", x, ENEMY_SPAWN_Y)
        return enemy

    def spawn_bullet(self, session: "Session") -> Optional[Bullet]:
        if session.is_game_over:
            return None
        bullet = Bullet(position=session.player.position + MUZZLE_OFFSET)
        session.bullets.append(bullet)
        logger.debug("Spawned bullet at (%.1f, %.1f)", bullet.position.x, bullet.position.y)
        return bullet
