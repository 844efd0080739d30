"""
Game session: owns the entities, runs the simulation step and
tracks the Running/GameOver life-cycle.
"""

from __future__ import annotations

import copy
import enum
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .entities import Bullet, Enemy, Player
from .errors import InvalidConfiguration
from .geometry import Vector2
from .spawner import Spawner

logger = logging.getLogger(__name__)

PLAYER_BOTTOM_MARGIN = 100.0


class Lifecycle(enum.Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of the session state for drawing"""
    player: Player
    enemies: Tuple[Enemy, ...]
    bullets: Tuple[Bullet, ...]
    score: int
    lifecycle: Lifecycle
    width: float
    height: float

    @property
    def is_game_over(self) -> bool:
        return self.lifecycle is Lifecycle.GAME_OVER


def _validate_arena(width: float, height: float):
    if width <= 0 or height <= 0:
        raise InvalidConfiguration(
            f"Arena dimensions must be positive, got {width}x{height}"
        )


class Session:
    """A single game of air combat.

    The session is mutated only through its public operations:
    ``apply_input``, ``spawn_enemy``, ``spawn_bullet``, ``step`` and
    ``reset``. Once the player is hit the session is in GameOver and
    every operation except ``reset`` leaves it unchanged.
    """

    def __init__(self, width: float, height: float, rng: Optional[random.Random] = None):
        _validate_arena(width, height)
        self.spawner = Spawner(rng)

        self.width = float(width)
        self.height = float(height)
        self._init_state()

    def _init_state(self):
        player = Player(position=Vector2())
        player.position = Vector2(
            (self.width - player.size.width) / 2.0,
            self.height - PLAYER_BOTTOM_MARGIN,
        )
        self.player: Player = player
        self.enemies: List[Enemy] = []
        self.bullets: List[Bullet] = []
        self.score = 0
        self.lifecycle = Lifecycle.RUNNING

    @property
    def is_game_over(self) -> bool:
        return self.lifecycle is Lifecycle.GAME_OVER

    # ----------------------------
    # Life-cycle
    # ----------------------------

    def reset(self, width: float, height: float):
        """Discard all entities and score and start over in a (possibly resized) arena"""
        _validate_arena(width, height)
        self.width = float(width)
        self.height = float(height)
        self._init_state()
        logger.info("Session reset (arena=%gx%g)", self.width, self.height)

    def _game_over(self):
        if self.is_game_over:
            return
        self.lifecycle = Lifecycle.GAME_OVER
        logger.info("Game over (score=%d)", self.score)

    # ----------------------------
    # Collaborator entry points
    # ----------------------------

    def apply_input(self, delta: Vector2):
        if self.is_game_over:
            return
        self.player.apply_input(delta, self.width)

    def spawn_enemy(self) -> Optional[Enemy]:
        return self.spawner.spawn_enemy(self)

    def spawn_bullet(self) -> Optional[Bullet]:
        return self.spawner.spawn_bullet(self)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            player=copy.deepcopy(self.player),
            enemies=tuple(copy.deepcopy(e) for e in self.enemies),
            bullets=tuple(copy.deepcopy(b) for b in self.bullets),
            score=self.score,
            lifecycle=self.lifecycle,
            width=self.width,
            height=self.height,
        )

    # ----------------------------
    # Simulation step
    # ----------------------------

    def step(self) -> int:
        """Advance the world by one tick.

        Returns the score gained during the tick (one point per overlapping
        bullet/enemy pair).
        """
        if self.is_game_over:
            return 0

        self._update_bullets()
        self._update_enemies()
        kills = self._handle_bullet_hits()
        self._check_player_hit()
        return kills

    def _update_bullets(self):
        # Cull on last tick's position, then move
        self.bullets = [b for b in self.bullets if b.position.y >= 0]
        for b in self.bullets:
            b.advance()

    def _update_enemies(self):
        self.enemies = [e for e in self.enemies if e.position.y <= self.height]
        for e in self.enemies:
            e.advance()

    def _handle_bullet_hits(self) -> int:
        # Mark every overlapping pair first, remove after the full scan
        hit_bullets = set()
        hit_enemies = set()
        hits = 0
        for b in self.bullets:
            b_rect = b.rect()
            for e in self.enemies:
                if b_rect.overlaps(e.rect()):
                    hit_bullets.add(id(b))
                    hit_enemies.add(id(e))
                    hits += 1

        if not hits:
            return 0

        self.bullets = [b for b in self.bullets if id(b) not in hit_bullets]
        self.enemies = [e for e in self.enemies if id(e) not in hit_enemies]

        self.score += hits
        logger.debug(
            "Destroyed %d enemies with %d hits (score=%d)", len(hit_enemies), hits, self.score
        )
        return hits

    def _check_player_hit(self):
        player_rect = self.player.rect()
        for e in self.enemies:
            if e.rect().overlaps(player_rect):
                self._game_over()
                return
