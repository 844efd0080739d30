"""
Fixed-cadence driver for a game session.

One simulation tick runs every ``1 / tick_rate`` seconds and two spawn
timers fire on their own intervals. Everything runs on the caller's
thread: ``update(dt)`` is the only place time moves forward, so input
applied between updates always lands between two whole ticks.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidConfiguration, PreconditionViolation
from .geometry import Vector2
from .session import Session, SessionSnapshot

logger = logging.getLogger(__name__)

_EPS = 1e-9


@dataclass
class ClockConfig:
    """Timer cadence.

    Attributes:
        tick_rate: Simulation ticks per second.
        enemy_spawn_interval: Seconds between enemy spawns.
        bullet_spawn_interval: Seconds between bullet spawns.
        max_catchup_ticks: Upper bound on ticks run by a single update, so a
            long stall does not fast-forward the game.
    """

    tick_rate: float = 60.0
    enemy_spawn_interval: float = 1.0
    bullet_spawn_interval: float = 0.3
    max_catchup_ticks: int = 5

    def __post_init__(self):
        if self.tick_rate <= 0:
            raise InvalidConfiguration(f"tick_rate must be positive, got {self.tick_rate}")
        if self.enemy_spawn_interval <= 0 or self.bullet_spawn_interval <= 0:
            raise InvalidConfiguration(
                "spawn intervals must be positive, got "
                f"enemy={self.enemy_spawn_interval} bullet={self.bullet_spawn_interval}"
            )
        if self.max_catchup_ticks < 1:
            raise InvalidConfiguration(
                f"max_catchup_ticks must be at least 1, got {self.max_catchup_ticks}"
            )

    @property
    def tick_interval(self) -> float:
        return 1.0 / self.tick_rate


class GameClock:
    """Drives simulation ticks and spawn timers against one session"""

    def __init__(self, config: Optional[ClockConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or ClockConfig()
        self.rng = rng
        self.session: Optional[Session] = None
        self._running = False
        self._tick_acc = 0.0
        self._enemy_acc = 0.0
        self._bullet_acc = 0.0
        self._ticks = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def ticks(self) -> int:
        return self._ticks

    def _require_session(self) -> Session:
        if self.session is None:
            raise PreconditionViolation("No game session; call new_game() first")
        return self.session

    def _start_timers(self):
        self._tick_acc = 0.0
        self._enemy_acc = 0.0
        self._bullet_acc = 0.0
        self._ticks = 0
        self._running = True

    def _stop_timers(self):
        if not self._running:
            return
        self._running = False
        logger.info("Clock stopped at tick=%d", self._ticks)

    def new_game(self, width: float, height: float) -> Session:
        self.session = Session(width, height, rng=self.rng)
        self._start_timers()
        logger.info(
            "New game (arena=%gx%g, tick_rate=%s)", width, height, self.config.tick_rate
        )
        return self.session

    def reset(self, width: float, height: float) -> Session:
        """Restart the game, creating the session if there is none yet"""
        if self.session is None:
            return self.new_game(width, height)
        self.session.reset(width, height)
        self._start_timers()
        return self.session

    def apply_input(self, delta: Vector2):
        self._require_session().apply_input(delta)

    def snapshot(self) -> SessionSnapshot:
        return self._require_session().snapshot()

    def update(self, dt: float) -> int:
        """Advance time by ``dt`` seconds.

        Runs the due ticks, then the due enemy spawns, then the due bullet
        spawns. Returns the score gained.
        """
        session = self._require_session()
        if not self._running:
            return 0

        cfg = self.config
        self._tick_acc += dt
        self._enemy_acc += dt
        self._bullet_acc += dt

        due = int((self._tick_acc + _EPS) // cfg.tick_interval)
        self._tick_acc = max(0.0, self._tick_acc - due * cfg.tick_interval)

        kills = 0
        for _ in range(min(due, cfg.max_catchup_ticks)):
            kills += session.step()
            self._ticks += 1
            if session.is_game_over:
                self._stop_timers()
                return kills

        while self._enemy_acc + _EPS >= cfg.enemy_spawn_interval:
            self._enemy_acc -= cfg.enemy_spawn_interval
            session.spawn_enemy()

        while self._bullet_acc + _EPS >= cfg.bullet_spawn_interval:
            self._bullet_acc -= cfg.bullet_spawn_interval
            session.spawn_bullet()

        return kills
