"""
Game entity dataclasses
"""

from dataclasses import dataclass, field

from .geometry import Rect, Size, Vector2
from .utils import clamp


@dataclass
class Player:
    """Player ship, moved only by input"""
    position: Vector2
    size: Size = field(default_factory=lambda: Size(50.0, 50.0))

    def apply_input(self, delta: Vector2, arena_width: float):
        """Shift horizontally by delta.x, keeping the ship inside the arena"""
        hi = max(0.0, arena_width - self.size.width)
        new_x = clamp(self.position.x + delta.x, 0.0, hi)
        self.position = Vector2(new_x, self.position.y)

    def rect(self) -> Rect:
        return Rect.from_position_size(self.position, self.size)


@dataclass
class Enemy:
    """Enemy ship that descends toward the bottom of the arena"""
    position: Vector2
    size: Size = field(default_factory=lambda: Size(50.0, 50.0))
    speed: float = 3.0  # units/tick, downward

    def advance(self, ticks: int = 1):
        self.position = Vector2(self.position.x, self.position.y + self.speed * ticks)

    def rect(self) -> Rect:
        return Rect.from_position_size(self.position, self.size)


@dataclass
class Bullet:
    """Bullet projectile fired upward from the player"""
    position: Vector2
    size: Size = field(default_factory=lambda: Size(5.0, 20.0))
    speed: float = 8.0  # units/tick, upward

    def advance(self, ticks: int = 1):
        self.position = Vector2(self.position.x, self.position.y - self.speed * ticks)

    def rect(self) -> Rect:
        return Rect.from_position_size(self.position, self.size)
