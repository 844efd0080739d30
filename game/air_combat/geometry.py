"""
Geometry primitives: vectors, sizes and axis-aligned rectangles

Arena coordinates follow screen convention: x grows to the right,
y grows downward (the top edge of the arena is y = 0).
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidConfiguration


@dataclass
class Vector2:
    """2D position or displacement"""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)


@dataclass
class Size:
    """Width/height pair"""
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise InvalidConfiguration(
                f"Size must be non-negative, got {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class Rect:
    """Axis-aligned bounding box"""
    left: float
    top: float
    width: float
    height: float

    @classmethod
    def from_position_size(cls, position: Vector2, size: Size) -> "Rect":
        return cls(position.x, position.y, size.width, size.height)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def overlaps(self, other: "Rect") -> bool:
        return overlaps(self, other)


def overlaps(a: Rect, b: Rect) -> bool:
    """Check if two boxes intersect with positive area (touching edges do not count)"""
    return (
        a.left < b.right
        and b.left < a.right
        and a.top < b.bottom
        and b.top < a.bottom
    )
