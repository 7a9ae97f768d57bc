"""
Entities
========

Axis-aligned rectangles and the falling squares that the player dodges.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """
    Immutable axis-aligned rectangle in world units.

    Y grows downward, so ``top`` is the smaller Y coordinate.
    """
    left: float
    top: float
    width: float
    height: float

    @staticmethod
    def from_center(cx: float, cy: float, width: float, height: float) -> "Rect":
        return Rect(cx - width / 2.0, cy - height / 2.0, width, height)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.left + self.width / 2.0, self.top + self.height / 2.0)

    def overlaps(self, other: "Rect") -> bool:
        """True if the interiors intersect. Shared edges do not count."""
        return (
            self.left < other.right and other.left < self.right
            and self.top < other.bottom and other.top < self.bottom
        )

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.left, self.top, self.width, self.height)


@dataclass
class Obstacle:
    """
    A falling square.

    ``x`` is fixed once spawned; ``y`` is the center and grows every tick.
    """
    uid: int
    x: float
    y: float
    size: float

    @property
    def rect(self) -> Rect:
        return Rect.from_center(self.x, self.y, self.size, self.size)

    def is_past(self, world_height: float, margin: float) -> bool:
        """True once the square has fallen far enough below the world to drop."""
        return self.y - self.size > world_height + margin
