"""Utility functions and geometry helpers."""

import math
from dataclasses import dataclass

from config import (
    ARENA_H,
    ARENA_W,
    SAFE_ZONE_H,
    SAFE_ZONE_W,
    SAFE_ZONE_X,
    SAFE_ZONE_Y,
)


@dataclass
class Vec2:
    """2D Vector class."""
    x: float
    y: float

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self):
        l = self.length()
        if l <= 1e-9:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / l, self.y / l)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in arena coordinates (y grows downward)."""
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_pos(cls, x: float, y: float, size: float) -> "Rect":
        return cls(x, y, x + size, y + size)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Vec2:
        return Vec2((self.left + self.right) * 0.5, (self.top + self.bottom) * 0.5)

    def expanded(self, margin: float) -> "Rect":
        return Rect(self.left - margin, self.top - margin, self.right + margin, self.bottom + margin)


SAFE_ZONE = Rect(SAFE_ZONE_X, SAFE_ZONE_Y, SAFE_ZONE_X + SAFE_ZONE_W, SAFE_ZONE_Y + SAFE_ZONE_H)
ARENA = Rect(0.0, 0.0, float(ARENA_W), float(ARENA_H))


def overlaps(a: Rect, b: Rect) -> bool:
    """Check if two rectangles intersect with positive area.

    Touching edges do not count.
    """
    return a.left < b.right and a.right > b.left and a.top < b.bottom and a.bottom > b.top


def distance(a: Vec2, b: Vec2) -> float:
    """Calculate distance between two points."""
    return (a - b).length()


def in_safe_zone(x: float, y: float, size: float) -> bool:
    """Check whether a square at (x, y) overlaps the safe zone."""
    return overlaps(Rect.from_pos(x, y, size), SAFE_ZONE)


def clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v
