"""Enemy entity and related functionality."""

from dataclasses import dataclass, field
import math
import random
from typing import Iterable, Optional

import config
from layout import PlacementPolicy, random_position
from utils import Rect, Vec2


@dataclass
class Enemy:
    """Enemy entity.

    `moving` is decided at spawn and never changes; static enemies keep a
    zero velocity.
    """
    pos: Vec2
    moving: bool = False
    vel: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    size: float = config.ENEMY_SIZE
    rect: Rect = field(init=False)

    def __post_init__(self):
        self.sync_rect()

    def sync_rect(self) -> None:
        self.rect = Rect.from_pos(self.pos.x, self.pos.y, self.size)


def random_velocity(speed: float, rng=None) -> Vec2:
    """Velocity of magnitude `speed` in a uniformly random direction."""
    rng = rng or random
    ang = rng.random() * math.tau
    return Vec2(math.cos(ang) * speed, math.sin(ang) * speed)


def spawn_enemy(
    exclude_rects: Iterable[Rect],
    policy: Optional[PlacementPolicy] = None,
    rng: Optional[random.Random] = None,
) -> Enemy:
    """Create an enemy at a free position."""
    rng = rng or random
    moving = rng.random() < float(getattr(config, "MOVING_ENEMY_PROBABILITY", 0.3))
    pos = random_position(config.ENEMY_SIZE, exclude_rects, policy=policy, rng=rng)
    vel = Vec2(0.0, 0.0)
    if moving:
        vel = random_velocity(float(getattr(config, "MOVING_ENEMY_SPEED", 2.0)), rng)
    return Enemy(pos=pos, moving=moving, vel=vel)
