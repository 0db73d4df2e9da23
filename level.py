"""Game state and level building."""

from dataclasses import dataclass, field
import logging
import random
from typing import Optional

import config
from enemy import Enemy, spawn_enemy
from layout import DistanceConstraint, PlacementPolicy, random_position
from player import Player
from utils import Rect, Vec2


LOG = logging.getLogger(__name__)


@dataclass
class GameState:
    """Main game state."""
    time: float = 0.0
    level: int = 1
    is_game_over: bool = False
    is_cleared: bool = False
    player: Player = field(default_factory=Player)
    enemies: list[Enemy] = field(default_factory=list)
    goal_pos: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))

    @property
    def goal_rect(self) -> Rect:
        return Rect.from_pos(self.goal_pos.x, self.goal_pos.y, config.GOAL_SIZE)

    @property
    def playing(self) -> bool:
        return not self.is_game_over and not self.is_cleared


@dataclass
class LevelLayout:
    """Freshly generated positions for one level."""
    player_pos: Vec2
    enemies: list[Enemy]
    goal_pos: Vec2


def build_level(
    level: int,
    policy: Optional[PlacementPolicy] = None,
    rng: Optional[random.Random] = None,
) -> LevelLayout:
    """Generate the player start, `level` enemies and the goal.

    Enemies are placed one at a time and each one joins the exclusion list
    before the next is drawn, so every pair keeps the placement gap. The goal
    comes last and must also be far enough from the player's start.
    """
    if level < 1:
        raise ValueError(f"level must be >= 1, got {level}")
    rng = rng or random

    player_pos = Vec2(float(config.PLAYER_START_X), float(config.PLAYER_START_Y))
    player_rect = Rect.from_pos(player_pos.x, player_pos.y, config.PLAYER_SIZE)
    exclude = [player_rect]

    enemies: list[Enemy] = []
    for _ in range(level):
        e = spawn_enemy(exclude, policy=policy, rng=rng)
        enemies.append(e)
        exclude.append(e.rect)

    goal_pos = random_position(
        config.GOAL_SIZE,
        exclude,
        min_distance_from=DistanceConstraint(player_rect.center, config.MIN_START_GOAL_DISTANCE),
        policy=policy,
        rng=rng,
    )

    LOG.debug(
        "Built level %d: %d enemies (%d moving), goal at (%.1f, %.1f)",
        level,
        len(enemies),
        sum(1 for e in enemies if e.moving),
        goal_pos.x,
        goal_pos.y,
    )
    return LevelLayout(player_pos=player_pos, enemies=enemies, goal_pos=goal_pos)
