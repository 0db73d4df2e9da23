"""Visual rendering system."""

from __future__ import annotations

import pyglet
from pyglet import shapes
from pyglet.graphics import Group

from config import (
    ARENA_H,
    ARENA_W,
    GOAL_SIZE,
    PALETTE,
    PLAYER_SIZE,
    SCREEN_H,
    HUD_H,
    WINDOW_PAD,
)
from hud import HUD
from utils import SAFE_ZONE


# Screen-space origin of the arena's bottom-left corner.
ARENA_X = WINDOW_PAD
ARENA_Y = SCREEN_H - HUD_H - WINDOW_PAD - ARENA_H


def to_screen(x: float, y: float, size: float) -> tuple[float, float]:
    """Convert a top-left arena position to pyglet's bottom-left origin."""
    return ARENA_X + x, ARENA_Y + (ARENA_H - y - size)


class Visuals:
    """Draws the arena and its squares; implements the session's Display."""

    def __init__(self, batch: pyglet.graphics.Batch, hud: HUD):
        self.batch = batch
        self.hud = hud
        self._bg_group = Group(order=0)
        self._zone_group = Group(order=1)
        self._entity_group = Group(order=2)

        self._arena_edge = shapes.Rectangle(
            ARENA_X - 2, ARENA_Y - 2, ARENA_W + 4, ARENA_H + 4,
            color=PALETTE["arena_edge"], batch=batch, group=self._bg_group,
        )
        self._arena = shapes.Rectangle(
            ARENA_X, ARENA_Y, ARENA_W, ARENA_H,
            color=PALETTE["arena"], batch=batch, group=self._bg_group,
        )
        zx, zy = to_screen(SAFE_ZONE.left, SAFE_ZONE.top, SAFE_ZONE.height)
        self._safe_zone = shapes.Rectangle(
            zx, zy, SAFE_ZONE.width, SAFE_ZONE.height,
            color=PALETTE["safe_zone"], batch=batch, group=self._zone_group,
        )

        self._goal = shapes.Rectangle(
            0, 0, GOAL_SIZE, GOAL_SIZE, color=PALETTE["goal"], batch=batch, group=self._entity_group,
        )
        self._player = shapes.Rectangle(
            0, 0, PLAYER_SIZE, PLAYER_SIZE, color=PALETTE["player"], batch=batch, group=self._entity_group,
        )
        self._sprites: dict[str, tuple[shapes.Rectangle, float]] = {
            "player": (self._player, PLAYER_SIZE),
            "goal": (self._goal, GOAL_SIZE),
        }
        self._enemy_ids: list[str] = []

    def set_enemies(self, enemies) -> None:
        for eid in self._enemy_ids:
            sprite, _ = self._sprites.pop(eid)
            sprite.delete()
        self._enemy_ids = []
        for i, e in enumerate(enemies):
            eid = f"enemy-{i}"
            color = PALETTE["enemy_moving"] if e.moving else PALETTE["enemy"]
            sprite = shapes.Rectangle(
                0, 0, e.size, e.size, color=color, batch=self.batch, group=self._entity_group,
            )
            self._sprites[eid] = (sprite, e.size)
            self._enemy_ids.append(eid)
            self.set_position(eid, e.pos.x, e.pos.y)

    def set_position(self, entity_id: str, x: float, y: float) -> None:
        entry = self._sprites.get(entity_id)
        if entry is None:
            return
        sprite, size = entry
        sprite.x, sprite.y = to_screen(x, y, size)

    def set_status(self, text: str, kind: str) -> None:
        self.hud.set_status(text, kind)

    def set_level(self, level: int) -> None:
        self.hud.set_level(level)

    def set_high_score(self, value: int) -> None:
        self.hud.set_high_score(value)
