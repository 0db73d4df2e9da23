"""Enemy motion and reflection against the arena walls and the safe zone."""

from typing import Iterable

from config import ARENA_H, ARENA_W
from enemy import Enemy
from utils import SAFE_ZONE, Rect, Vec2, clamp, in_safe_zone


def reflect_off_zone(old: Vec2, new: Vec2, vel: Vec2, size: float, zone: Rect = SAFE_ZONE) -> None:
    """Bounce a square that is about to enter `zone`.

    `new` and `vel` are updated in place. Each axis is handled by looking at
    which boundary the square crossed between `old` and `new`.
    """
    if new.x + size > zone.left and old.x + size <= zone.left:
        vel.x = -vel.x
        new.x = zone.left - size
    elif new.x < zone.right and old.x >= zone.right:
        vel.x = -vel.x
        new.x = zone.right

    if new.y + size > zone.top and old.y + size <= zone.top:
        vel.y = -vel.y
        new.y = zone.top - size
    elif new.y < zone.bottom and old.y >= zone.bottom:
        vel.y = -vel.y
        new.y = zone.bottom


def push_out_of_zone(new: Vec2, vel: Vec2, size: float, zone: Rect = SAFE_ZONE) -> None:
    """Snap a square that is still inside `zone` to the closest boundary.

    Candidates that would leave the arena are skipped, since the wall clamp
    would put the square straight back into the zone. Ties resolve in
    left, right, top, bottom order.
    """
    candidates = []
    if zone.left - size >= 0:
        candidates.append((abs(new.x - (zone.left - size)), "left"))
    if zone.right + size <= ARENA_W:
        candidates.append((abs(new.x - zone.right), "right"))
    if zone.top - size >= 0:
        candidates.append((abs(new.y - (zone.top - size)), "top"))
    if zone.bottom + size <= ARENA_H:
        candidates.append((abs(new.y - zone.bottom), "bottom"))
    if not candidates:
        return

    side = min(candidates, key=lambda c: c[0])[1]
    if side == "left":
        new.x = zone.left - size
        vel.x = -abs(vel.x)
    elif side == "right":
        new.x = zone.right
        vel.x = abs(vel.x)
    elif side == "top":
        new.y = zone.top - size
        vel.y = -abs(vel.y)
    else:
        new.y = zone.bottom
        vel.y = abs(vel.y)


def reflect_off_walls(new: Vec2, vel: Vec2, size: float) -> None:
    """Bounce off the arena edges and clamp back inside."""
    max_x = ARENA_W - size
    max_y = ARENA_H - size
    if new.x <= 0 or new.x >= max_x:
        vel.x = -vel.x
        new.x = clamp(new.x, 0.0, max_x)
    if new.y <= 0 or new.y >= max_y:
        vel.y = -vel.y
        new.y = clamp(new.y, 0.0, max_y)


def step_enemy(enemy: Enemy) -> None:
    """Advance one moving enemy by one tick."""
    if not enemy.moving:
        return
    size = enemy.size
    old = Vec2(enemy.pos.x, enemy.pos.y)
    new = old + enemy.vel
    vel = Vec2(enemy.vel.x, enemy.vel.y)

    if in_safe_zone(new.x, new.y, size):
        reflect_off_zone(old, new, vel, size)
        if in_safe_zone(new.x, new.y, size):
            push_out_of_zone(new, vel, size)

    reflect_off_walls(new, vel, size)

    enemy.pos = new
    enemy.vel = vel
    enemy.sync_rect()


def update_moving_enemies(enemies: Iterable[Enemy]) -> None:
    """Advance every moving enemy. Static enemies are left untouched."""
    for e in enemies:
        if e.moving:
            step_enemy(e)
