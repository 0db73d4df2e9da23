"""Player entity and related functionality."""

from dataclasses import dataclass, field

from config import ARENA_H, ARENA_W, PLAYER_SIZE, PLAYER_SPEED, PLAYER_START_X, PLAYER_START_Y
from utils import Rect, Vec2, clamp


@dataclass(frozen=True)
class DirectionalInput:
    """Held state of the four direction keys for one tick."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def direction(self) -> Vec2:
        d = Vec2(0.0, 0.0)
        if self.up:
            d.y -= 1
        if self.down:
            d.y += 1
        if self.left:
            d.x -= 1
        if self.right:
            d.x += 1
        return d


@dataclass
class Player:
    """Player entity."""
    pos: Vec2 = field(default_factory=lambda: Vec2(float(PLAYER_START_X), float(PLAYER_START_Y)))
    speed: float = PLAYER_SPEED
    size: float = PLAYER_SIZE

    @property
    def rect(self) -> Rect:
        return Rect.from_pos(self.pos.x, self.pos.y, self.size)


def clamp_to_arena(player: Player) -> None:
    """Keep the player fully inside the arena."""
    player.pos.x = clamp(player.pos.x, 0.0, ARENA_W - player.size)
    player.pos.y = clamp(player.pos.y, 0.0, ARENA_H - player.size)


def move_player(player: Player, keys: DirectionalInput) -> None:
    """Apply one tick of held-key movement. Diagonals are not normalized."""
    d = keys.direction()
    player.pos.x += d.x * player.speed
    player.pos.y += d.y * player.speed
    clamp_to_arena(player)
