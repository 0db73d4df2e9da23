"""Session driver: collisions, level transitions and high-score updates."""

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol, Sequence

import config
from enemy import Enemy
from fsm import StateMachine
from layout import PlacementPolicy
from level import GameState, build_level
from physics import update_moving_enemies
from player import DirectionalInput, Player, move_player
from score import HighScoreTracker
from states import AdvancingState, ClearedState, GameOverState, PlayingState
from utils import overlaps


LOG = logging.getLogger(__name__)

PLAYER_ID = "player"
GOAL_ID = "goal"


def enemy_id(index: int) -> str:
    return f"enemy-{index}"


class Display(Protocol):
    """What the session needs from a renderer. It never reads anything back."""

    def set_enemies(self, enemies: Sequence[Enemy]) -> None: ...

    def set_position(self, entity_id: str, x: float, y: float) -> None: ...

    def set_status(self, text: str, kind: str) -> None: ...

    def set_level(self, level: int) -> None: ...

    def set_high_score(self, value: int) -> None: ...


class InputSource(Protocol):
    def poll_directional_input(self) -> DirectionalInput: ...


class NullDisplay:
    """Display that drops everything (headless runs)."""

    def set_enemies(self, enemies):
        pass

    def set_position(self, entity_id, x, y):
        pass

    def set_status(self, text, kind):
        pass

    def set_level(self, level):
        pass

    def set_high_score(self, value):
        pass


class NullInput:
    def poll_directional_input(self) -> DirectionalInput:
        return DirectionalInput()


class GameSession:
    """Owns one player's run: entities, lifecycle phase and high score.

    The window (or a test) calls `tick()` once per frame and `reset()` on
    the reset control. Rendering and input go through the injected
    `Display` and `InputSource`.
    """

    def __init__(
        self,
        display: Optional[Display] = None,
        input_source: Optional[InputSource] = None,
        tracker: Optional[HighScoreTracker] = None,
        policy: Optional[PlacementPolicy] = None,
        rng: Optional[random.Random] = None,
    ):
        self.display = display if display is not None else NullDisplay()
        self.input = input_source if input_source is not None else NullInput()
        self.tracker = tracker if tracker is not None else HighScoreTracker()
        self.policy = policy
        self.rng = rng
        self.state = GameState()
        self.last_clear_was_record = False

        self.high_score = self.tracker.load()
        self.display.set_high_score(self.high_score)

        self.fsm = StateMachine()
        for phase in (PlayingState, ClearedState, AdvancingState, GameOverState):
            self.fsm.add_state(phase(self))

    @property
    def phase(self) -> Optional[str]:
        return self.fsm.state_name

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Start over from level 1, dropping any pending level transition."""
        LOG.info("Reset from level %d", self.state.level)
        self.state.level = 1
        self.start_level()

    def start_level(self) -> None:
        """Build the current level and resume play."""
        s = self.state
        layout = build_level(s.level, policy=self.policy, rng=self.rng)
        s.player = Player(pos=layout.player_pos)
        s.enemies = layout.enemies
        s.goal_pos = layout.goal_pos
        self.last_clear_was_record = False

        self.display.set_enemies(s.enemies)
        self.display.set_position(PLAYER_ID, s.player.pos.x, s.player.pos.y)
        self.display.set_position(GOAL_ID, s.goal_pos.x, s.goal_pos.y)
        self.display.set_level(s.level)
        self.display.set_status(f"Level {s.level} - use the arrow keys to move", "playing")

        self.fsm.set_state("PlayingState")

    # ------------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------------

    def tick(self, dt: Optional[float] = None) -> None:
        """Advance the session clock and the current phase by one frame."""
        if dt is None:
            dt = 1.0 / float(config.FPS)
        self.state.time += max(0.0, float(dt))
        self.fsm.update(dt)

    def play_tick(self) -> None:
        """Move everything once, then resolve collisions."""
        s = self.state
        move_player(s.player, self.input.poll_directional_input())
        self.display.set_position(PLAYER_ID, s.player.pos.x, s.player.pos.y)

        update_moving_enemies(s.enemies)
        for i, e in enumerate(s.enemies):
            if e.moving:
                self.display.set_position(enemy_id(i), e.pos.x, e.pos.y)

        if self.check_enemy_collision():
            return
        self.check_goal_collision()

    def check_enemy_collision(self) -> bool:
        """End the run if the player touches any enemy."""
        player_rect = self.state.player.rect
        for e in self.state.enemies:
            if overlaps(player_rect, e.rect):
                self.game_over()
                return True
        return False

    def check_goal_collision(self) -> bool:
        if overlaps(self.state.player.rect, self.state.goal_rect):
            self.clear_level()
            return True
        return False

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def game_over(self) -> None:
        s = self.state
        if s.is_cleared or s.is_game_over:
            return
        self.fsm.set_state("GameOverState")

        reached = s.level - 1
        is_new_record = self._submit_high_score(reached)
        msg = "Game over"
        if is_new_record and reached > 0:
            msg += f" - new high score! Level {reached} reached"
        self.display.set_status(msg, "game-over")
        LOG.info("Game over on level %d", s.level)

    def clear_level(self) -> None:
        s = self.state
        if s.is_game_over or s.is_cleared:
            return
        self.last_clear_was_record = self._submit_high_score(s.level)
        self.fsm.set_state("ClearedState")
        LOG.info("Level %d cleared", s.level)

    def _submit_high_score(self, levels_cleared: int) -> bool:
        if not self.tracker.submit(levels_cleared):
            return False
        self.high_score = self.tracker.load()
        self.display.set_high_score(self.high_score)
        return True
