"""Session lifecycle phases.

PlayingState -> ClearedState -> AdvancingState -> PlayingState (next level)
PlayingState -> GameOverState (until reset)

Delays are measured against the session clock, so leaving a phase early
(a reset) simply drops whatever was pending.
"""

import logging

import config
from fsm import State


LOG = logging.getLogger(__name__)


class PlayingState(State):
    def enter(self):
        s = self.session.state
        s.is_game_over = False
        s.is_cleared = False

    def update(self, dt: float):
        self.session.play_tick()


class _DelayedState(State):
    """Phase that hands over to the next one after a fixed delay."""

    delay_name = ""
    default_delay = 0.0

    def __init__(self, session):
        super().__init__(session)
        self.pending_at = 0.0

    @property
    def delay(self) -> float:
        return float(getattr(config, self.delay_name, self.default_delay))

    def enter(self):
        self.pending_at = self.session.state.time + self.delay

    def update(self, dt: float):
        if self.session.state.time >= self.pending_at:
            self.on_elapsed()

    def on_elapsed(self):
        raise NotImplementedError


class ClearedState(_DelayedState):
    delay_name = "CLEAR_MESSAGE_DELAY"
    default_delay = 0.5

    def enter(self):
        self.session.state.is_cleared = True
        super().enter()

    def on_elapsed(self):
        self.session.fsm.set_state("AdvancingState")


class AdvancingState(_DelayedState):
    delay_name = "NEXT_LEVEL_DELAY"
    default_delay = 1.5

    def enter(self):
        s = self.session.state
        s.level += 1
        msg = f"Level {s.level - 1} cleared!"
        if self.session.last_clear_was_record:
            msg += " New high score!"
        msg += " Next level..."
        self.session.display.set_status(msg, "clear")
        super().enter()

    def on_elapsed(self):
        LOG.info("Advancing to level %d", self.session.state.level)
        self.session.start_level()


class GameOverState(State):
    def enter(self):
        self.session.state.is_game_over = True
