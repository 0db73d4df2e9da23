"""Tests for the finite state machine."""

import pytest

from fsm import State, StateMachine


class Recorder(State):
    def __init__(self, session, log):
        super().__init__(session)
        self.log = log

    def enter(self):
        self.log.append(("enter", self.name))

    def exit(self):
        self.log.append(("exit", self.name))

    def update(self, dt):
        self.log.append(("update", self.name, dt))


class Idle(Recorder):
    pass


class Busy(Recorder):
    pass


def test_initial_state_is_entered():
    log = []
    fsm = StateMachine(Idle(None, log))
    assert fsm.state_name == "Idle"
    assert log == [("enter", "Idle")]


def test_transition_exits_then_enters():
    log = []
    fsm = StateMachine(Idle(None, log))
    fsm.add_state(Busy(None, log))
    fsm.set_state("Busy")
    fsm.update(0.5)
    assert log[1:] == [("exit", "Idle"), ("enter", "Busy"), ("update", "Busy", 0.5)]


def test_unknown_state_keeps_current():
    fsm = StateMachine(Idle(None, []))
    with pytest.raises(ValueError):
        fsm.set_state("Missing")
    assert fsm.state_name == "Idle"


def test_empty_machine_ignores_updates():
    fsm = StateMachine()
    fsm.update(1.0)
    assert fsm.state_name is None
