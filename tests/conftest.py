"""Shared fixtures for the headless game tests."""

import random

import pytest

from logic import GameSession
from player import DirectionalInput
from score import HighScoreTracker, MemoryStorage


class RecordingDisplay:
    """Display double that remembers the last value of everything it is told."""

    def __init__(self):
        self.positions = {}
        self.enemy_count = 0
        self.status = None
        self.status_kind = None
        self.level = None
        self.high_score = None
        self.statuses = []

    def set_enemies(self, enemies):
        self.enemy_count = len(enemies)
        self.positions = {k: v for k, v in self.positions.items() if not k.startswith("enemy-")}
        for i, e in enumerate(enemies):
            self.positions[f"enemy-{i}"] = (e.pos.x, e.pos.y)

    def set_position(self, entity_id, x, y):
        self.positions[entity_id] = (x, y)

    def set_status(self, text, kind):
        self.status = text
        self.status_kind = kind
        self.statuses.append((text, kind))

    def set_level(self, level):
        self.level = level

    def set_high_score(self, value):
        self.high_score = value


class ScriptedInput:
    """Input source whose held keys are set directly by the test."""

    def __init__(self):
        self.keys = DirectionalInput()

    def hold(self, **keys):
        self.keys = DirectionalInput(**keys)

    def poll_directional_input(self):
        return self.keys


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def keys():
    return ScriptedInput()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def session(display, keys, storage, rng):
    s = GameSession(
        display=display,
        input_source=keys,
        tracker=HighScoreTracker(storage),
        rng=rng,
    )
    s.reset()
    return s
