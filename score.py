"""High-score tracking and persistence."""

import json
import logging
from typing import Optional, Protocol

import config


LOG = logging.getLogger(__name__)


class Storage(Protocol):
    """String key/value store for persisted values."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process store, used when nothing should touch the disk."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = str(value)


class JsonFileStorage:
    """Store backed by a flat JSON object on disk."""

    def __init__(self, path: str = config.HIGH_SCORE_FILE):
        self.path = path

    def _load(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                return data
        except FileNotFoundError:
            pass
        except (json.JSONDecodeError, OSError) as e:
            LOG.warning("Ignoring unreadable score file %s: %s", self.path, e)
        return {}

    def get_item(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            LOG.warning("Could not write score file %s: %s", self.path, e)


class HighScoreTracker:
    """Deepest level cleared, persisted under a single key."""

    def __init__(self, storage: Optional[Storage] = None, key: str = config.HIGH_SCORE_KEY):
        self.storage = storage if storage is not None else JsonFileStorage()
        self.key = key

    def load(self) -> int:
        """Return the stored high score; missing or malformed values read as 0."""
        raw = self.storage.get_item(self.key)
        if raw is None:
            return 0
        try:
            return max(0, int(str(raw).strip(), 10))
        except ValueError:
            LOG.warning("Malformed high score %r under %s; treating as 0", raw, self.key)
            return 0

    def submit(self, levels_cleared: int) -> bool:
        """Persist `levels_cleared` if it beats the stored value.

        Returns True if a new high score was recorded.
        """
        if levels_cleared > self.load():
            self.storage.set_item(self.key, str(int(levels_cleared)))
            LOG.info("New high score: %d", levels_cleared)
            return True
        return False
