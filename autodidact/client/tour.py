"""Onboarding tour flag and the local key-value store that persists it."""
import asyncio
import json
import logging
from pathlib import Path
from typing import Protocol

from autodidact.core.config import get_settings

logger = logging.getLogger(__name__)

TOUR_STORAGE_KEY = "autodidact-tour-completed"
TOUR_AUTOSTART_DELAY = 1.5  # seconds, lets the page settle first


class LocalStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """String key-value pairs in one JSON file. A missing or corrupt file reads as empty."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable store %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)


def default_store() -> JsonFileStore:
    return JsonFileStore(get_settings().tour_store_path)


class TourState:
    def __init__(self, store: LocalStore | None = None):
        if store is None:
            store = default_store()
        self._store = store
        self.is_open = False
        self.completed = store.get(TOUR_STORAGE_KEY) == "true"

    def start(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def complete(self) -> None:
        self.completed = True
        self._store.set(TOUR_STORAGE_KEY, "true")
        self.is_open = False

    def reset(self) -> None:
        self.completed = False
        self._store.remove(TOUR_STORAGE_KEY)

    async def auto_start(self, delay: float = TOUR_AUTOSTART_DELAY) -> bool:
        """Open the tour for first-time visitors after ``delay``. Returns whether it opened."""
        if self.completed:
            return False
        await asyncio.sleep(delay)
        if self.completed:
            return False
        self.start()
        return True
