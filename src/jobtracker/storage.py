"""Key-value persistence for the tracked entries."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

from .entries import EntryList

logger = logging.getLogger(__name__)

STORAGE_KEY = "job-tracker-data"


class StorageError(RuntimeError):
    """Raised when the backing store cannot be written."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStore:
    """Dictionary-backed store, mainly for tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class JsonFileStore:
    """Persist string slots to a JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, RecursionError, ValueError) as exc:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: expected a JSON object", self.path)
            return {}
        return {key: value for key, value in data.items() if isinstance(value, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        payload = self._read()
        payload[key] = value
        try:
            self.path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not write {self.path}: {exc}") from exc


class EntryStorage:
    """Mirror an ``EntryList`` into a single slot of a key-value store."""

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> EntryList:
        raw = self.store.get(self.key)
        if raw is None or not raw.strip():
            return EntryList()
        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise ValueError(f"expected a list, got {type(payload).__name__}")
            entries = EntryList.from_snapshot(payload)
        except (KeyError, RecursionError, TypeError, ValueError) as exc:
            logger.warning("Discarding stored entries under %r: %s", self.key, exc)
            return EntryList()
        logger.debug("Loaded %d entries from %r", len(entries), self.key)
        return entries

    def save(self, entries: EntryList) -> None:
        self.store.set(self.key, json.dumps(entries.to_snapshot()))
        logger.debug("Saved %d entries to %r", len(entries), self.key)
