"""Flat string-keyed, string-valued store with JSON helpers.

Everything that persists (entry unlocks, destiny pool, destiny log) goes
through the narrow KeyValueStore capability, so the logic above it runs the
same against the on-disk JsonFileStore and the in-memory MemoryStore.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when a store write cannot be completed."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed store. ``fail_writes`` makes set/remove raise StoreError."""

    def __init__(self, data: dict[str, str] | None = None, fail_writes: bool = False) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.fail_writes = fail_writes

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StoreError(f"write refused for {key!r}")
        self.data[key] = value

    def remove(self, key: str) -> None:
        if self.fail_writes:
            raise StoreError(f"write refused for {key!r}")
        self.data.pop(key, None)


class JsonFileStore:
    """One flat JSON object on disk; every write rewrites the file.

    A missing or unreadable file reads as an empty store.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _load(self) -> dict[str, str]:
        if not self.path.is_file():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("local store %s unreadable, treating as empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("local store %s is not an object, treating as empty", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        try:
            self.path.write_text(json.dumps(data, indent=2))
        except OSError as e:
            raise StoreError(f"Cannot write {self.path}: {e}") from e

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


def read_json(store: KeyValueStore, key: str) -> Any:
    """Decode a JSON value. Returns None if the key is absent or undecodable."""
    raw = store.get(key)
    if not raw:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("stored value for %s is not valid JSON, ignoring", key)
        return None


def write_json(store: KeyValueStore, key: str, value: Any) -> None:
    """Encode and store a JSON value. Propagates StoreError."""
    store.set(key, json.dumps(value))
