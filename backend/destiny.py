"""Destiny pool: light/dark token counters with a capped change log.

State and log live in the local store under two keys and are written as two
independent writes after every successful change. A failed write is logged
and otherwise ignored: the in-memory pool stays authoritative for the rest
of the session.

Guarded operations (remove, flip) refuse to take a counter below zero and
are silent no-ops in that case: no state change, no log line.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import datetime
from typing import Any

from field_codex.models import DestinyPoolState, Side

from .storage.kv import KeyValueStore, StoreError, read_json, write_json

logger = logging.getLogger(__name__)

DESTINY_STATE_KEY = "sw_destiny_pool"
DESTINY_LOG_KEY = "sw_destiny_log"
LOG_LIMIT = 50

SIDES: tuple[Side, ...] = ("light", "dark")
_SIDE_LABELS = {"light": "Light", "dark": "Dark"}


def _check_side(side: str) -> Side:
    if side not in SIDES:
        raise ValueError(f"Unknown destiny side {side!r}")
    return side  # type: ignore[return-value]


def _count(value: Any) -> int:
    """A stored counter, or 0 if it is not a finite non-negative whole number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value) or value < 0 or value != int(value):
        return 0
    return int(value)


def load_state(store: KeyValueStore) -> DestinyPoolState:
    """Read the pool, falling back to 0 per field rather than per object."""
    data = read_json(store, DESTINY_STATE_KEY)
    if not isinstance(data, dict):
        return DestinyPoolState()
    return DestinyPoolState(light=_count(data.get("light")), dark=_count(data.get("dark")))


def load_log(store: KeyValueStore) -> list[str]:
    data = read_json(store, DESTINY_LOG_KEY)
    if not isinstance(data, list):
        return []
    return [line for line in data if isinstance(line, str)][:LOG_LIMIT]


class DestinyPool:
    """Session-scoped destiny pool bound to a key-value store.

    Args:
        store:       Where state and log persist.
        clock:       Returns the current time for log stamps (tests pin it).
        time_format: strftime format for the stamp; hour and minute only.
    """

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], datetime] | None = None,
        time_format: str = "%H:%M",
    ) -> None:
        self._store = store
        self._clock = clock or datetime.now
        self.time_format = time_format
        self._state = load_state(store)
        self._log = load_log(store)

    @property
    def state(self) -> DestinyPoolState:
        return self._state.model_copy()

    @property
    def log(self) -> list[str]:
        return list(self._log)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def add_token(self, side: str) -> bool:
        side = _check_side(side)
        self._set(side, self._get(side) + 1)
        self._commit(f"Added one {_SIDE_LABELS[side]} Side token.")
        return True

    def remove_token(self, side: str) -> bool:
        side = _check_side(side)
        if self._get(side) <= 0:
            return False
        self._set(side, self._get(side) - 1)
        self._commit(f"Removed one {_SIDE_LABELS[side]} Side token.")
        return True

    def flip(self, from_side: str, to_side: str) -> bool:
        from_side = _check_side(from_side)
        to_side = _check_side(to_side)
        if from_side == to_side:
            raise ValueError("Cannot flip a token to the same side")
        if self._get(from_side) <= 0:
            return False
        self._set(from_side, self._get(from_side) - 1)
        self._set(to_side, self._get(to_side) + 1)
        self._commit(
            f"Flipped one {_SIDE_LABELS[from_side]} Side token to {_SIDE_LABELS[to_side]}."
        )
        return True

    def reset(self) -> bool:
        self._state = DestinyPoolState()
        self._commit("Reset Destiny Pool.")
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _get(self, side: Side) -> int:
        return getattr(self._state, side)

    def _set(self, side: Side, value: int) -> None:
        self._state = self._state.model_copy(update={side: value})

    def _commit(self, text: str) -> None:
        self._save(DESTINY_STATE_KEY, self._state.model_dump())
        stamp = self._clock().strftime(self.time_format)
        self._log.insert(0, f"[{stamp}] {text}")
        del self._log[LOG_LIMIT:]
        self._save(DESTINY_LOG_KEY, self._log)

    def _save(self, key: str, value: Any) -> None:
        try:
            write_json(self._store, key, value)
        except (StoreError, OSError) as e:
            logger.warning("could not persist %s: %s", key, e)
