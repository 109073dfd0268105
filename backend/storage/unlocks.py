"""Per-entry player unlock flags.

An entry is unlocked iff its key holds the literal "true". Locking removes
the key, so a locked entry is indistinguishable from one never unlocked.
"""

from collections.abc import Callable

from .kv import KeyValueStore

UNLOCK_PREFIX = "entry_unlocked__"


def unlock_key(entry_id: str) -> str:
    return f"{UNLOCK_PREFIX}{entry_id}"


def is_unlocked(store: KeyValueStore, entry_id: str) -> bool:
    return store.get(unlock_key(entry_id)) == "true"


def set_unlocked(store: KeyValueStore, entry_id: str, unlocked: bool) -> None:
    """Unlock (write "true") or lock (remove the key). Idempotent."""
    if unlocked:
        store.set(unlock_key(entry_id), "true")
    else:
        store.remove(unlock_key(entry_id))


def unlock_checker(store: KeyValueStore) -> Callable[[str], bool]:
    """Bind a store into the ``id -> bool`` callable the resolver expects."""
    return lambda entry_id: is_unlocked(store, entry_id)
