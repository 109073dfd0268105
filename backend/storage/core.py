"""Storage initialization and path helpers."""

from pathlib import Path

from .kv import JsonFileStore

_data_dir: Path | None = None
_local_store: JsonFileStore | None = None


def init_storage(data_dir: Path) -> None:
    global _data_dir, _local_store
    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)
    _local_store = JsonFileStore(_data_dir / "local_store.json")


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def local_store() -> JsonFileStore:
    """The on-disk key-value store shared by unlocks and the destiny pool."""
    assert _local_store is not None, "Call init_storage() before using storage"
    return _local_store
