"""File-based storage: a flat key-value store plus app settings.

Data layout:
  data/
    local_store.json   Flat {key: string} object (the "local store")
      entry_unlocked__<id>   "true" when a GM-only entry is visible to players
      sw_destiny_pool        JSON {"light": n, "dark": n}
      sw_destiny_log         JSON array of strings, newest first, max 50
    config.json        App settings (title, GM shortcut, log time format)

Unlock rule: the key's *absence* means locked; locking removes the key
rather than writing "false".

Config: get_config() returns defaults merged with stored values.
update_config() overwrites known keys and ignores the rest.
"""

# Re-export all public symbols so `from backend import storage` keeps working.

from .core import (  # noqa: F401
    data_dir,
    init_storage,
    local_store,
)

from .kv import (  # noqa: F401
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    StoreError,
    read_json,
    write_json,
)

from .unlocks import (  # noqa: F401
    UNLOCK_PREFIX,
    is_unlocked,
    set_unlocked,
    unlock_checker,
    unlock_key,
)

from .config import (  # noqa: F401
    get_config,
    update_config,
)
