"""Global app settings (title, GM shortcut key, destiny log time format)."""

import json
from pathlib import Path
from typing import Any

from .core import data_dir

_CONFIG_DEFAULTS: dict[str, Any] = {
    "title": "Rebel Alliance Field Codex",
    "gm_shortcut": "g",
    "log_time_format": "%H:%M",
}


def _normalize(config: dict[str, Any]) -> dict[str, Any]:
    # Shortcut is matched case-insensitively against a single key
    if not isinstance(config["gm_shortcut"], str) or not config["gm_shortcut"]:
        config["gm_shortcut"] = _CONFIG_DEFAULTS["gm_shortcut"]
    return config


def _config_path() -> Path:
    return data_dir() / "config.json"


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config = dict(_CONFIG_DEFAULTS)
    path = _config_path()
    if path.is_file():
        stored = json.loads(path.read_text())
        for key in _CONFIG_DEFAULTS:
            if key in stored:
                config[key] = stored[key]
    return _normalize(config)


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge known fields into config and persist. Returns full config."""
    config = get_config()
    for key in _CONFIG_DEFAULTS:
        if key in fields:
            config[key] = fields[key]
    config = _normalize(config)
    _config_path().write_text(json.dumps(config, indent=2))
    return config
