"""Tests for app settings storage."""

import json

from backend import storage


def test_get_config_empty():
    """Returns defaults when no config file exists."""
    config = storage.get_config()
    assert config == {
        "title": "Rebel Alliance Field Codex",
        "gm_shortcut": "g",
        "log_time_format": "%H:%M",
    }


def test_update_config_partial():
    storage.update_config({"title": "Outer Rim Codex"})
    storage.update_config({"gm_shortcut": "m"})

    config = storage.get_config()
    assert config["title"] == "Outer Rim Codex"
    assert config["gm_shortcut"] == "m"
    assert config["log_time_format"] == "%H:%M"


def test_update_config_ignores_unknown_keys():
    result = storage.update_config({"theme": "crt"})
    assert "theme" not in result
    stored = json.loads((storage.data_dir() / "config.json").read_text())
    assert "theme" not in stored


def test_blank_shortcut_falls_back_to_default():
    (storage.data_dir() / "config.json").write_text(json.dumps({"gm_shortcut": ""}))
    assert storage.get_config()["gm_shortcut"] == "g"


def test_update_config_blank_shortcut_not_saved():
    result = storage.update_config({"gm_shortcut": ""})
    assert result["gm_shortcut"] == "g"
    stored = json.loads((storage.data_dir() / "config.json").read_text())
    assert stored["gm_shortcut"] == "g"
