"""Global app configuration (seed character and starting pools)."""

import json
from pathlib import Path
from typing import Any

from .core import data_dir

_CONFIG_DEFAULTS: dict[str, Any] = {
    "default_character": {
        "name": "Tacos",
        "pronouns": "yum/my",
        "sentence": {
            "descriptor": "Delicious",
            "character_type": "Avocado",
            "flavor": "Spicy",
            "focus": "Satiates the Hungry",
        },
    },
    "default_pools": {
        "might_pool": 12,
        "might_edge": 1,
        "speed_pool": 10,
        "speed_edge": 0,
        "intellect_pool": 10,
        "intellect_edge": 0,
    },
}


def _config_path() -> Path:
    return data_dir() / "config.json"


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config: dict[str, Any] = json.loads(json.dumps(_CONFIG_DEFAULTS))
    path = _config_path()
    if path.is_file():
        stored = json.loads(path.read_text())
        if "default_character" in stored:
            # Replaced wholesale: a partial character is not a valid seed.
            config["default_character"] = stored["default_character"]
        if "default_pools" in stored:
            config["default_pools"].update(stored["default_pools"])
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge fields into config and persist. Returns full config."""
    config = get_config()
    if "default_character" in fields:
        config["default_character"] = fields["default_character"]
    if "default_pools" in fields:
        config["default_pools"].update(fields["default_pools"])
    _config_path().write_text(json.dumps(config, indent=2))
    return config
