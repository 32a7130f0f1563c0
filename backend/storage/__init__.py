"""File-based JSON storage for the single character sheet.

Data layout:
  data/
    character.json   Name, pronouns and sentence
    stats.json       Tier, effort, pools, damage track, flags
    config.json      Seed character and starting pools

Files are the pydantic models dumped as JSON; a missing file reads as None.

Config: get_config() returns defaults merged with stored values.
update_config() applies partial updates; default_character is replaced
wholesale, default_pools merged key-by-key.

Every read-modify-write of the character goes through character_lock().
"""

# Re-export all public symbols so `from backend import storage` keeps working.

from .core import (  # noqa: F401
    character_lock,
    data_dir,
    init_storage,
)

from .characters import (  # noqa: F401
    get_character,
    get_stats,
    save_character,
    save_stats,
)

from .config import (  # noqa: F401
    get_config,
    update_config,
)
