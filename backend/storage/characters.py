"""Character and stats file storage."""

from pathlib import Path

from cypher_character.models import Character
from cypher_character.stats import CharacterStats

from .core import data_dir


def _character_path() -> Path:
    return data_dir() / "character.json"


def _stats_path() -> Path:
    return data_dir() / "stats.json"


def get_character() -> Character | None:
    """Load the character. Returns None if none has been saved."""
    path = _character_path()
    if not path.is_file():
        return None
    return Character.model_validate_json(path.read_text())


def save_character(character: Character) -> None:
    _character_path().write_text(character.model_dump_json(indent=2))


def get_stats() -> CharacterStats | None:
    """Load the character's stats. Returns None if none have been saved."""
    path = _stats_path()
    if not path.is_file():
        return None
    return CharacterStats.model_validate_json(path.read_text())


def save_stats(stats: CharacterStats) -> None:
    _stats_path().write_text(stats.model_dump_json(indent=2))
