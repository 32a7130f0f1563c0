"""Create a demo character for development/testing."""

from backend import storage
from backend.characters import new_stats
from cypher_character.models import Character, Sentence
from cypher_character.stats import DamageTrack

DEMO_CHARACTER = Character(
    name="Ferris",
    pronouns="any",
    sentence=Sentence(
        descriptor="Fast",
        character_type="Explorer",
        flavor="Technology",
        focus="Helps Their Friends",
    ),
)

DEMO_POOLS = {
    "might_pool": 10,
    "might_edge": 1,
    "speed_pool": 14,
    "speed_edge": 1,
    "intellect_pool": 8,
    "intellect_edge": 0,
}


def create_demo_data() -> None:
    """Overwrite the stored character with a demo character mid-adventure."""
    storage.save_character(DEMO_CHARACTER)

    stats = new_stats(DEMO_POOLS)
    stats.effort = 2
    stats.xp = 3
    # A few points already spent and a recovery roll used
    stats.speed.current = 11
    stats.recovery_rolls.one_action = True
    stats.damage_track = DamageTrack.IMPAIRED
    storage.save_stats(stats)
