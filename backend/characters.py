"""Character sheet logic: seeding, partial updates, and effort spending.

The sheet holds one character. When nothing has been saved yet the
character and stats are seeded from config (default_character and
default_pools) and written to storage.

Updates are partial: only supplied keys change. A blank or null flavor
removes the flavor from the sentence.

spend_effort() holds the character lock for the whole load → spend → save
sequence, and read_character()/read_stats() hold it while seeding.
Rejections from the rules engine propagate unchanged and nothing
is saved.
"""

import logging
from typing import Any

from backend import storage
from cypher_character.models import Character
from cypher_character.stats import CharacterStats, EffortType

logger = logging.getLogger(__name__)

SENTENCE_FIELDS = ("descriptor", "character_type", "flavor", "focus")

STATS_FIELDS = (
    "tier",
    "effort",
    "xp",
    "might",
    "speed",
    "intellect",
    "recovery_rolls",
    "damage_track",
    "advancement",
)


def new_stats(pools: dict[str, int]) -> CharacterStats:
    """Build fresh tier-one stats from pool sizes and edges."""
    return CharacterStats.new(
        pools["might_pool"],
        pools["might_edge"],
        pools["speed_pool"],
        pools["speed_edge"],
        pools["intellect_pool"],
        pools["intellect_edge"],
    )


def load_character() -> Character:
    """Return the stored character, seeding it from config if missing."""
    character = storage.get_character()
    if character is None:
        character = Character.model_validate(storage.get_config()["default_character"])
        storage.save_character(character)
        logger.info("seeded character %r", character.name)
    return character


def load_stats() -> CharacterStats:
    """Return the stored stats, seeding them from config if missing."""
    stats = storage.get_stats()
    if stats is None:
        stats = new_stats(storage.get_config()["default_pools"])
        storage.save_stats(stats)
        logger.info("seeded stats from default pools")
    return stats


async def read_character() -> Character:
    """load_character() under the character lock."""
    async with storage.character_lock():
        return load_character()


async def read_stats() -> CharacterStats:
    """load_stats() under the character lock."""
    async with storage.character_lock():
        return load_stats()


def apply_character_update(character: Character, fields: dict[str, Any]) -> Character:
    """Return a copy of character with the supplied fields applied."""
    data = character.model_dump()
    for key in ("name", "pronouns"):
        if fields.get(key) is not None:
            data[key] = fields[key]
    for key in SENTENCE_FIELDS:
        if key not in fields:
            continue
        value = fields[key]
        if key == "flavor":
            data["sentence"]["flavor"] = value or None
        elif value is not None:
            data["sentence"][key] = value
    return Character.model_validate(data)


async def update_character(fields: dict[str, Any]) -> Character:
    """Apply a partial update to the stored character and persist it."""
    async with storage.character_lock():
        character = apply_character_update(load_character(), fields)
        storage.save_character(character)
    logger.info("updated character: %s", character)
    return character


def apply_stats_update(stats: CharacterStats, fields: dict[str, Any]) -> CharacterStats:
    """Return a re-validated copy of stats with the supplied fields applied.

    Nested models (pools, recovery_rolls, advancement) are merged key by key.
    """
    data = stats.model_dump(mode="json")
    for key in STATS_FIELDS:
        if fields.get(key) is None:
            continue
        value = fields[key]
        if isinstance(value, dict):
            data[key].update(value)
        else:
            data[key] = value
    return CharacterStats.model_validate(data)


async def update_stats(fields: dict[str, Any]) -> CharacterStats:
    """Apply caller-settable stats fields under the character lock."""
    async with storage.character_lock():
        stats = apply_stats_update(load_stats(), fields)
        storage.save_stats(stats)
    return stats


async def reset_stats(pools: dict[str, int]) -> CharacterStats:
    """Replace the stored stats with fresh ones built from pools."""
    async with storage.character_lock():
        stats = new_stats(pools)
        storage.save_stats(stats)
    logger.info("reset stats: %s", pools)
    return stats


async def spend_effort(
    effort_type: EffortType, effort_level: int, edge: int
) -> tuple[int, CharacterStats]:
    """Spend effort from the stored stats. Returns (points spent, new stats)."""
    async with storage.character_lock():
        stats = load_stats()
        spent = stats.spend_effort(effort_type, effort_level, edge)
        storage.save_stats(stats)
    pool = stats.pool(effort_type)
    logger.info(
        "spent %d %s (level %d, edge %d); %d/%d left",
        spent, effort_type, effort_level, edge, pool.current, pool.max,
    )
    return spent, stats
