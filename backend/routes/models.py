"""Pydantic request/response models for API endpoints."""

from pydantic import BaseModel

from cypher_character.models import Character
from cypher_character.stats import (
    Advancement,
    CharacterStats,
    DamageTrack,
    EffortType,
    RecoveryRolls,
    SmallInt,
    Tier,
)


class UpdateCharacter(BaseModel):
    name: str | None = None
    pronouns: str | None = None
    descriptor: str | None = None
    character_type: str | None = None
    flavor: str | None = None
    focus: str | None = None


class NewStats(BaseModel):
    might_pool: SmallInt
    might_edge: SmallInt = 0
    speed_pool: SmallInt
    speed_edge: SmallInt = 0
    intellect_pool: SmallInt
    intellect_edge: SmallInt = 0


class PoolUpdate(BaseModel):
    current: SmallInt | None = None
    max: SmallInt | None = None
    edge: SmallInt | None = None


class UpdateStats(BaseModel):
    tier: Tier | None = None
    effort: SmallInt | None = None
    xp: SmallInt | None = None
    damage_track: DamageTrack | None = None
    might: PoolUpdate | None = None
    speed: PoolUpdate | None = None
    intellect: PoolUpdate | None = None
    recovery_rolls: RecoveryRolls | None = None
    advancement: Advancement | None = None


class SpendEffortBody(BaseModel):
    effort_type: EffortType
    effort_level: SmallInt
    edge: SmallInt = 0


class SpendEffortResult(BaseModel):
    spent: int
    stats: CharacterStats


class DefaultPoolsUpdate(BaseModel):
    might_pool: SmallInt | None = None
    might_edge: SmallInt | None = None
    speed_pool: SmallInt | None = None
    speed_edge: SmallInt | None = None
    intellect_pool: SmallInt | None = None
    intellect_edge: SmallInt | None = None


class UpdateSettings(BaseModel):
    default_character: Character | None = None
    default_pools: DefaultPoolsUpdate | None = None
