"""Character stats and the effort-spending rules.

Pools (Might, Speed, Intellect) hold current/max points and an edge
rating. Applying effort to an action costs 3 points for the first level
and 2 for each level after it; edge from the chosen pool is subtracted from
that cost. A character who is not hale pays one extra point per level.

spend_effort checks, in order:
  1. zero effort requested
  2. more levels than the character's effort allows
  3. more edge than the pool has
  4. a cost that would not leave at least one point in the pool

The first failing check raises; nothing is changed unless every check
passes.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field, model_validator, validate_call

from cypher_character.errors import (
    EdgeExceededError,
    EffortExceededError,
    PoolExhaustedError,
    ZeroEffortError,
)

SmallInt = Annotated[int, Field(ge=0, le=255)]

BASE_EFFORT_COST = 3
ADDITIONAL_LEVEL_COST = 2


class Tier(str, Enum):
    ONE = "One"
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"
    FIVE = "Five"
    SIX = "Six"


class EffortType(str, Enum):
    """Which pool an effort spend draws from."""

    MIGHT = "Might"
    SPEED = "Speed"
    INTELLECT = "Intellect"

    def __str__(self) -> str:
        return self.value


class DamageTrack(str, Enum):
    HALE = "Hale"
    IMPAIRED = "Impaired"
    DEBILITATED = "Debilitated"


class Pool(BaseModel):
    current: SmallInt
    max: SmallInt
    edge: SmallInt = 0

    @model_validator(mode="after")
    def _current_within_max(self) -> Pool:
        if self.current > self.max:
            raise ValueError(f"current ({self.current}) exceeds max ({self.max})")
        return self

    @classmethod
    def new(cls, max: int, edge: int) -> Pool:
        """A full pool."""
        return cls(current=max, max=max, edge=edge)


class RecoveryRolls(BaseModel):
    """Recovery rolls already used today."""

    one_action: bool = False
    ten_minutes: bool = False
    one_hour: bool = False
    ten_hours: bool = False


class Advancement(BaseModel):
    """Advancements taken toward the next tier; each is usable once per tier."""

    increase_capabilities: bool = False
    move_toward_perfection: bool = False
    extra_effort: bool = False
    skill_training: bool = False
    other: bool = False


class CharacterStats(BaseModel):
    """The quantitative side of a character."""

    tier: Tier = Tier.ONE
    effort: SmallInt = 1
    xp: SmallInt = 0
    might: Pool
    speed: Pool
    intellect: Pool
    recovery_rolls: RecoveryRolls = Field(default_factory=RecoveryRolls)
    damage_track: DamageTrack = DamageTrack.HALE
    advancement: Advancement = Field(default_factory=Advancement)

    @classmethod
    def new(
        cls,
        might_pool: int,
        might_edge: int,
        speed_pool: int,
        speed_edge: int,
        intellect_pool: int,
        intellect_edge: int,
    ) -> CharacterStats:
        """Create tier-one stats with full pools.

        Pool sizes and edges are taken as given; point-buy legality is
        left to the caller.
        """
        return cls(
            might=Pool.new(might_pool, might_edge),
            speed=Pool.new(speed_pool, speed_edge),
            intellect=Pool.new(intellect_pool, intellect_edge),
        )

    def pool(self, effort_type: EffortType) -> Pool:
        effort_type = EffortType(effort_type)
        if effort_type is EffortType.MIGHT:
            return self.might
        if effort_type is EffortType.SPEED:
            return self.speed
        return self.intellect

    def effort_cost(self, effort_level: int, edge: int) -> int:
        """Points needed to apply effort_level levels with the given edge."""
        cost = BASE_EFFORT_COST + (effort_level - 1) * ADDITIONAL_LEVEL_COST - edge
        # Edge can bring the cost to zero but never below.
        cost = max(cost, 0)
        if self.damage_track != DamageTrack.HALE:
            cost += effort_level
        return cost

    @validate_call
    def spend_effort(self, effort_type: EffortType, effort_level: SmallInt, edge: SmallInt) -> int:
        """Apply effort from a pool and return the points spent.

        Raises a SpendEffortError subclass when the spend is not allowed;
        in that case the stats are left untouched. Levels or edge outside
        0..255 raise pydantic.ValidationError before any rule is checked.
        """
        if effort_level == 0:
            raise ZeroEffortError()
        if self.effort < effort_level:
            raise EffortExceededError(max=self.effort, requested=effort_level)

        effort_type = EffortType(effort_type)
        pool = self.pool(effort_type)
        if pool.edge < edge:
            raise EdgeExceededError(max=pool.edge, requested=edge)

        cost = self.effort_cost(effort_level, edge)
        # A pool may never be spent down to zero.
        if cost >= pool.current:
            raise PoolExhaustedError(effort_type, max=pool.current, requested=cost)

        pool.current -= cost
        return cost
