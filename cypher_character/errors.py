"""Rejections raised by CharacterStats.spend_effort.

Every failure is a local, recoverable validation error. Each carries a
stable ``code`` and the numbers that caused it so callers can build their
own messages; ``str(err)`` gives the default wording.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cypher_character.stats import EffortType


class SpendEffortError(Exception):
    """Base class for a rejected effort spend."""

    code = "spend_effort"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": str(self)}


class ZeroEffortError(SpendEffortError):
    code = "zero_effort"

    def __init__(self) -> None:
        super().__init__("Attempted to spend zero effort")


class EffortExceededError(SpendEffortError):
    """More effort levels requested than the character's effort allows."""

    code = "effort_exceeded"

    def __init__(self, max: int, requested: int) -> None:
        self.max = max
        self.requested = requested
        super().__init__(
            f"Attempted to spend more effort than allowed (max {max}): {requested}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "max": self.max, "requested": self.requested}


class EdgeExceededError(SpendEffortError):
    """More edge applied than the pool provides."""

    code = "edge_exceeded"

    def __init__(self, max: int, requested: int) -> None:
        self.max = max
        self.requested = requested
        super().__init__(
            f"Attempted to apply more edge than available (max {max}): {requested}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "max": self.max, "requested": self.requested}


class PoolExhaustedError(SpendEffortError):
    """The cost would leave nothing in the pool.

    max is the pool's current value at the time of the request, requested
    the computed cost.
    """

    code = "pool_exhausted"

    def __init__(self, effort_type: EffortType, max: int, requested: int) -> None:
        self.effort_type = effort_type
        self.max = max
        self.requested = requested
        super().__init__(
            f"Attempted to spend all of the {effort_type} pool points "
            f"(max {max}): {requested}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "effort_type": str(self.effort_type),
            "max": self.max,
            "requested": self.requested,
        }
