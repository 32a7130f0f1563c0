"""Character stats and effort-spending endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Response

from backend import characters
from cypher_character.errors import SpendEffortError

from .models import NewStats, SpendEffortBody, SpendEffortResult, UpdateStats

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/stats")
async def get_stats():
    """Get the character's stats (seeded from config on first use)."""
    return await characters.read_stats()


@router.post("/v1/stats", status_code=201)
async def reset_stats(body: NewStats, response: Response):
    """Replace the stats with fresh tier-one stats from pool sizes and edges."""
    stats = await characters.reset_stats(body.model_dump())
    response.headers["HX-Trigger"] = "updatedStats"
    return stats


@router.patch("/v1/stats")
async def update_stats(body: UpdateStats, response: Response):
    """Update tier, effort, xp, damage track, pools, or flags."""
    try:
        stats = await characters.update_stats(body.model_dump(exclude_unset=True))
    except ValueError as e:
        # Merged pools can still break current <= max.
        raise HTTPException(422, str(e))
    response.headers["HX-Trigger"] = "updatedStats"
    return stats


@router.post("/v1/stats/spend-effort", response_model=SpendEffortResult)
async def spend_effort(body: SpendEffortBody, response: Response):
    """Spend effort from a pool; 422 with the rule that rejected it otherwise."""
    try:
        spent, stats = await characters.spend_effort(
            body.effort_type, body.effort_level, body.edge
        )
    except SpendEffortError as e:
        logger.info("spend effort rejected: %s", e)
        raise HTTPException(422, e.to_dict())
    response.headers["HX-Trigger"] = "updatedStats"
    return SpendEffortResult(spent=spent, stats=stats)
