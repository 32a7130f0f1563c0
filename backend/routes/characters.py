"""Character API endpoints."""

from fastapi import APIRouter, Response

from backend import characters

from .models import UpdateCharacter

router = APIRouter()


@router.get("/v1/character")
async def get_character():
    """Get the character (seeded from config on first use)."""
    return await characters.read_character()


@router.put("/v1/character")
async def update_character(body: UpdateCharacter, response: Response):
    """Partially update name, pronouns, or sentence parts."""
    character = await characters.update_character(body.model_dump(exclude_unset=True))
    response.headers["HX-Trigger"] = "updatedCharacter"
    return character
