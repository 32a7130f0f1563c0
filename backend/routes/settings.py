"""Health check and settings endpoints."""

from fastapi import APIRouter

from backend import storage

from .models import UpdateSettings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings():
    """Get global app settings (seed character and default pools)."""
    return storage.get_config()


@router.patch("/settings")
async def update_settings(body: UpdateSettings):
    """Update global app settings (partial merge).

    Seeds are validated here so a bad value never reaches first-use seeding.
    """
    fields = body.model_dump(exclude_unset=True)
    if fields.get("default_character") is None:
        fields.pop("default_character", None)
    if fields.get("default_pools") is None:
        fields.pop("default_pools", None)
    return storage.update_config(fields)
