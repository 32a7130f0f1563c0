"""FastAPI endpoints.

API groups live under /api: settings (health, settings), character, and
stats (including spend-effort). The HTML sheet pages are served from the
root by `pages_router`.
"""

from fastapi import APIRouter

from .characters import router as characters_router
from .pages import router as pages_router  # noqa: F401
from .settings import router as settings_router
from .stats import router as stats_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(characters_router)
router.include_router(stats_router)
