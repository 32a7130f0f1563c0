"""Server-rendered character sheet pages."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from backend import characters, sheets

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@router.get("/character", response_class=HTMLResponse)
async def character_sheet():
    """The full sheet: sentence, pools, and the effort form."""
    character = await characters.read_character()
    return sheets.render_page(character, await characters.read_stats())


@router.get("/character/edit", response_class=HTMLResponse)
async def character_edit():
    return sheets.render_edit(await characters.read_character())


@router.get("/character/view", response_class=HTMLResponse)
async def character_view():
    return sheets.render_view(await characters.read_character())
