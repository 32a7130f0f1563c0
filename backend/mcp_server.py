"""FastMCP server exposing the character sheet as MCP tools.

Tools:
  - character_sheet()                              character, sentence, and stats
  - spend_effort(effort_type, effort_level, edge)  spend effort from a pool

Both tools work on the same storage as the web app, so storage must be
initialised first (DATA_DIR when run as __main__).

Usage:
    uv run python -m backend.mcp_server
"""

from mcp.server.fastmcp import FastMCP

from backend import characters
from cypher_character.stats import EffortType, SmallInt

mcp = FastMCP("cypher-character")


@mcp.tool()
async def character_sheet() -> dict:
    """Return the character, its rendered sentence, and its stats."""
    character = await characters.read_character()
    stats = await characters.read_stats()
    return {
        "character": character.model_dump(mode="json"),
        "summary": str(character),
        "stats": stats.model_dump(mode="json"),
    }


@mcp.tool()
async def spend_effort(
    effort_type: EffortType, effort_level: SmallInt, edge: SmallInt = 0
) -> dict:
    """Spend effort_level levels of effort from a pool, applying edge.

    Fails with the rule that rejected the spend; the pool is unchanged then.
    """
    spent, stats = await characters.spend_effort(effort_type, effort_level, edge)
    return {"spent": spent, "stats": stats.model_dump(mode="json")}


if __name__ == "__main__":
    import os
    from pathlib import Path

    from backend import storage

    storage.init_storage(Path(os.getenv("DATA_DIR", "data")))
    mcp.run()
