"""Tests for the MCP tool server, using the in-process client session."""

import json

from mcp.shared.memory import create_connected_server_and_client_session

import backend.mcp_server as mcp_server
from backend import storage
from cypher_character.stats import CharacterStats, DamageTrack


def _payload(result) -> dict:
    return json.loads(result.content[0].text)


async def test_character_sheet_tool():
    async with create_connected_server_and_client_session(mcp_server.mcp._mcp_server) as client:
        result = await client.call_tool("character_sheet", {})
    assert not result.isError
    data = _payload(result)
    assert data["summary"] == "Tacos (yum/my) is a Delicious Avocado (Spicy) who Satiates the Hungry"
    assert data["stats"]["might"]["max"] == 12


async def test_spend_effort_tool():
    storage.save_stats(CharacterStats.new(10, 1, 5, 0, 5, 0))
    async with create_connected_server_and_client_session(mcp_server.mcp._mcp_server) as client:
        result = await client.call_tool(
            "spend_effort", {"effort_type": "Might", "effort_level": 1, "edge": 1}
        )
    assert not result.isError
    data = _payload(result)
    assert data["spent"] == 2
    assert data["stats"]["might"]["current"] == 8
    assert storage.get_stats().might.current == 8


async def test_spend_effort_tool_reports_rejection():
    storage.save_stats(CharacterStats.new(2, 1, 5, 0, 5, 0))
    async with create_connected_server_and_client_session(mcp_server.mcp._mcp_server) as client:
        result = await client.call_tool(
            "spend_effort", {"effort_type": "Might", "effort_level": 1}
        )
    assert result.isError
    assert "Attempted to spend all of the Might pool points (max 2): 3" in result.content[0].text
    assert storage.get_stats().might.current == 2


async def test_spend_effort_tool_rejects_negative_arguments():
    stats = CharacterStats.new(10, 0, 5, 0, 5, 0)
    stats.damage_track = DamageTrack.IMPAIRED
    storage.save_stats(stats)
    async with create_connected_server_and_client_session(mcp_server.mcp._mcp_server) as client:
        negative_level = await client.call_tool(
            "spend_effort", {"effort_type": "Might", "effort_level": -3}
        )
        negative_edge = await client.call_tool(
            "spend_effort", {"effort_type": "Might", "effort_level": 1, "edge": -1}
        )
    assert negative_level.isError
    assert negative_edge.isError
    assert storage.get_stats().might.current == 10
