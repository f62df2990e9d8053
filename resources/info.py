"""
trello://info resource - Server information.
"""

from mcp.types import Resource

from config import Settings

RESOURCE = Resource(
    uri="trello://info",
    name="Trello Server Info",
    mimeType="text/plain",
    description="Information about this Trello MCP server",
)


def read(settings: Settings, tool_count: int) -> str:
    """Read the info resource."""
    retries = settings.RATE_LIMIT_MAX_RETRIES or "unbounded"
    return f"""Trello MCP Server v{settings.VERSION}

A Model Context Protocol server exposing the Trello REST API as tools.

Tools: {tool_count} (boards, lists, cards, members, labels, checklists)
API: {settings.API_BASE_URL}
Rate limiting: waits for the reset window at {settings.RATE_LIMIT_SAFETY_BUFFER} remaining requests
Retries after HTTP 429: {retries}

Credentials are read from the system keyring.
Run `trello-mcp-credentials store` to set them up.
"""
