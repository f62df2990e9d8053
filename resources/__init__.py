"""
Trello MCP Resources - Resource definitions and reader.
"""

from mcp.types import Resource

from config import Settings
from resources import info

# Collect all resources
RESOURCES: list[Resource] = [
    info.RESOURCE,
]


def read_resource(uri: str, settings: Settings, tool_count: int) -> str:
    """Read a resource by URI."""
    if uri == str(info.RESOURCE.uri):
        return info.read(settings, tool_count)
    raise ValueError(f"Unknown resource: {uri}")
