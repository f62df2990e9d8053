"""
Trello MCP Tools - Tool definitions and dispatcher.
"""

import json

from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, CallToolResult, ErrorData, TextContent, Tool
from pydantic import ValidationError

from logging_utils import create_logger
from services import TrelloServices
from tools import boards, cards, checklists, labels, lists, members
from tools.base import ToolDefinition

logger = create_logger("trello.tools")

# Collect all tools
DEFINITIONS: list[ToolDefinition] = [
    *boards.TOOLS,
    *lists.TOOLS,
    *cards.TOOLS,
    *members.TOOLS,
    *labels.TOOLS,
    *checklists.TOOLS,
]

TOOLS: list[Tool] = [definition.tool for definition in DEFINITIONS]

# Map tool names to definitions
_REGISTRY: dict[str, ToolDefinition] = {definition.name: definition for definition in DEFINITIONS}

if len(_REGISTRY) != len(DEFINITIONS):
    raise RuntimeError("Duplicate tool names in the tool catalogue")


def _text(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def format_validation_error(exc: ValidationError) -> str:
    """Compact one-line rendering of pydantic validation errors."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        problems.append(f"{location}: {error['msg']}")
    return "Invalid arguments: " + "; ".join(problems)


async def call_tool(services: TrelloServices, name: str, arguments: dict | None) -> CallToolResult:
    """
    Dispatch a tool call to the appropriate handler.

    Raises:
        McpError: METHOD_NOT_FOUND when no tool has this name.

    Any other failure is returned as an isError result with text
    "Error: <message>".
    """
    definition = _REGISTRY.get(name)
    if definition is None:
        raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

    try:
        args = definition.arguments.model_validate(arguments or {})
    except ValidationError as exc:
        message = format_validation_error(exc)
        logger.warning("Rejected tool arguments", tool=name, error=message)
        return _text(f"Error: {message}", is_error=True)

    try:
        result = await definition.handler(services, args)
    except Exception as exc:
        logger.error("Tool call failed", tool=name, error=str(exc), error_type=type(exc).__name__)
        return _text(f"Error: {exc}", is_error=True)

    logger.debug("Tool call succeeded", tool=name)
    return _text(json.dumps(result, indent=2))
