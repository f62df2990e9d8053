"""
Shared building blocks for tool definitions.

Every tool pairs an MCP `Tool` (name, description, input schema) with a
pydantic model that validates its arguments and an async handler that calls
one adapter method.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Literal

from mcp.types import Tool
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from services import TrelloServices

# Trello accepts "top", "bottom" or a positive number for positions
Position = Literal["top", "bottom"] | float

LabelColor = Literal["green", "yellow", "orange", "red", "purple", "blue", "sky", "lime", "pink", "black"]

CONFIRMATION_MESSAGE = "Deletion requires confirmation. Set confirm: true to proceed."


class ConfirmationRequiredError(Exception):
    """A destructive tool was called without confirm: true."""


class ToolArguments(BaseModel):
    """
    Base model for tool arguments.

    Field names are snake_case in Python and camelCase on the wire,
    matching Trello's parameter names. Unknown fields are rejected.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def payload(self, *exclude: str) -> dict[str, Any]:
        """Fields the caller actually supplied, keyed by their Trello names."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude=set(exclude))


class ConfirmedArguments(ToolArguments):
    """Arguments for destructive tools."""

    confirm: bool = Field(default=False, description="Confirmation flag to prevent accidental deletion")

    def require_confirmation(self) -> None:
        if self.confirm is not True:
            raise ConfirmationRequiredError(CONFIRMATION_MESSAGE)


Handler = Callable[[TrelloServices, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDefinition:
    tool: Tool
    arguments: type[ToolArguments]
    handler: Handler

    @property
    def name(self) -> str:
        return self.tool.name


def define_tool(name: str, description: str, arguments: type[ToolArguments], handler: Handler) -> ToolDefinition:
    """Build a tool whose input schema is generated from its arguments model."""
    return ToolDefinition(
        tool=Tool(
            name=name,
            description=description,
            inputSchema=arguments.model_json_schema(by_alias=True),
        ),
        arguments=arguments,
        handler=handler,
    )


def success(message: str) -> dict[str, Any]:
    """Result for mutations whose Trello response carries nothing useful."""
    return {"success": True, "message": message}
