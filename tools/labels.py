"""
Label tools — board labels and the labels applied to cards.
"""

from typing import Any

from pydantic import Field

from services import TrelloServices
from tools.base import ConfirmedArguments, LabelColor, ToolArguments, define_tool, success

COLOR_DESCRIPTION = "Color of the label, or null for no color"


class LabelIdArguments(ToolArguments):
    label_id: str = Field(description="ID of the label")


class CreateLabelArguments(ToolArguments):
    board_id: str = Field(description="ID of the board the label should belong to")
    name: str = Field(description="Name of the label")
    color: LabelColor | None = Field(description=COLOR_DESCRIPTION)


class UpdateLabelArguments(LabelIdArguments):
    name: str | None = Field(default=None, description="New name for the label")
    color: LabelColor | None = Field(default=None, description=COLOR_DESCRIPTION)


class DeleteLabelArguments(ConfirmedArguments):
    label_id: str = Field(description="ID of the label to delete")


class BoardLabelsArguments(ToolArguments):
    board_id: str = Field(description="ID of the board")


class UpdateLabelNameArguments(LabelIdArguments):
    name: str = Field(description="New name for the label")


class UpdateLabelColorArguments(LabelIdArguments):
    color: LabelColor | None = Field(description=COLOR_DESCRIPTION)


class CreateLabelOnCardArguments(ToolArguments):
    card_id: str = Field(description="ID of the card")
    name: str = Field(description="Name of the label")
    color: LabelColor | None = Field(description=COLOR_DESCRIPTION)


class CardLabelsArguments(ToolArguments):
    card_id: str = Field(description="ID of the card")


class CardLabelArguments(CardLabelsArguments):
    label_id: str = Field(description="ID of the label")


async def handle_get_label(services: TrelloServices, args: LabelIdArguments) -> Any:
    """Handle get_label tool call."""
    return await services.labels.get_label(args.label_id)


async def handle_create_label(services: TrelloServices, args: CreateLabelArguments) -> Any:
    """Handle create_label tool call."""
    return await services.labels.create_label(args.board_id, args.name, args.color)


async def handle_update_label(services: TrelloServices, args: UpdateLabelArguments) -> Any:
    """Handle update_label tool call."""
    return await services.labels.update_label(args.label_id, args.payload("label_id"))


async def handle_delete_label(services: TrelloServices, args: DeleteLabelArguments) -> Any:
    """Handle delete_label tool call."""
    args.require_confirmation()
    await services.labels.delete_label(args.label_id)
    return success("Label deleted successfully")


async def handle_get_board_labels(services: TrelloServices, args: BoardLabelsArguments) -> Any:
    """Handle get_board_labels tool call."""
    return await services.labels.get_board_labels(args.board_id)


async def handle_update_label_name(services: TrelloServices, args: UpdateLabelNameArguments) -> Any:
    """Handle update_label_name tool call."""
    return await services.labels.update_name(args.label_id, args.name)


async def handle_update_label_color(services: TrelloServices, args: UpdateLabelColorArguments) -> Any:
    """Handle update_label_color tool call."""
    return await services.labels.update_color(args.label_id, args.color)


async def handle_create_label_on_card(services: TrelloServices, args: CreateLabelOnCardArguments) -> Any:
    """Handle create_label_on_card tool call."""
    return await services.labels.create_label_on_card(args.card_id, args.name, args.color)


async def handle_get_card_labels(services: TrelloServices, args: CardLabelsArguments) -> Any:
    """Handle get_card_labels tool call."""
    return await services.labels.get_card_labels(args.card_id)


async def handle_add_label_to_card(services: TrelloServices, args: CardLabelArguments) -> Any:
    """Handle add_label_to_card tool call."""
    await services.labels.add_label_to_card(args.card_id, args.label_id)
    return success("Label added to card successfully")


async def handle_remove_label_from_card(services: TrelloServices, args: CardLabelArguments) -> Any:
    """Handle remove_label_from_card tool call."""
    await services.labels.remove_label_from_card(args.card_id, args.label_id)
    return success("Label removed from card successfully")


TOOLS = [
    define_tool(
        "get_label",
        "Retrieve a label by ID.",
        LabelIdArguments,
        handle_get_label,
    ),
    define_tool(
        "create_label",
        "Create a new label on a board.",
        CreateLabelArguments,
        handle_create_label,
    ),
    define_tool(
        "update_label",
        "Update the name or color of a label.",
        UpdateLabelArguments,
        handle_update_label,
    ),
    define_tool(
        "delete_label",
        "Permanently delete a label. Deletion cannot be undone and requires confirm: true.",
        DeleteLabelArguments,
        handle_delete_label,
    ),
    define_tool(
        "get_board_labels",
        "Get the labels defined on a board.",
        BoardLabelsArguments,
        handle_get_board_labels,
    ),
    define_tool(
        "update_label_name",
        "Rename a label.",
        UpdateLabelNameArguments,
        handle_update_label_name,
    ),
    define_tool(
        "update_label_color",
        "Change the color of a label.",
        UpdateLabelColorArguments,
        handle_update_label_color,
    ),
    define_tool(
        "create_label_on_card",
        "Create a new label and apply it to a card in one step.",
        CreateLabelOnCardArguments,
        handle_create_label_on_card,
    ),
    define_tool(
        "get_card_labels",
        "Get the labels applied to a card.",
        CardLabelsArguments,
        handle_get_card_labels,
    ),
    define_tool(
        "add_label_to_card",
        "Apply an existing label to a card.",
        CardLabelArguments,
        handle_add_label_to_card,
    ),
    define_tool(
        "remove_label_from_card",
        "Remove a label from a card.",
        CardLabelArguments,
        handle_remove_label_from_card,
    ),
]
