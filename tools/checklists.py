"""
Checklist tools — checklists, their check items and check-item state on cards.
"""

from typing import Any, Literal

from pydantic import Field

from services import TrelloServices
from tools.base import ConfirmedArguments, Position, ToolArguments, define_tool, success

CheckItemState = Literal["complete", "incomplete"]

POSITION_DESCRIPTION = "Position (top, bottom, or a positive number)"


class ChecklistIdArguments(ToolArguments):
    checklist_id: str = Field(description="ID of the checklist")


class CreateChecklistArguments(ToolArguments):
    card_id: str = Field(description="ID of the card the checklist should be added to")
    name: str = Field(description="Name of the checklist")
    pos: Position | None = Field(default=None, description=POSITION_DESCRIPTION)
    id_checklist_source: str | None = Field(default=None, description="ID of a checklist to copy items from")


class UpdateChecklistArguments(ChecklistIdArguments):
    name: str | None = Field(default=None, description="New name for the checklist")
    pos: Position | None = Field(default=None, description=POSITION_DESCRIPTION)


class DeleteChecklistArguments(ConfirmedArguments):
    checklist_id: str = Field(description="ID of the checklist to delete")


class CreateCheckItemArguments(ChecklistIdArguments):
    name: str = Field(description="Name of the check item")
    pos: Position | None = Field(default=None, description=POSITION_DESCRIPTION)
    checked: bool | None = Field(default=None, description="Whether the check item starts checked")
    due: str | None = Field(default=None, description="Due date (ISO 8601)")
    member_id: str | None = Field(default=None, description="ID of the member to assign")


class CheckItemArguments(ChecklistIdArguments):
    check_item_id: str = Field(description="ID of the check item")


class UpdateCheckItemArguments(CheckItemArguments):
    name: str | None = Field(default=None, description="New name for the check item")
    state: CheckItemState | None = Field(default=None, description="State of the check item")
    pos: Position | None = Field(default=None, description=POSITION_DESCRIPTION)
    due: str | None = Field(default=None, description="Due date (ISO 8601), or null to remove it")
    id_member: str | None = Field(default=None, description="ID of the assigned member, or null to unassign")


class DeleteCheckItemArguments(ConfirmedArguments):
    checklist_id: str = Field(description="ID of the checklist")
    check_item_id: str = Field(description="ID of the check item to delete")


class UpdateChecklistNameArguments(ChecklistIdArguments):
    name: str = Field(description="New name for the checklist")


class UpdateChecklistPositionArguments(ChecklistIdArguments):
    position: Position = Field(description=POSITION_DESCRIPTION)


class UpdateCheckItemStateOnCardArguments(ToolArguments):
    card_id: str = Field(description="ID of the card")
    check_item_id: str = Field(description="ID of the check item")
    state: CheckItemState = Field(description="New state of the check item")


async def handle_get_checklist(services: TrelloServices, args: ChecklistIdArguments) -> Any:
    """Handle get_checklist tool call."""
    return await services.checklists.get_checklist(args.checklist_id)


async def handle_create_checklist(services: TrelloServices, args: CreateChecklistArguments) -> Any:
    """Handle create_checklist tool call."""
    return await services.checklists.create_checklist(args.card_id, args.name, args.pos, args.id_checklist_source)


async def handle_update_checklist(services: TrelloServices, args: UpdateChecklistArguments) -> Any:
    """Handle update_checklist tool call."""
    return await services.checklists.update_checklist(args.checklist_id, args.payload("checklist_id"))


async def handle_delete_checklist(services: TrelloServices, args: DeleteChecklistArguments) -> Any:
    """Handle delete_checklist tool call."""
    args.require_confirmation()
    await services.checklists.delete_checklist(args.checklist_id)
    return success("Checklist deleted successfully")


async def handle_get_checkitems(services: TrelloServices, args: ChecklistIdArguments) -> Any:
    """Handle get_checkitems tool call."""
    return await services.checklists.get_check_items(args.checklist_id)


async def handle_create_checkitem(services: TrelloServices, args: CreateCheckItemArguments) -> Any:
    """Handle create_checkitem tool call."""
    return await services.checklists.create_check_item(
        args.checklist_id,
        args.name,
        pos=args.pos,
        checked=args.checked,
        due=args.due,
        member_id=args.member_id,
    )


async def handle_get_checkitem(services: TrelloServices, args: CheckItemArguments) -> Any:
    """Handle get_checkitem tool call."""
    return await services.checklists.get_check_item(args.checklist_id, args.check_item_id)


async def handle_update_checkitem(services: TrelloServices, args: UpdateCheckItemArguments) -> Any:
    """Handle update_checkitem tool call."""
    return await services.checklists.update_check_item(
        args.checklist_id, args.check_item_id, args.payload("checklist_id", "check_item_id")
    )


async def handle_delete_checkitem(services: TrelloServices, args: DeleteCheckItemArguments) -> Any:
    """Handle delete_checkitem tool call."""
    args.require_confirmation()
    await services.checklists.delete_check_item(args.checklist_id, args.check_item_id)
    return success("Checkitem deleted successfully")


async def handle_update_checklist_name(services: TrelloServices, args: UpdateChecklistNameArguments) -> Any:
    """Handle update_checklist_name tool call."""
    return await services.checklists.update_name(args.checklist_id, args.name)


async def handle_update_checklist_position(services: TrelloServices, args: UpdateChecklistPositionArguments) -> Any:
    """Handle update_checklist_position tool call."""
    return await services.checklists.update_position(args.checklist_id, args.position)


async def handle_get_checklist_board(services: TrelloServices, args: ChecklistIdArguments) -> Any:
    """Handle get_checklist_board tool call."""
    return await services.checklists.get_board(args.checklist_id)


async def handle_get_checklist_card(services: TrelloServices, args: ChecklistIdArguments) -> Any:
    """Handle get_checklist_card tool call."""
    return await services.checklists.get_card(args.checklist_id)


async def handle_update_checkitem_state_on_card(services: TrelloServices, args: UpdateCheckItemStateOnCardArguments) -> Any:
    """Handle update_checkitem_state_on_card tool call."""
    return await services.checklists.update_check_item_state_on_card(args.card_id, args.check_item_id, args.state)


TOOLS = [
    define_tool(
        "get_checklist",
        "Retrieve a checklist by ID.",
        ChecklistIdArguments,
        handle_get_checklist,
    ),
    define_tool(
        "create_checklist",
        "Add a new checklist to a card, optionally copying an existing checklist.",
        CreateChecklistArguments,
        handle_create_checklist,
    ),
    define_tool(
        "update_checklist",
        "Update the name or position of a checklist.",
        UpdateChecklistArguments,
        handle_update_checklist,
    ),
    define_tool(
        "delete_checklist",
        "Permanently delete a checklist. Deletion cannot be undone and requires confirm: true.",
        DeleteChecklistArguments,
        handle_delete_checklist,
    ),
    define_tool(
        "get_checkitems",
        "Get the check items of a checklist.",
        ChecklistIdArguments,
        handle_get_checkitems,
    ),
    define_tool(
        "create_checkitem",
        "Add a new check item to a checklist.",
        CreateCheckItemArguments,
        handle_create_checkitem,
    ),
    define_tool(
        "get_checkitem",
        "Retrieve a single check item of a checklist.",
        CheckItemArguments,
        handle_get_checkitem,
    ),
    define_tool(
        "update_checkitem",
        "Update a check item: name, state, position, due date or assigned member.",
        UpdateCheckItemArguments,
        handle_update_checkitem,
    ),
    define_tool(
        "delete_checkitem",
        "Permanently delete a check item. Requires confirm: true.",
        DeleteCheckItemArguments,
        handle_delete_checkitem,
    ),
    define_tool(
        "update_checklist_name",
        "Rename a checklist.",
        UpdateChecklistNameArguments,
        handle_update_checklist_name,
    ),
    define_tool(
        "update_checklist_position",
        "Reorder a checklist on its card.",
        UpdateChecklistPositionArguments,
        handle_update_checklist_position,
    ),
    define_tool(
        "get_checklist_board",
        "Get the board a checklist belongs to.",
        ChecklistIdArguments,
        handle_get_checklist_board,
    ),
    define_tool(
        "get_checklist_card",
        "Get the card a checklist belongs to.",
        ChecklistIdArguments,
        handle_get_checklist_card,
    ),
    define_tool(
        "update_checkitem_state_on_card",
        "Mark a check item on a card as complete or incomplete.",
        UpdateCheckItemStateOnCardArguments,
        handle_update_checkitem_state_on_card,
    ),
]
