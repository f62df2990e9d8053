"""
List tools — fetch, create, rename, reorder, archive and bulk-move lists.
"""

from typing import Any, Literal

from pydantic import Field

from services import TrelloServices
from tools.base import Position, ToolArguments, define_tool, success

CardFilter = Literal["all", "closed", "none", "open"]


class ListIdArguments(ToolArguments):
    list_id: str = Field(description="ID of the list")


class GetListArguments(ListIdArguments):
    fields: list[str] | None = Field(
        default=None, description="Specific fields to include in the response (default: all fields)"
    )


class CreateListArguments(ToolArguments):
    name: str = Field(description="Name of the list")
    id_board: str = Field(description="ID of the board the list should belong to")
    pos: Position | None = Field(default=None, description="Position of the list (top, bottom, or a positive number)")


class UpdateListArguments(ListIdArguments):
    name: str | None = Field(default=None, description="New name for the list")
    closed: bool | None = Field(default=None, description="Whether the list is closed (archived)")
    id_board: str | None = Field(default=None, description="ID of the board the list should belong to")
    pos: Position | None = Field(default=None, description="Position of the list (top, bottom, or a positive number)")
    subscribed: bool | None = Field(
        default=None, description="Whether the authenticated user is subscribed to the list"
    )


class MoveListToBoardArguments(ListIdArguments):
    board_id: str = Field(description="ID of the destination board")


class GetCardsInListArguments(ListIdArguments):
    filter: CardFilter = Field(default="open", description="Filter cards by status (default: open)")


class MoveAllCardsArguments(ToolArguments):
    source_list_id: str = Field(description="ID of the source list")
    destination_list_id: str = Field(description="ID of the destination list")
    board_id: str = Field(description="ID of the board (required by Trello API)")


class UpdateListPositionArguments(ListIdArguments):
    position: Position = Field(description="New position for the list (top, bottom, or a positive number)")


class UpdateListNameArguments(ListIdArguments):
    name: str = Field(description="New name for the list")


class SubscribeToListArguments(ListIdArguments):
    subscribed: bool = Field(description="Whether to subscribe (true) or unsubscribe (false)")


async def handle_get_list(services: TrelloServices, args: GetListArguments) -> Any:
    """Handle get_list tool call."""
    return await services.lists.get_list(args.list_id, fields=args.fields)


async def handle_create_list(services: TrelloServices, args: CreateListArguments) -> Any:
    """Handle create_list tool call."""
    return await services.lists.create_list(args.payload())


async def handle_update_list(services: TrelloServices, args: UpdateListArguments) -> Any:
    """Handle update_list tool call."""
    return await services.lists.update_list(args.list_id, args.payload("list_id"))


async def handle_archive_list(services: TrelloServices, args: ListIdArguments) -> Any:
    """Handle archive_list tool call."""
    return await services.lists.archive_list(args.list_id)


async def handle_unarchive_list(services: TrelloServices, args: ListIdArguments) -> Any:
    """Handle unarchive_list tool call."""
    return await services.lists.unarchive_list(args.list_id)


async def handle_move_list_to_board(services: TrelloServices, args: MoveListToBoardArguments) -> Any:
    """Handle move_list_to_board tool call."""
    return await services.lists.move_list_to_board(args.list_id, args.board_id)


async def handle_get_cards_in_list(services: TrelloServices, args: GetCardsInListArguments) -> Any:
    """Handle get_cards_in_list tool call."""
    return await services.lists.get_cards(args.list_id, args.filter)


async def handle_archive_all_cards(services: TrelloServices, args: ListIdArguments) -> Any:
    """Handle archive_all_cards tool call."""
    await services.lists.archive_all_cards(args.list_id)
    return success("All cards in the list have been archived")


async def handle_move_all_cards(services: TrelloServices, args: MoveAllCardsArguments) -> Any:
    """Handle move_all_cards tool call."""
    await services.lists.move_all_cards(args.source_list_id, args.destination_list_id, args.board_id)
    return success("All cards have been moved to the destination list")


async def handle_update_list_position(services: TrelloServices, args: UpdateListPositionArguments) -> Any:
    """Handle update_list_position tool call."""
    return await services.lists.update_position(args.list_id, args.position)


async def handle_update_list_name(services: TrelloServices, args: UpdateListNameArguments) -> Any:
    """Handle update_list_name tool call."""
    return await services.lists.update_name(args.list_id, args.name)


async def handle_subscribe_to_list(services: TrelloServices, args: SubscribeToListArguments) -> Any:
    """Handle subscribe_to_list tool call."""
    return await services.lists.update_subscribed(args.list_id, args.subscribed)


TOOLS = [
    define_tool(
        "get_list",
        "Retrieve detailed information about a specific list by ID.",
        GetListArguments,
        handle_get_list,
    ),
    define_tool(
        "create_list",
        "Create a new list on a board.",
        CreateListArguments,
        handle_create_list,
    ),
    define_tool(
        "update_list",
        "Update an existing list: name, position, board, archived or subscribed state.",
        UpdateListArguments,
        handle_update_list,
    ),
    define_tool(
        "archive_list",
        "Archive a list without deleting it.",
        ListIdArguments,
        handle_archive_list,
    ),
    define_tool(
        "unarchive_list",
        "Restore a previously archived list.",
        ListIdArguments,
        handle_unarchive_list,
    ),
    define_tool(
        "move_list_to_board",
        "Move a list to a different board.",
        MoveListToBoardArguments,
        handle_move_list_to_board,
    ),
    define_tool(
        "get_cards_in_list",
        "Get the cards in a list to see its contents.",
        GetCardsInListArguments,
        handle_get_cards_in_list,
    ),
    define_tool(
        "archive_all_cards",
        "Archive every card in a list.",
        ListIdArguments,
        handle_archive_all_cards,
    ),
    define_tool(
        "move_all_cards",
        "Move every card in a list to another list.",
        MoveAllCardsArguments,
        handle_move_all_cards,
    ),
    define_tool(
        "update_list_position",
        "Reorder a list on its board.",
        UpdateListPositionArguments,
        handle_update_list_position,
    ),
    define_tool(
        "update_list_name",
        "Rename a list.",
        UpdateListNameArguments,
        handle_update_list_name,
    ),
    define_tool(
        "subscribe_to_list",
        "Subscribe to or unsubscribe from notifications about a list.",
        SubscribeToListArguments,
        handle_subscribe_to_list,
    ),
]
