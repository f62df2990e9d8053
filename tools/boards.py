"""
Board tools — list, fetch, create, update, close and delete boards.
"""

from typing import Any, Literal

from pydantic import Field

from services import TrelloServices
from tools.base import ConfirmedArguments, ToolArguments, define_tool, success

BoardFilter = Literal["all", "closed", "members", "open", "organization", "public", "starred", "unpinned"]
ListFilter = Literal["all", "closed", "none", "open"]
Visibility = Literal["disabled", "members", "observers", "org", "public"]


class GetBoardsArguments(ToolArguments):
    filter: BoardFilter | None = Field(default=None, description="Filter boards by status or membership")
    fields: list[str] | None = Field(
        default=None, description="Specific fields to include in the response (default: all fields)"
    )


class BoardIdArguments(ToolArguments):
    board_id: str = Field(description="ID of the board")


class GetBoardArguments(BoardIdArguments):
    fields: list[str] | None = Field(
        default=None, description="Specific fields to include in the response (default: all fields)"
    )


class CreateBoardArguments(ToolArguments):
    name: str = Field(description="Name of the board")
    desc: str | None = Field(default=None, description="Description of the board")
    id_organization: str | None = Field(default=None, description="ID of the organization the board should belong to")
    default_labels: bool | None = Field(default=None, description="Whether to use the default set of labels (default: true)")
    default_lists: bool | None = Field(
        default=None, description="Whether to add the default lists To Do, Doing and Done (default: true)"
    )
    id_board_source: str | None = Field(default=None, description="ID of a board to copy into the new board")
    keep_from_source: Literal["none", "cards"] | None = Field(
        default=None, description="What to copy from the source board (default: none)"
    )
    power_ups: Literal["all", "calendar", "cardAging", "recap", "voting"] | None = Field(
        default=None, description="Power-ups to enable on the board"
    )
    prefs_permission_level: Literal["private", "org", "public"] | None = Field(
        default=None, alias="prefs_permissionLevel", description="Permission level of the board (default: private)"
    )
    prefs_voting: Visibility | None = Field(
        default=None, alias="prefs_voting", description="Who can vote on this board (default: disabled)"
    )
    prefs_comments: Visibility | None = Field(
        default=None, alias="prefs_comments", description="Who can comment on cards (default: members)"
    )
    prefs_invitations: Literal["members", "admins"] | None = Field(
        default=None, alias="prefs_invitations", description="Who can invite people to the board (default: members)"
    )
    prefs_self_join: bool | None = Field(
        default=None, alias="prefs_selfJoin", description="Whether organization members can join the board themselves"
    )
    prefs_card_covers: bool | None = Field(
        default=None, alias="prefs_cardCovers", description="Whether to show card cover images"
    )
    prefs_background: str | None = Field(
        default=None, alias="prefs_background", description="Background color or image (default: blue)"
    )
    prefs_card_aging: Literal["regular", "pirate"] | None = Field(
        default=None, alias="prefs_cardAging", description="Card aging style (default: regular)"
    )


class UpdateBoardArguments(BoardIdArguments):
    name: str | None = Field(default=None, description="New name for the board")
    desc: str | None = Field(default=None, description="New description for the board")
    closed: bool | None = Field(default=None, description="Whether the board is closed (archived)")
    subscribed: bool | None = Field(default=None, description="Whether the authenticated user is subscribed to the board")
    id_organization: str | None = Field(default=None, description="ID of the organization the board should belong to")
    prefs_permission_level: Literal["private", "org", "public"] | None = Field(
        default=None, alias="prefs_permissionLevel", description="Permission level of the board"
    )
    prefs_self_join: bool | None = Field(
        default=None, alias="prefs_selfJoin", description="Whether organization members can join the board themselves"
    )
    prefs_card_covers: bool | None = Field(
        default=None, alias="prefs_cardCovers", description="Whether to show card cover images"
    )
    prefs_hide_votes: bool | None = Field(default=None, alias="prefs_hideVotes", description="Whether to hide votes")
    prefs_invitations: Literal["members", "admins"] | None = Field(
        default=None, alias="prefs_invitations", description="Who can invite people to the board"
    )
    prefs_voting: Visibility | None = Field(default=None, alias="prefs_voting", description="Who can vote on this board")
    prefs_comments: Visibility | None = Field(
        default=None, alias="prefs_comments", description="Who can comment on cards"
    )
    prefs_background: str | None = Field(
        default=None, alias="prefs_background", description="Background color or image"
    )
    prefs_card_aging: Literal["regular", "pirate"] | None = Field(
        default=None, alias="prefs_cardAging", description="Card aging style"
    )
    label_names_green: str | None = Field(default=None, alias="labelNames_green", description="Name for the green label")
    label_names_yellow: str | None = Field(default=None, alias="labelNames_yellow", description="Name for the yellow label")
    label_names_orange: str | None = Field(default=None, alias="labelNames_orange", description="Name for the orange label")
    label_names_red: str | None = Field(default=None, alias="labelNames_red", description="Name for the red label")
    label_names_purple: str | None = Field(default=None, alias="labelNames_purple", description="Name for the purple label")
    label_names_blue: str | None = Field(default=None, alias="labelNames_blue", description="Name for the blue label")


class DeleteBoardArguments(ConfirmedArguments):
    board_id: str = Field(description="ID of the board to delete")


class GetBoardListsArguments(BoardIdArguments):
    filter: ListFilter = Field(default="open", description="Filter lists by status (default: open)")


async def handle_get_boards(services: TrelloServices, args: GetBoardsArguments) -> Any:
    """Handle get_boards tool call."""
    return await services.boards.get_boards(filter=args.filter, fields=args.fields)


async def handle_get_board(services: TrelloServices, args: GetBoardArguments) -> Any:
    """Handle get_board tool call."""
    return await services.boards.get_board(args.board_id, fields=args.fields)


async def handle_create_board(services: TrelloServices, args: CreateBoardArguments) -> Any:
    """Handle create_board tool call."""
    return await services.boards.create_board(args.payload())


def _nested_board_fields(data: dict) -> dict:
    """PUT /boards takes nested fields as prefs/x and labelNames/x."""
    nested = {}
    for key, value in data.items():
        prefix, _, rest = key.partition("_")
        if rest and prefix in ("prefs", "labelNames"):
            key = f"{prefix}/{rest}"
        nested[key] = value
    return nested


async def handle_update_board(services: TrelloServices, args: UpdateBoardArguments) -> Any:
    """Handle update_board tool call."""
    return await services.boards.update_board(args.board_id, _nested_board_fields(args.payload("board_id")))


async def handle_delete_board(services: TrelloServices, args: DeleteBoardArguments) -> Any:
    """Handle delete_board tool call."""
    args.require_confirmation()
    await services.boards.delete_board(args.board_id)
    return success("Board deleted successfully")


async def handle_get_board_lists(services: TrelloServices, args: GetBoardListsArguments) -> Any:
    """Handle get_board_lists tool call."""
    return await services.boards.get_lists(args.board_id, args.filter)


async def handle_close_board(services: TrelloServices, args: BoardIdArguments) -> Any:
    """Handle close_board tool call."""
    return await services.boards.close_board(args.board_id)


async def handle_reopen_board(services: TrelloServices, args: BoardIdArguments) -> Any:
    """Handle reopen_board tool call."""
    return await services.boards.reopen_board(args.board_id)


TOOLS = [
    define_tool(
        "get_boards",
        "Retrieve the boards of the authenticated user. Use this to get an overview of available "
        "boards or to narrow them down with a filter.",
        GetBoardsArguments,
        handle_get_boards,
    ),
    define_tool(
        "get_board",
        "Retrieve detailed information about a specific board by ID.",
        GetBoardArguments,
        handle_get_board,
    ),
    define_tool(
        "create_board",
        "Create a new board, optionally copying an existing one and setting its preferences.",
        CreateBoardArguments,
        handle_create_board,
    ),
    define_tool(
        "update_board",
        "Update an existing board: name, description, preferences or label names.",
        UpdateBoardArguments,
        handle_update_board,
    ),
    define_tool(
        "delete_board",
        "Permanently delete a board. Deletion cannot be undone and requires confirm: true.",
        DeleteBoardArguments,
        handle_delete_board,
    ),
    define_tool(
        "get_board_lists",
        "Get the lists on a board to see its structure.",
        GetBoardListsArguments,
        handle_get_board_lists,
    ),
    define_tool(
        "close_board",
        "Close (archive) a board without deleting it.",
        BoardIdArguments,
        handle_close_board,
    ),
    define_tool(
        "reopen_board",
        "Reopen a previously closed board.",
        BoardIdArguments,
        handle_reopen_board,
    ),
]
