"""
Member tools — the authenticated user, other members, notifications and membership listings.
"""

from typing import Any, Literal

from pydantic import Field

from services import TrelloServices
from tools.base import ToolArguments, define_tool

MemberBoardFilter = Literal["all", "closed", "members", "open", "organization", "public", "starred"]

FIELDS_DESCRIPTION = "Specific fields to include in the response (default: all fields)"


class GetMeArguments(ToolArguments):
    fields: list[str] | None = Field(default=None, description=FIELDS_DESCRIPTION)


class MemberArguments(ToolArguments):
    member_id_or_username: str = Field(description="ID or username of the member")


class GetMemberArguments(MemberArguments):
    fields: list[str] | None = Field(default=None, description=FIELDS_DESCRIPTION)


class GetMemberBoardsArguments(MemberArguments):
    filter: MemberBoardFilter = Field(default="all", description="Filter boards by status or membership (default: all)")


class GetNotificationsArguments(ToolArguments):
    filter: str | None = Field(default=None, description="Comma-separated notification types to include")
    read_filter: Literal["all", "read", "unread"] = Field(
        default="all", description="Filter by read status (default: all)"
    )
    limit: int = Field(
        default=50, ge=1, description="Maximum number of notifications to return (max 1000, default: 50)"
    )


class MemberPrefs(ToolArguments):
    color_blind: bool | None = Field(default=None, description="Whether color-blind friendly mode is enabled")
    locale: str | None = Field(default=None, description="Locale of the member")
    minutes_between_summaries: int | None = Field(
        default=None, description="Minutes between summary emails (-1 to disable, 1 or 60)"
    )


class UpdateMeArguments(ToolArguments):
    full_name: str | None = Field(default=None, description="Full name of the member")
    initials: str | None = Field(default=None, description="Initials of the member (1-4 characters)")
    username: str | None = Field(default=None, description="Username of the member")
    bio: str | None = Field(default=None, description="Bio of the member")
    avatar_source: Literal["gravatar", "upload", "none"] | None = Field(
        default=None, description="Source of the member's avatar"
    )
    prefs: MemberPrefs | None = Field(default=None, description="Member preferences")


class GetAvatarArguments(ToolArguments):
    size: Literal[30, 50, 170, "original"] = Field(
        default="original", description="Size of the avatar (30, 50, 170, or original) (default: original)"
    )


class SearchMembersArguments(ToolArguments):
    query: str = Field(description="Search query")
    limit: int = Field(default=8, ge=1, description="Maximum number of results to return (max 20, default: 8)")


class BoardMembersArguments(ToolArguments):
    board_id: str = Field(description="ID of the board")


class OrganizationMembersArguments(ToolArguments):
    organization_id: str = Field(description="ID of the organization")


class CardMembersArguments(ToolArguments):
    card_id: str = Field(description="ID of the card")


async def handle_get_me(services: TrelloServices, args: GetMeArguments) -> Any:
    """Handle get_me tool call."""
    return await services.members.get_me(fields=args.fields)


async def handle_get_member(services: TrelloServices, args: GetMemberArguments) -> Any:
    """Handle get_member tool call."""
    return await services.members.get_member(args.member_id_or_username, fields=args.fields)


async def handle_get_member_boards(services: TrelloServices, args: GetMemberBoardsArguments) -> Any:
    """Handle get_member_boards tool call."""
    return await services.members.get_member_boards(args.member_id_or_username, args.filter)


async def handle_get_member_cards(services: TrelloServices, args: MemberArguments) -> Any:
    """Handle get_member_cards tool call."""
    return await services.members.get_member_cards(args.member_id_or_username)


async def handle_get_boards_invited(services: TrelloServices, args: MemberArguments) -> Any:
    """Handle get_boards_invited tool call."""
    return await services.members.get_boards_invited(args.member_id_or_username)


async def handle_get_member_organizations(services: TrelloServices, args: MemberArguments) -> Any:
    """Handle get_member_organizations tool call."""
    return await services.members.get_member_organizations(args.member_id_or_username)


async def handle_get_notifications(services: TrelloServices, args: GetNotificationsArguments) -> Any:
    """Handle get_notifications tool call."""
    return await services.members.get_notifications(args.filter, args.read_filter, args.limit)


async def handle_update_me(services: TrelloServices, args: UpdateMeArguments) -> Any:
    """Handle update_me tool call."""
    data = args.payload()
    # PUT /members/me takes preferences as prefs/<name>
    for name, value in data.pop("prefs", {}).items():
        data[f"prefs/{name}"] = value
    return await services.members.update_me(data)


async def handle_get_avatar(services: TrelloServices, args: GetAvatarArguments) -> Any:
    """Handle get_avatar tool call."""
    return {"avatarUrl": await services.members.get_avatar(args.size)}


async def handle_search_members(services: TrelloServices, args: SearchMembersArguments) -> Any:
    """Handle search_members tool call."""
    return await services.members.search_members(args.query, args.limit)


async def handle_get_board_members(services: TrelloServices, args: BoardMembersArguments) -> Any:
    """Handle get_board_members tool call."""
    return await services.members.get_board_members(args.board_id)


async def handle_get_organization_members(services: TrelloServices, args: OrganizationMembersArguments) -> Any:
    """Handle get_organization_members tool call."""
    return await services.members.get_organization_members(args.organization_id)


async def handle_get_card_members(services: TrelloServices, args: CardMembersArguments) -> Any:
    """Handle get_card_members tool call."""
    return await services.members.get_card_members(args.card_id)


TOOLS = [
    define_tool(
        "get_me",
        "Retrieve information about the authenticated user.",
        GetMeArguments,
        handle_get_me,
    ),
    define_tool(
        "get_member",
        "Retrieve information about a member by ID or username.",
        GetMemberArguments,
        handle_get_member,
    ),
    define_tool(
        "get_member_boards",
        "Get the boards a member belongs to.",
        GetMemberBoardsArguments,
        handle_get_member_boards,
    ),
    define_tool(
        "get_member_cards",
        "Get the cards a member is assigned to.",
        MemberArguments,
        handle_get_member_cards,
    ),
    define_tool(
        "get_boards_invited",
        "Get the boards a member has been invited to.",
        MemberArguments,
        handle_get_boards_invited,
    ),
    define_tool(
        "get_member_organizations",
        "Get the organizations (workspaces) a member belongs to.",
        MemberArguments,
        handle_get_member_organizations,
    ),
    define_tool(
        "get_notifications",
        "Get notifications for the authenticated user.",
        GetNotificationsArguments,
        handle_get_notifications,
    ),
    define_tool(
        "update_me",
        "Update the authenticated user's profile and preferences.",
        UpdateMeArguments,
        handle_update_me,
    ),
    define_tool(
        "get_avatar",
        "Get the avatar URL of the authenticated user.",
        GetAvatarArguments,
        handle_get_avatar,
    ),
    define_tool(
        "search_members",
        "Search for members by name, username or email.",
        SearchMembersArguments,
        handle_search_members,
    ),
    define_tool(
        "get_board_members",
        "Get the members of a board.",
        BoardMembersArguments,
        handle_get_board_members,
    ),
    define_tool(
        "get_organization_members",
        "Get the members of an organization (workspace).",
        OrganizationMembersArguments,
        handle_get_organization_members,
    ),
    define_tool(
        "get_card_members",
        "Get the members assigned to a card.",
        CardMembersArguments,
        handle_get_card_members,
    ),
]
