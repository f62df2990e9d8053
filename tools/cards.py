"""
Card tools — cards plus their comments, attachments, members, labels and due dates.
"""

from typing import Any, Literal

from pydantic import Field

from services import TrelloServices
from tools.base import ConfirmedArguments, LabelColor, Position, ToolArguments, define_tool, success


class CardIdArguments(ToolArguments):
    card_id: str = Field(description="ID of the card")


class GetCardArguments(CardIdArguments):
    fields: list[str] | None = Field(
        default=None, description="Specific fields to include in the response (default: all fields)"
    )


class CardCover(ToolArguments):
    color: LabelColor | None = Field(default=None, description="Cover color")
    brightness: Literal["dark", "light"] | None = Field(default=None, description="Cover brightness")
    url: str | None = Field(default=None, description="URL of an image to use as the cover")
    id_attachment: str | None = Field(default=None, description="ID of an attachment to use as the cover")
    size: Literal["normal", "full"] | None = Field(default=None, description="Cover size")


class CreateCardArguments(ToolArguments):
    name: str = Field(description="Name of the card")
    id_list: str = Field(description="ID of the list the card should be created in")
    desc: str | None = Field(default=None, description="Description of the card")
    pos: Position | None = Field(default=None, description="Position of the card (top, bottom, or a positive number)")
    due: str | None = Field(default=None, description="Due date (ISO 8601)")
    start: str | None = Field(default=None, description="Start date (ISO 8601)")
    due_complete: bool | None = Field(default=None, description="Whether the due date is complete")
    id_members: list[str] | None = Field(default=None, description="IDs of members to assign to the card")
    id_labels: list[str] | None = Field(default=None, description="IDs of labels to apply to the card")
    url_source: str | None = Field(default=None, description="URL to attach to the card")
    id_card_source: str | None = Field(default=None, description="ID of a card to copy")
    keep_from_source: str | None = Field(
        default=None, description="Properties to copy from the source card (all, or a comma-separated list)"
    )
    address: str | None = Field(default=None, description="Address for the card location")
    location_name: str | None = Field(default=None, description="Name of the card location")
    coordinates: str | None = Field(default=None, description="Coordinates of the card location (latitude,longitude)")


class UpdateCardArguments(CardIdArguments):
    name: str | None = Field(default=None, description="New name for the card")
    desc: str | None = Field(default=None, description="New description for the card")
    closed: bool | None = Field(default=None, description="Whether the card is closed (archived)")
    id_members: list[str] | None = Field(default=None, description="IDs of members assigned to the card")
    id_attachment_cover: str | None = Field(default=None, description="ID of the attachment to use as the cover")
    id_list: str | None = Field(default=None, description="ID of the list the card should be in")
    id_labels: list[str] | None = Field(default=None, description="IDs of labels applied to the card")
    id_board: str | None = Field(default=None, description="ID of the board the card should be on")
    pos: Position | None = Field(default=None, description="Position of the card (top, bottom, or a positive number)")
    due: str | None = Field(default=None, description="Due date (ISO 8601), or null to remove it")
    start: str | None = Field(default=None, description="Start date (ISO 8601), or null to remove it")
    due_complete: bool | None = Field(default=None, description="Whether the due date is complete")
    subscribed: bool | None = Field(default=None, description="Whether the authenticated user is subscribed")
    address: str | None = Field(default=None, description="Address for the card location")
    location_name: str | None = Field(default=None, description="Name of the card location")
    coordinates: str | None = Field(default=None, description="Coordinates of the card location (latitude,longitude)")
    cover: CardCover | None = Field(default=None, description="Cover settings for the card")


class DeleteCardArguments(ConfirmedArguments):
    card_id: str = Field(description="ID of the card to delete")


class MoveCardToListArguments(CardIdArguments):
    list_id: str = Field(description="ID of the destination list")


class AddCommentArguments(CardIdArguments):
    text: str = Field(description="Text of the comment")


class AddAttachmentArguments(CardIdArguments):
    url: str = Field(description="URL to attach")
    name: str | None = Field(default=None, description="Name of the attachment")


class DeleteAttachmentArguments(ConfirmedArguments):
    card_id: str = Field(description="ID of the card")
    attachment_id: str = Field(description="ID of the attachment to delete")


class CardMemberArguments(CardIdArguments):
    member_id: str = Field(description="ID of the member")


class CardLabelArguments(CardIdArguments):
    label_id: str = Field(description="ID of the label")


class SetDueDateArguments(CardIdArguments):
    due: str | None = Field(description="Due date (ISO 8601), or null to remove it")


class SetDueCompleteArguments(CardIdArguments):
    due_complete: bool = Field(description="Whether the due date is complete")


async def handle_get_card(services: TrelloServices, args: GetCardArguments) -> Any:
    """Handle get_card tool call."""
    return await services.cards.get_card(args.card_id, fields=args.fields)


async def handle_create_card(services: TrelloServices, args: CreateCardArguments) -> Any:
    """Handle create_card tool call."""
    return await services.cards.create_card(args.payload())


async def handle_update_card(services: TrelloServices, args: UpdateCardArguments) -> Any:
    """Handle update_card tool call."""
    return await services.cards.update_card(args.card_id, args.payload("card_id"))


async def handle_delete_card(services: TrelloServices, args: DeleteCardArguments) -> Any:
    """Handle delete_card tool call."""
    args.require_confirmation()
    await services.cards.delete_card(args.card_id)
    return success("Card deleted successfully")


async def handle_archive_card(services: TrelloServices, args: CardIdArguments) -> Any:
    """Handle archive_card tool call."""
    return await services.cards.archive_card(args.card_id)


async def handle_unarchive_card(services: TrelloServices, args: CardIdArguments) -> Any:
    """Handle unarchive_card tool call."""
    return await services.cards.unarchive_card(args.card_id)


async def handle_move_card_to_list(services: TrelloServices, args: MoveCardToListArguments) -> Any:
    """Handle move_card_to_list tool call."""
    return await services.cards.move_card_to_list(args.card_id, args.list_id)


async def handle_add_comment(services: TrelloServices, args: AddCommentArguments) -> Any:
    """Handle add_comment tool call."""
    return await services.cards.add_comment(args.card_id, args.text)


async def handle_get_comments(services: TrelloServices, args: CardIdArguments) -> Any:
    """Handle get_comments tool call."""
    return await services.cards.get_comments(args.card_id)


async def handle_add_attachment(services: TrelloServices, args: AddAttachmentArguments) -> Any:
    """Handle add_attachment tool call."""
    return await services.cards.add_attachment(args.card_id, args.url, args.name)


async def handle_get_attachments(services: TrelloServices, args: CardIdArguments) -> Any:
    """Handle get_attachments tool call."""
    return await services.cards.get_attachments(args.card_id)


async def handle_delete_attachment(services: TrelloServices, args: DeleteAttachmentArguments) -> Any:
    """Handle delete_attachment tool call."""
    args.require_confirmation()
    await services.cards.delete_attachment(args.card_id, args.attachment_id)
    return success("Attachment deleted successfully")


async def handle_add_member(services: TrelloServices, args: CardMemberArguments) -> Any:
    """Handle add_member tool call."""
    await services.cards.add_member(args.card_id, args.member_id)
    return success("Member added to card successfully")


async def handle_remove_member(services: TrelloServices, args: CardMemberArguments) -> Any:
    """Handle remove_member tool call."""
    await services.cards.remove_member(args.card_id, args.member_id)
    return success("Member removed from card successfully")


async def handle_add_label(services: TrelloServices, args: CardLabelArguments) -> Any:
    """Handle add_label tool call."""
    await services.labels.add_label_to_card(args.card_id, args.label_id)
    return success("Label added to card successfully")


async def handle_remove_label(services: TrelloServices, args: CardLabelArguments) -> Any:
    """Handle remove_label tool call."""
    await services.labels.remove_label_from_card(args.card_id, args.label_id)
    return success("Label removed from card successfully")


async def handle_set_due_date(services: TrelloServices, args: SetDueDateArguments) -> Any:
    """Handle set_due_date tool call."""
    return await services.cards.set_due_date(args.card_id, args.due)


async def handle_set_due_complete(services: TrelloServices, args: SetDueCompleteArguments) -> Any:
    """Handle set_due_complete tool call."""
    return await services.cards.set_due_complete(args.card_id, args.due_complete)


TOOLS = [
    define_tool(
        "get_card",
        "Retrieve detailed information about a specific card by ID.",
        GetCardArguments,
        handle_get_card,
    ),
    define_tool(
        "create_card",
        "Create a new card in a list, optionally copying an existing card.",
        CreateCardArguments,
        handle_create_card,
    ),
    define_tool(
        "update_card",
        "Update an existing card: name, description, list, members, labels, dates or cover.",
        UpdateCardArguments,
        handle_update_card,
    ),
    define_tool(
        "delete_card",
        "Permanently delete a card. Deletion cannot be undone and requires confirm: true.",
        DeleteCardArguments,
        handle_delete_card,
    ),
    define_tool(
        "archive_card",
        "Archive a card without deleting it.",
        CardIdArguments,
        handle_archive_card,
    ),
    define_tool(
        "unarchive_card",
        "Restore a previously archived card.",
        CardIdArguments,
        handle_unarchive_card,
    ),
    define_tool(
        "move_card_to_list",
        "Move a card to a different list.",
        MoveCardToListArguments,
        handle_move_card_to_list,
    ),
    define_tool(
        "add_comment",
        "Add a comment to a card.",
        AddCommentArguments,
        handle_add_comment,
    ),
    define_tool(
        "get_comments",
        "Get the comments on a card.",
        CardIdArguments,
        handle_get_comments,
    ),
    define_tool(
        "add_attachment",
        "Attach a URL to a card.",
        AddAttachmentArguments,
        handle_add_attachment,
    ),
    define_tool(
        "get_attachments",
        "Get the attachments on a card.",
        CardIdArguments,
        handle_get_attachments,
    ),
    define_tool(
        "delete_attachment",
        "Delete an attachment from a card. Requires confirm: true.",
        DeleteAttachmentArguments,
        handle_delete_attachment,
    ),
    define_tool(
        "add_member",
        "Assign a member to a card.",
        CardMemberArguments,
        handle_add_member,
    ),
    define_tool(
        "remove_member",
        "Remove a member from a card.",
        CardMemberArguments,
        handle_remove_member,
    ),
    define_tool(
        "add_label",
        "Apply an existing label to a card.",
        CardLabelArguments,
        handle_add_label,
    ),
    define_tool(
        "remove_label",
        "Remove a label from a card.",
        CardLabelArguments,
        handle_remove_label,
    ),
    define_tool(
        "set_due_date",
        "Set or clear the due date of a card.",
        SetDueDateArguments,
        handle_set_due_date,
    ),
    define_tool(
        "set_due_complete",
        "Mark the due date of a card as complete or incomplete.",
        SetDueCompleteArguments,
        handle_set_due_complete,
    ),
]
