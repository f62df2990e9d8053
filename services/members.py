"""
Member adapter — members, their boards/cards/organizations and notifications.
"""

from typing import Any

from services.errors import TrelloError
from services.gateway import TrelloGateway

MAX_NOTIFICATIONS = 1000
MAX_MEMBER_SEARCH_RESULTS = 20


class MemberService:
    def __init__(self, gateway: TrelloGateway) -> None:
        self.gateway = gateway

    async def get_me(self, fields: list[str] | None = None) -> dict:
        return await self.gateway.get("/members/me", {"fields": fields})

    async def get_member(self, member_id_or_username: str, fields: list[str] | None = None) -> dict:
        return await self.gateway.get(f"/members/{member_id_or_username}", {"fields": fields})

    async def get_member_boards(self, member_id_or_username: str, filter: str = "all") -> list[dict]:
        return await self.gateway.get(f"/members/{member_id_or_username}/boards", {"filter": filter})

    async def get_member_cards(self, member_id_or_username: str) -> list[dict]:
        return await self.gateway.get(f"/members/{member_id_or_username}/cards")

    async def get_boards_invited(self, member_id_or_username: str) -> list[dict]:
        return await self.gateway.get(f"/members/{member_id_or_username}/boardsInvited")

    async def get_member_organizations(self, member_id_or_username: str) -> list[dict]:
        return await self.gateway.get(f"/members/{member_id_or_username}/organizations")

    async def get_notifications(
        self, filter: str | None = None, read_filter: str = "all", limit: int = 50
    ) -> list[dict]:
        return await self.gateway.get(
            "/members/me/notifications",
            {"filter": filter, "read_filter": read_filter, "limit": min(limit, MAX_NOTIFICATIONS)},
        )

    async def update_me(self, data: dict[str, Any]) -> dict:
        return await self.gateway.put("/members/me", data)

    async def get_avatar(self, size: int | str = "original") -> str:
        """
        URL of the authenticated member's avatar.

        Trello serves fixed sizes (30, 50, 170) as {avatarUrl}/{size}.png.

        Raises:
            TrelloError: If the member has no avatar.
        """
        me = await self.get_me()
        avatar_url = me.get("avatarUrl") if me else None
        if not avatar_url:
            raise TrelloError("Member does not have an avatar")
        if size == "original":
            return avatar_url
        return f"{avatar_url}/{size}.png"

    async def search_members(self, query: str, limit: int = 8) -> list[dict]:
        return await self.gateway.get(
            "/search/members", {"query": query, "limit": min(limit, MAX_MEMBER_SEARCH_RESULTS)}
        )

    async def get_board_members(self, board_id: str) -> list[dict]:
        return await self.gateway.get(f"/boards/{board_id}/members")

    async def get_organization_members(self, organization_id: str) -> list[dict]:
        return await self.gateway.get(f"/organizations/{organization_id}/members")

    async def get_card_members(self, card_id: str) -> list[dict]:
        return await self.gateway.get(f"/cards/{card_id}/members")
