"""
Board adapter — boards and the boards visible to a member or organization.
"""

from typing import Any

from services.gateway import TrelloGateway


class BoardService:
    def __init__(self, gateway: TrelloGateway) -> None:
        self.gateway = gateway

    async def get_boards(self, filter: str | None = None, fields: list[str] | None = None) -> list[dict]:
        """Boards of the authenticated member."""
        return await self.gateway.get("/members/me/boards", {"filter": filter, "fields": fields})

    async def get_board(self, board_id: str, fields: list[str] | None = None) -> dict:
        return await self.gateway.get(f"/boards/{board_id}", {"fields": fields})

    async def create_board(self, data: dict[str, Any]) -> dict:
        return await self.gateway.post("/boards", data)

    async def update_board(self, board_id: str, data: dict[str, Any]) -> dict:
        return await self.gateway.put(f"/boards/{board_id}", data)

    async def delete_board(self, board_id: str) -> None:
        await self.gateway.delete(f"/boards/{board_id}")

    async def get_lists(self, board_id: str, filter: str = "open") -> list[dict]:
        return await self.gateway.get(f"/boards/{board_id}/lists", {"filter": filter})

    async def close_board(self, board_id: str) -> dict:
        return await self.update_board(board_id, {"closed": True})

    async def reopen_board(self, board_id: str) -> dict:
        return await self.update_board(board_id, {"closed": False})

    async def get_organization_boards(
        self, organization_id: str, filter: str | None = None, fields: list[str] | None = None
    ) -> list[dict]:
        return await self.gateway.get(
            f"/organizations/{organization_id}/boards", {"filter": filter, "fields": fields}
        )

    async def get_starred_boards(self) -> list[dict]:
        return await self.gateway.get("/members/me/boards", {"filter": "starred"})
