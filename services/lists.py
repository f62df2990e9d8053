"""
List adapter — lists, their cards, and single-field list updates.
"""

from typing import Any

from services.gateway import TrelloGateway


class ListService:
    def __init__(self, gateway: TrelloGateway) -> None:
        self.gateway = gateway

    async def get_list(self, list_id: str, fields: list[str] | None = None) -> dict:
        return await self.gateway.get(f"/lists/{list_id}", {"fields": fields})

    async def create_list(self, data: dict[str, Any]) -> dict:
        return await self.gateway.post("/lists", data)

    async def update_list(self, list_id: str, data: dict[str, Any]) -> dict:
        return await self.gateway.put(f"/lists/{list_id}", data)

    async def archive_list(self, list_id: str) -> dict:
        return await self.gateway.put(f"/lists/{list_id}/closed", {"value": True})

    async def unarchive_list(self, list_id: str) -> dict:
        return await self.gateway.put(f"/lists/{list_id}/closed", {"value": False})

    async def move_list_to_board(self, list_id: str, board_id: str) -> dict:
        return await self.gateway.put(f"/lists/{list_id}/idBoard", {"value": board_id})

    async def get_cards(self, list_id: str, filter: str = "open") -> list[dict]:
        return await self.gateway.get(f"/lists/{list_id}/cards", {"filter": filter})

    async def archive_all_cards(self, list_id: str) -> None:
        await self.gateway.post(f"/lists/{list_id}/archiveAllCards")

    async def move_all_cards(self, source_list_id: str, destination_list_id: str, board_id: str) -> None:
        """Move every card of a list; Trello requires the destination board ID."""
        await self.gateway.post(
            f"/lists/{source_list_id}/moveAllCards",
            {"idBoard": board_id, "idList": destination_list_id},
        )

    async def update_position(self, list_id: str, position: str | float) -> dict:
        return await self.gateway.put(f"/lists/{list_id}/pos", {"value": position})

    async def update_name(self, list_id: str, name: str) -> dict:
        return await self.gateway.put(f"/lists/{list_id}/name", {"value": name})

    async def update_subscribed(self, list_id: str, subscribed: bool) -> dict:
        return await self.gateway.put(f"/lists/{list_id}/subscribed", {"value": subscribed})
