"""
Label adapter — board labels and their assignment to cards.
"""

from typing import Any

from services.gateway import TrelloGateway


class LabelService:
    def __init__(self, gateway: TrelloGateway) -> None:
        self.gateway = gateway

    async def get_label(self, label_id: str) -> dict:
        return await self.gateway.get(f"/labels/{label_id}")

    async def create_label(self, board_id: str, name: str, color: str | None) -> dict:
        return await self.gateway.post("/labels", {"idBoard": board_id, "name": name, "color": color})

    async def update_label(self, label_id: str, data: dict[str, Any]) -> dict:
        return await self.gateway.put(f"/labels/{label_id}", data)

    async def delete_label(self, label_id: str) -> None:
        await self.gateway.delete(f"/labels/{label_id}")

    async def get_board_labels(self, board_id: str) -> list[dict]:
        return await self.gateway.get(f"/boards/{board_id}/labels")

    async def update_name(self, label_id: str, name: str) -> dict:
        return await self.gateway.put(f"/labels/{label_id}/name", {"value": name})

    async def update_color(self, label_id: str, color: str | None) -> dict:
        return await self.gateway.put(f"/labels/{label_id}/color", {"value": color})

    async def create_label_on_card(self, card_id: str, name: str, color: str | None) -> dict:
        return await self.gateway.post(f"/cards/{card_id}/labels", {"name": name, "color": color})

    async def get_card_labels(self, card_id: str) -> list[dict]:
        return await self.gateway.get(f"/cards/{card_id}/labels")

    async def add_label_to_card(self, card_id: str, label_id: str) -> Any:
        return await self.gateway.post(f"/cards/{card_id}/idLabels", {"value": label_id})

    async def remove_label_from_card(self, card_id: str, label_id: str) -> Any:
        return await self.gateway.delete(f"/cards/{card_id}/idLabels/{label_id}")
