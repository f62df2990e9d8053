"""
Checklist adapter — checklists and their check items.
"""

from typing import Any

from services.gateway import TrelloGateway


class ChecklistService:
    def __init__(self, gateway: TrelloGateway) -> None:
        self.gateway = gateway

    async def get_checklist(self, checklist_id: str) -> dict:
        return await self.gateway.get(f"/checklists/{checklist_id}")

    async def create_checklist(
        self,
        card_id: str,
        name: str,
        pos: str | float | None = None,
        id_checklist_source: str | None = None,
    ) -> dict:
        data: dict[str, Any] = {"idCard": card_id, "name": name}
        if pos is not None:
            data["pos"] = pos
        if id_checklist_source:
            data["idChecklistSource"] = id_checklist_source
        return await self.gateway.post("/checklists", data)

    async def update_checklist(self, checklist_id: str, data: dict[str, Any]) -> dict:
        return await self.gateway.put(f"/checklists/{checklist_id}", data)

    async def delete_checklist(self, checklist_id: str) -> None:
        await self.gateway.delete(f"/checklists/{checklist_id}")

    async def get_check_items(self, checklist_id: str) -> list[dict]:
        return await self.gateway.get(f"/checklists/{checklist_id}/checkItems")

    async def create_check_item(
        self,
        checklist_id: str,
        name: str,
        pos: str | float | None = None,
        checked: bool | None = None,
        due: str | None = None,
        member_id: str | None = None,
    ) -> dict:
        data: dict[str, Any] = {"name": name}
        if pos is not None:
            data["pos"] = pos
        if checked is not None:
            data["checked"] = checked
        if due:
            data["due"] = due
        if member_id:
            data["idMember"] = member_id
        return await self.gateway.post(f"/checklists/{checklist_id}/checkItems", data)

    async def get_check_item(self, checklist_id: str, check_item_id: str) -> dict:
        return await self.gateway.get(f"/checklists/{checklist_id}/checkItems/{check_item_id}")

    async def update_check_item(self, checklist_id: str, check_item_id: str, data: dict[str, Any]) -> dict:
        return await self.gateway.put(f"/checklists/{checklist_id}/checkItems/{check_item_id}", data)

    async def delete_check_item(self, checklist_id: str, check_item_id: str) -> None:
        await self.gateway.delete(f"/checklists/{checklist_id}/checkItems/{check_item_id}")

    async def update_name(self, checklist_id: str, name: str) -> dict:
        return await self.gateway.put(f"/checklists/{checklist_id}/name", {"value": name})

    async def update_position(self, checklist_id: str, pos: str | float) -> dict:
        return await self.gateway.put(f"/checklists/{checklist_id}/pos", {"value": pos})

    async def get_board(self, checklist_id: str) -> dict:
        return await self.gateway.get(f"/checklists/{checklist_id}/board")

    async def get_card(self, checklist_id: str) -> list[dict]:
        return await self.gateway.get(f"/checklists/{checklist_id}/cards")

    async def update_check_item_state_on_card(self, card_id: str, check_item_id: str, state: str) -> dict:
        return await self.gateway.put(f"/cards/{card_id}/checkItem/{check_item_id}", {"state": state})
