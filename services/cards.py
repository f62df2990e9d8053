"""
Card adapter — cards, comments, attachments, members, labels and due dates.

archive/unarchive/move/set_due_* are narrowing wrappers over update_card;
each still issues exactly one request.
"""

from typing import Any

from services.gateway import TrelloGateway


class CardService:
    def __init__(self, gateway: TrelloGateway) -> None:
        self.gateway = gateway

    async def get_card(self, card_id: str, fields: list[str] | None = None) -> dict:
        return await self.gateway.get(f"/cards/{card_id}", {"fields": fields})

    async def create_card(self, data: dict[str, Any]) -> dict:
        return await self.gateway.post("/cards", data)

    async def update_card(self, card_id: str, data: dict[str, Any]) -> dict:
        return await self.gateway.put(f"/cards/{card_id}", data)

    async def delete_card(self, card_id: str) -> None:
        await self.gateway.delete(f"/cards/{card_id}")

    async def archive_card(self, card_id: str) -> dict:
        return await self.update_card(card_id, {"closed": True})

    async def unarchive_card(self, card_id: str) -> dict:
        return await self.update_card(card_id, {"closed": False})

    async def move_card_to_list(self, card_id: str, list_id: str) -> dict:
        return await self.update_card(card_id, {"idList": list_id})

    async def set_due_date(self, card_id: str, due: str | None) -> dict:
        """Set the due date (ISO 8601), or clear it with None."""
        return await self.update_card(card_id, {"due": due})

    async def set_due_complete(self, card_id: str, due_complete: bool) -> dict:
        return await self.update_card(card_id, {"dueComplete": due_complete})

    async def add_member(self, card_id: str, member_id: str) -> list[dict]:
        return await self.gateway.post(f"/cards/{card_id}/idMembers", {"value": member_id})

    async def remove_member(self, card_id: str, member_id: str) -> Any:
        return await self.gateway.delete(f"/cards/{card_id}/idMembers/{member_id}")

    async def add_comment(self, card_id: str, text: str) -> dict:
        return await self.gateway.post(f"/cards/{card_id}/actions/comments", {"text": text})

    async def get_comments(self, card_id: str) -> list[dict]:
        return await self.gateway.get(f"/cards/{card_id}/actions", {"filter": "commentCard"})

    async def get_attachments(self, card_id: str) -> list[dict]:
        return await self.gateway.get(f"/cards/{card_id}/attachments")

    async def add_attachment(self, card_id: str, url: str, name: str | None = None) -> dict:
        body = {"url": url}
        if name:
            body["name"] = name
        return await self.gateway.post(f"/cards/{card_id}/attachments", body)

    async def delete_attachment(self, card_id: str, attachment_id: str) -> None:
        await self.gateway.delete(f"/cards/{card_id}/attachments/{attachment_id}")

    async def get_checklists(self, card_id: str) -> list[dict]:
        return await self.gateway.get(f"/cards/{card_id}/checklists")

    async def add_checklist(self, card_id: str, name: str) -> dict:
        return await self.gateway.post(f"/cards/{card_id}/checklists", {"name": name})

    async def get_check_item(self, card_id: str, check_item_id: str) -> dict:
        return await self.gateway.get(f"/cards/{card_id}/checkItem/{check_item_id}")

    async def update_check_item_state(self, card_id: str, check_item_id: str, state: str) -> dict:
        return await self.gateway.put(f"/cards/{card_id}/checkItem/{check_item_id}", {"state": state})
