"""
Trello services — the request gateway and one adapter per resource type.

`TrelloServices` is built once at start-up and handed to every tool handler.
"""

from dataclasses import dataclass

from services.boards import BoardService
from services.cards import CardService
from services.checklists import ChecklistService
from services.gateway import TrelloGateway
from services.labels import LabelService
from services.lists import ListService
from services.members import MemberService


@dataclass
class TrelloServices:
    gateway: TrelloGateway
    boards: BoardService
    lists: ListService
    cards: CardService
    members: MemberService
    labels: LabelService
    checklists: ChecklistService

    @classmethod
    def from_gateway(cls, gateway: TrelloGateway) -> "TrelloServices":
        """Wire every adapter to a shared gateway."""
        return cls(
            gateway=gateway,
            boards=BoardService(gateway),
            lists=ListService(gateway),
            cards=CardService(gateway),
            members=MemberService(gateway),
            labels=LabelService(gateway),
            checklists=ChecklistService(gateway),
        )

    async def aclose(self) -> None:
        await self.gateway.aclose()
