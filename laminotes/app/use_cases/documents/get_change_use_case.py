"""
Get Change Use Case

Looks up one entry of a document's history.
"""

from laminotes.app.services import change_tracker, permission_engine
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.config import ApplicationConfig
from laminotes.domain import codec
from laminotes.domain.entities import Action
from laminotes.domain.errors import NotFound

from .dtos import ChangeResponse


class GetChangeUseCase:
    """
    Use case for reading the change at a position in application order.

    Business Rules:
    - Same visibility as the document itself
    - Positions outside the history fail with IndexOutOfRange
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, team_id: str, document_id: str, index: int
    ) -> ChangeResponse:
        async with self.uow:
            member = await self.uow.memberships.get_by_user_and_team(user_id, team_id)
            permission_engine.require(
                member, Action.view, is_public=ApplicationConfig.PUBLIC_DOCUMENTS
            )

            metadata = await self.uow.documents.get_by_team_and_id(team_id, document_id)
            if metadata is None:
                raise NotFound(f"Document {document_id} not found")

        change = change_tracker.history(metadata, index)
        return ChangeResponse(
            document_id=document_id, position=index, change=codec.encode(change)
        )
