"""
Get Document Use Case

Materializes the merged content of a team document.
"""

from laminotes.app.services import change_tracker, permission_engine
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.config import ApplicationConfig
from laminotes.domain.base import format_timestamp
from laminotes.domain.entities import Action
from laminotes.domain.errors import NotFound

from .dtos import ConflictInfo, DocumentResponse


class GetDocumentUseCase:
    """
    Use case for reading the current content of a document.

    Business Rules:
    - Any active member may view; non-members only when documents are public
    - Content is replayed from the full history under the configured
      conflict policy, and the overlapping edits are reported alongside
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, team_id: str, document_id: str
    ) -> DocumentResponse:
        async with self.uow:
            member = await self.uow.memberships.get_by_user_and_team(user_id, team_id)
            permission_engine.require(
                member, Action.view, is_public=ApplicationConfig.PUBLIC_DOCUMENTS
            )

            metadata = await self.uow.documents.get_by_team_and_id(team_id, document_id)
            if metadata is None:
                raise NotFound(f"Document {document_id} not found")

        policy = change_tracker.get_policy()
        conflicts = change_tracker.find_conflicts(metadata, policy)

        return DocumentResponse(
            document_id=metadata.document_id,
            content=change_tracker.materialize(metadata, policy),
            last_modified=format_timestamp(metadata.last_modified),
            user_colors=dict(metadata.user_colors),
            change_count=len(metadata.changes),
            conflicts=[
                ConflictInfo(
                    start_index=c.start_index,
                    end_index=c.end_index,
                    winner_user_id=c.winner_user_id,
                    loser_user_id=c.loser_user_id,
                )
                for c in conflicts
            ],
        )
