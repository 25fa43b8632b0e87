"""
Apply Change Use Case

Validates, authorizes and appends one collaborator's change set.
"""

import logging
from typing import Any, Mapping, Optional, Union

from laminotes.app.services import change_tracker, permission_engine
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.domain import codec
from laminotes.domain.base import format_timestamp
from laminotes.domain.entities import Action, DocumentChange
from laminotes.domain.errors import PermissionDenied

from ._shared import parse_version_token
from .dtos import ApplyChangeResponse

logger = logging.getLogger(__name__)


class ApplyChangeUseCase:
    """
    Use case for applying an incoming edit to a team document.

    Business Rules:
    - Payload is decoded by the metadata codec (MalformedInput on failure)
    - The change must be authored by the requesting user
    - Requester needs an active contributor (or owner) membership
    - The writer presents the lastModified it last read; a mismatch fails
      with StaleWrite and the writer must re-read and retry
    - A document seen for the first time is created from its first change
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: str,
        team_id: str,
        document_id: str,
        raw_change: Union[Mapping[str, Any], str, bytes],
        expected_last_modified: Optional[str] = None,
    ) -> ApplyChangeResponse:
        """
        Execute apply change use case.

        Args:
            user_id: Requesting user
            team_id: Team owning the document
            document_id: Target document
            raw_change: DocumentChange payload (JSON object or text)
            expected_last_modified: Version token the writer last read

        Returns:
            ApplyChangeResponse DTO

        Raises:
            MalformedInput, PermissionDenied, StaleWrite, InvalidChange
        """
        change = codec.decode(DocumentChange, raw_change)
        expected = parse_version_token(expected_last_modified)

        if change.user_id != user_id:
            raise PermissionDenied("Changes can only be submitted by their author")

        async with self.uow:
            member = await self.uow.memberships.get_by_user_and_team(user_id, team_id)
            permission_engine.require(member, Action.edit)

            metadata = await self.uow.documents.get_by_team_and_id(team_id, document_id)
            created = metadata is None
            if created:
                metadata = change_tracker.new_document(
                    document_id, created_at=change.timestamp
                )

            updated = change_tracker.append_change(
                metadata, change, expected_last_modified=expected
            )

            if created:
                await self.uow.documents.create(team_id, updated)
            else:
                await self.uow.documents.update(team_id, updated)

            await self.uow.commit()

        logger.info(
            f"Applied change by {user_id} to document {document_id} "
            f"({len(change.sections)} sections)"
        )

        return ApplyChangeResponse(
            document_id=document_id,
            last_modified=format_timestamp(updated.last_modified),
            change_count=len(updated.changes),
            user_color=updated.user_colors[user_id],
            created=created,
        )
