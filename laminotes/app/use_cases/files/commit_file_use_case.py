"""
Commit File Use Case

Stamps a file write on its metadata, creating the metadata on first write.
"""

import logging
from typing import Optional

from laminotes.app.services import file_versioning, permission_engine
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.domain import codec
from laminotes.domain.entities import Action
from laminotes.domain.errors import MalformedInput

from .dtos import CommitFileResponse

logger = logging.getLogger(__name__)


class CommitFileUseCase:
    """
    Use case for recording a write to a stored file.

    Business Rules:
    - Personal files (no team) belong to the writer and are scoped to them,
      so two users may each own a file of the same name
    - Team files are shared by the team and need an active contributor (or
      owner) membership
    - First write creates metadata with a fresh fileId
    - lastModified strictly increases on every write
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, file_name: str, team_id: Optional[str] = None
    ) -> CommitFileResponse:
        if not file_name or not file_name.strip():
            raise MalformedInput("fileName", "File name must not be blank")

        async with self.uow:
            if team_id is not None:
                member = await self.uow.memberships.get_by_user_and_team(user_id, team_id)
                permission_engine.require(member, Action.edit)

            existing = await self.uow.files.get_by_name(file_name, user_id, team_id)
            if existing is None:
                file_metadata = file_versioning.create_file_metadata(file_name, team_id)
                await self.uow.files.create(file_metadata, user_id)
            else:
                file_metadata = file_versioning.touch(existing)
                await self.uow.files.update(file_metadata)

            await self.uow.commit()

        logger.info(f"File {file_name} committed by {user_id}")

        return CommitFileResponse(
            file_metadata=codec.encode(file_metadata), created=existing is None
        )
