"""
Create Team Use Case

Creates a team and its owner membership.
"""

import logging
from typing import Optional

from laminotes.app.services import team_roster
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.domain.base import format_timestamp
from laminotes.domain.errors import MalformedInput, NotFound

from .dtos import TeamResponse

logger = logging.getLogger(__name__)


class CreateTeamUseCase:
    """
    Use case for creating a team.

    Business Rules:
    - The creator becomes owner_id and gets an owner membership row
    - Team name must not be blank
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, owner_user_id: str, name: str, local_directory: Optional[str] = None
    ) -> TeamResponse:
        if not name or not name.strip():
            raise MalformedInput("name", "Team name must not be blank")

        async with self.uow:
            owner = await self.uow.users.get_by_id(owner_user_id)
            if owner is None:
                raise NotFound(f"User {owner_user_id} not found")

            team, owner_member = team_roster.create_team(
                name.strip(), owner, local_directory=local_directory
            )

            await self.uow.teams.create(team)
            await self.uow.memberships.create(owner_member)

            await self.uow.commit()

        logger.info(f"Team {team.id} created by {owner_user_id}")

        return TeamResponse(
            id=team.id,
            name=team.name,
            owner_id=team.owner_id,
            created_at=format_timestamp(team.created_at),
            role=int(owner_member.role),
        )
