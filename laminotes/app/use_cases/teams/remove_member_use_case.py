"""
Remove Member from Team Use Case

Handles removing members from a team.
"""

import logging

from laminotes.app.services import team_roster
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.domain.errors import NotFound

from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing members from a team.

    Business Rules:
    - Only active owners can remove members
    - The team owner cannot be removed
    - Target user must be a member
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: str, team_id: str, target_user_id: str
    ) -> RemoveMemberResponse:
        """
        Execute remove member use case.

        Args:
            actor_user_id: User ID of the person removing the member
            team_id: Team ID
            target_user_id: User ID of the member to remove

        Returns:
            RemoveMemberResponse DTO
        """
        async with self.uow:
            team = await self.uow.teams.get_by_id(team_id)
            if team is None:
                raise NotFound(f"Team {team_id} not found")

            actor = await self.uow.memberships.get_by_user_and_team(
                actor_user_id, team_id
            )
            target = await self.uow.memberships.get_by_user_and_team(
                target_user_id, team_id
            )
            if target is None:
                raise NotFound("Target user is not a member of this team")

            team_roster.check_removal(team, actor, target)
            await self.uow.memberships.delete(target)

            await self.uow.commit()

        logger.info(f"Member {target_user_id} removed from team {team_id} by {actor_user_id}")

        return RemoveMemberResponse(status="removed")
