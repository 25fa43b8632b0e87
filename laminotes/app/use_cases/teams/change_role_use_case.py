"""
Change Member Role Use Case

Handles changing a member's role within a team.
"""

import logging

from laminotes.app.services import team_roster
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.domain.errors import NotFound

from ._shared import member_response, parse_role
from .dtos import MemberResponse

logger = logging.getLogger(__name__)


class ChangeRoleUseCase:
    """
    Use case for changing a member's role within a team.

    Business Rules:
    - Only active owners can change roles
    - The team owner cannot be demoted
    - Target user must be a member
    - Role must be a valid TeamRole value
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: str, team_id: str, target_user_id: str, new_role
    ) -> MemberResponse:
        """
        Execute change role use case.

        Args:
            actor_user_id: User ID of the owner making the change
            team_id: Team ID
            target_user_id: User ID whose role is being changed
            new_role: New role to assign (0 viewer, 1 contributor, 2 owner)

        Returns:
            MemberResponse DTO with the updated membership
        """
        team_role = parse_role(new_role)

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
                raise NotFound("User is not a member of this team")

            old_role = target.role
            updated = team_roster.change_role(team, actor, target, team_role)
            await self.uow.memberships.update(updated)

            await self.uow.commit()

        logger.info(
            f"Role of {target_user_id} in team {team_id} changed "
            f"from {old_role.name} to {team_role.name} by {actor_user_id}"
        )

        return member_response(updated)
