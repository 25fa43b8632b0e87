"""
My Teams Use Cases

Reads of the current user's own memberships: every team they belong to, and
their role in one team.
"""

import logging

from laminotes.app.services import permission_engine
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.domain.base import format_timestamp
from laminotes.domain.errors import NotFound

from ._shared import member_response
from .dtos import MyRoleResponse, MyTeamResponse, MyTeamsResponse

logger = logging.getLogger(__name__)


class ListMyTeamsUseCase:
    """
    Use case for listing the teams the current user belongs to.

    Business Rules:
    - Every membership row is listed, including ones whose access has
      expired; ``active`` tells them apart
    - Each entry carries the caller's own role in that team
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> MyTeamsResponse:
        async with self.uow:
            memberships = await self.uow.memberships.get_by_user_id(user_id)

            teams = []
            for member in memberships:
                team = await self.uow.teams.get_by_id(member.team_id)
                if team is None:
                    logger.warning(
                        f"Membership of {user_id} points at missing team {member.team_id}"
                    )
                    continue
                teams.append(
                    MyTeamResponse(
                        id=team.id,
                        name=team.name,
                        owner_id=team.owner_id,
                        created_at=format_timestamp(team.created_at),
                        local_directory=team.local_directory,
                        role=int(member.role),
                        access_expires=(
                            format_timestamp(member.access_expires)
                            if member.access_expires
                            else None
                        ),
                        active=permission_engine.is_active(member),
                    )
                )

        return MyTeamsResponse(teams=teams)


class GetMyRoleUseCase:
    """Use case for reading the current user's role in one team"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, team_id: str) -> MyRoleResponse:
        async with self.uow:
            member = await self.uow.memberships.get_by_user_and_team(user_id, team_id)
            if member is None:
                raise NotFound(f"User {user_id} is not a member of team {team_id}")

        return MyRoleResponse(
            member=member_response(member),
            active=permission_engine.is_active(member),
        )
