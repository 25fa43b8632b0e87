"""
List Invitations Use Cases

Reads of team and user invitations. Reads apply lazy expiry and persist any
invitation found past its deadline.
"""

from typing import List

from laminotes.app.services import invitation_lifecycle, permission_engine
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.domain import codec
from laminotes.domain.entities import Action, TeamInvitation
from laminotes.domain.errors import NotFound

from .dtos import InvitationListResponse


async def _observe_all(uow: UnitOfWork, invitations: List[TeamInvitation]) -> List[TeamInvitation]:
    observed = []
    changed = False
    for invitation in invitations:
        current = invitation_lifecycle.observe(invitation)
        if current.status != invitation.status:
            await uow.invitations.update(current)
            changed = True
        observed.append(current)
    if changed:
        await uow.commit()
    return observed


class ListTeamInvitationsUseCase:
    """
    Use case for listing a team's invitations.

    Business Rules:
    - Only members allowed to manage the team may list its invitations
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, team_id: str) -> InvitationListResponse:
        async with self.uow:
            membership = await self.uow.memberships.get_by_user_and_team(
                user_id, team_id
            )
            permission_engine.require(membership, Action.manage_team)

            invitations = await self.uow.invitations.get_by_team_id(team_id)
            observed = await _observe_all(self.uow, invitations)

        return InvitationListResponse(
            invitations=[codec.encode(invitation) for invitation in observed]
        )


class ListMyInvitationsUseCase:
    """Use case for listing the invitations addressed to the current user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> InvitationListResponse:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFound(f"User {user_id} not found")

            invitations = await self.uow.invitations.get_by_email(user.email)
            observed = await _observe_all(self.uow, invitations)

        return InvitationListResponse(
            invitations=[codec.encode(invitation) for invitation in observed]
        )
