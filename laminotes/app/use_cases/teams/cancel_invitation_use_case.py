"""
Cancel Invitation Use Case

Handles withdrawing pending invitations.
"""

import logging

from laminotes.app.services import invitation_lifecycle, permission_engine
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.domain.errors import NotFound, PermissionDenied

from .dtos import CancelInvitationResponse

logger = logging.getLogger(__name__)


class CancelInvitationUseCase:
    """
    Use case for cancelling pending invitations.

    Business Rules:
    - Only active owners can cancel
    - The invitation must belong to the team
    - A cancelled invitation ends as expired; final invitations fail with
      InvalidTransition
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, team_id: str, invitation_id: str
    ) -> CancelInvitationResponse:
        async with self.uow:
            membership = await self.uow.memberships.get_by_user_and_team(
                user_id, team_id
            )
            if not permission_engine.can_invite(membership):
                raise PermissionDenied("Only team owners can cancel invitations")

            invitation = await self.uow.invitations.get_by_id(invitation_id)

            # Verify invitation belongs to this team
            if invitation is None or invitation.team_id != team_id:
                raise NotFound("Invitation not found")

            cancelled = invitation_lifecycle.cancel(invitation)
            await self.uow.invitations.update(cancelled)

            await self.uow.commit()

        logger.info(f"Invitation {invitation_id} cancelled by {user_id}")

        return CancelInvitationResponse(status=cancelled.status.value)
