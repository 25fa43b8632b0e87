"""
Respond To Invitation Use Case

Handles the invited user accepting or declining an invitation.
"""

import logging

from laminotes.app.services import invitation_lifecycle
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.domain.entities import InvitationStatus
from laminotes.domain.errors import MalformedInput, NotFound

from ._shared import member_response
from .dtos import RespondToInvitationResponse

logger = logging.getLogger(__name__)


class RespondToInvitationUseCase:
    """
    Use case for accepting or declining a team invitation.

    Business Rules:
    - Response must be accepted or declined
    - Only the invited email may respond
    - An invitation observed past its deadline is persisted as expired
      before the response is rejected with InvalidTransition
    - Responding to a final invitation fails with InvalidTransition
    - Accepting creates the membership; an existing one fails with AlreadyMember
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, invitation_id: str, response
    ) -> RespondToInvitationResponse:
        """
        Execute respond to invitation use case.

        Args:
            user_id: Responding user
            invitation_id: Invitation being answered
            response: "accepted" or "declined"

        Returns:
            RespondToInvitationResponse DTO
        """
        try:
            status = InvitationStatus(response)
        except ValueError:
            status = None
        if status not in (InvitationStatus.accepted, InvitationStatus.declined):
            raise MalformedInput(
                "status", f"Invalid response: {response!r}. Must be accepted or declined"
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFound(f"User {user_id} not found")

            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                raise NotFound("Invitation not found")

            observed = invitation_lifecycle.observe(invitation)
            if observed.status != invitation.status:
                # Keep the lazy expiry even though the response will be rejected
                await self.uow.invitations.update(observed)
                await self.uow.commit()

            member = None
            if status == InvitationStatus.accepted:
                existing = await self.uow.memberships.get_by_user_and_team(
                    user.user_id, observed.team_id
                )
                updated, member = invitation_lifecycle.accept(observed, user, existing)
                await self.uow.memberships.create(member)
            else:
                updated = invitation_lifecycle.decline(observed, user)

            await self.uow.invitations.update(updated)

            await self.uow.commit()

        logger.info(f"Invitation {invitation_id} {updated.status.value} by {user_id}")

        return RespondToInvitationResponse(
            invitation_id=updated.id,
            status=updated.status.value,
            team_id=updated.team_id,
            member=member_response(member) if member else None,
        )
