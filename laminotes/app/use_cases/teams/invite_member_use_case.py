"""
Invite Member Use Case

Handles inviting users to join a team with a given role.
"""

import logging

from laminotes.app.services import invitation_lifecycle, permission_engine
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.config import ApplicationConfig
from laminotes.domain.base import format_timestamp
from laminotes.domain.entities import InvitationStatus
from laminotes.domain.errors import (
    AlreadyMember,
    InvitationExists,
    MalformedInput,
    NotFound,
    PermissionDenied,
)

from ._shared import parse_role
from .dtos import InviteMemberResponse

logger = logging.getLogger(__name__)


class InviteMemberUseCase:
    """
    Use case for inviting users to join a team.

    Business Rules:
    - Only active owners can invite, for any role including owner
    - Role must be a valid TeamRole value
    - Existing members cannot be invited
    - At most one pending invitation per (team, email); a pending one past
      its deadline is expired on the spot and replaced
    - Invitation expires after invitationTtlDays (7 by default)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, inviter_user_id: str, team_id: str, email: str, role
    ) -> InviteMemberResponse:
        """
        Execute invite member use case.

        Args:
            inviter_user_id: User ID of the person sending the invite
            team_id: Target team ID
            email: Email address to invite
            role: Role to assign (0 viewer, 1 contributor, 2 owner)

        Returns:
            InviteMemberResponse DTO
        """
        team_role = parse_role(role)
        email = (email or "").strip()
        if "@" not in email:
            raise MalformedInput("invited_email", f"Invalid email address: {email!r}")

        async with self.uow:
            team = await self.uow.teams.get_by_id(team_id)
            if team is None:
                raise NotFound(f"Team {team_id} not found")

            inviter_membership = await self.uow.memberships.get_by_user_and_team(
                inviter_user_id, team_id
            )
            if not permission_engine.can_invite(inviter_membership):
                raise PermissionDenied("Only team owners can invite users")

            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                existing_membership = await self.uow.memberships.get_by_user_and_team(
                    existing_user.user_id, team_id
                )
                if existing_membership:
                    raise AlreadyMember("User is already a member of this team")

            pending = await self.uow.invitations.get_pending_by_team_and_email(
                team_id, email
            )
            if pending:
                observed = invitation_lifecycle.observe(pending)
                if observed.status == InvitationStatus.pending:
                    raise InvitationExists(
                        "A pending invitation already exists for this email"
                    )
                await self.uow.invitations.update(observed)

            invitation = invitation_lifecycle.create_invitation(
                team_id=team_id,
                invited_email=email,
                invited_by=inviter_user_id,
                role=team_role,
                ttl_days=ApplicationConfig.INVITATION_TTL_DAYS,
                team_name=team.name,
            )
            await self.uow.invitations.create(invitation)

            await self.uow.commit()

        logger.info(
            f"Invitation {invitation.id} sent to {email} for team {team_id} "
            f"as {team_role.name}"
        )

        return InviteMemberResponse(
            invite_id=invitation.id,
            status=invitation.status.value,
            expires_at=format_timestamp(invitation.expires_at),
        )
