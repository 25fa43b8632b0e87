"""
Invitation Lifecycle

State machine over InvitationStatus:

    pending -> accepted   invited user accepts on or before expires_at
    pending -> declined   invited user declines
    pending -> expired    observed after expires_at (lazy), or cancelled

accepted, declined and expired are terminal. Expiry is lazy: there is no
timer, any read that observes a pending invitation past its deadline moves it
to expired. Observing is idempotent, so concurrent readers agree.
"""

from datetime import datetime, timedelta
from typing import Optional, Tuple

from laminotes.config import ApplicationConfig
from laminotes.domain.base import generate_uuid, normalize_timestamp, utcnow
from laminotes.domain.entities import (
    INVITATION_TRANSITIONS,
    InvitationStatus,
    TeamInvitation,
    TeamMember,
    TeamRole,
    User,
)
from laminotes.domain.errors import AlreadyMember, InvalidTransition, PermissionDenied


def create_invitation(
    team_id: str,
    invited_email: str,
    invited_by: str,
    role: TeamRole,
    now: Optional[datetime] = None,
    ttl_days: Optional[float] = None,
    team_name: Optional[str] = None,
    invited_by_name: Optional[str] = None,
) -> TeamInvitation:
    ttl_days = ApplicationConfig.INVITATION_TTL_DAYS if ttl_days is None else ttl_days
    if ttl_days <= 0:
        raise ValueError(f"Invitation TTL must be positive, got {ttl_days} days")

    created_at = _now(now)
    return TeamInvitation(
        id=generate_uuid(),
        team_id=team_id,
        team_name=team_name,
        invited_email=invited_email,
        invited_by=invited_by,
        invited_by_name=invited_by_name,
        role=TeamRole(role),
        created_at=created_at,
        expires_at=created_at + timedelta(days=ttl_days),
        status=InvitationStatus.pending,
    )


def is_past_deadline(invitation: TeamInvitation, now: Optional[datetime] = None) -> bool:
    return _now(now) > invitation.expires_at


def observe(invitation: TeamInvitation, now: Optional[datetime] = None) -> TeamInvitation:
    """Apply lazy expiry; returns the invitation unchanged when nothing is due."""
    if invitation.status == InvitationStatus.pending and is_past_deadline(invitation, now):
        return _transition(invitation, InvitationStatus.expired)
    return invitation


def accept(
    invitation: TeamInvitation,
    user: User,
    existing_member: Optional[TeamMember] = None,
    now: Optional[datetime] = None,
) -> Tuple[TeamInvitation, TeamMember]:
    """
    Accept on behalf of the invited user.

    Args:
        invitation: Invitation to accept
        user: Accepting user; must own the invited email
        existing_member: Current membership of user in the team, if any
        now: Observation time

    Returns:
        (accepted invitation, new TeamMember)

    Raises:
        InvalidTransition: invitation is no longer pending (expired included)
        PermissionDenied: user is not the invited address
        AlreadyMember: user already has a membership row in the team
    """
    invitation = observe(invitation, now)
    _check_can_leave_pending(invitation, InvitationStatus.accepted)
    _check_invitee(invitation, user)

    if existing_member is not None:
        raise AlreadyMember(
            f"User {user.user_id} is already a member of team {invitation.team_id}"
        )

    member = TeamMember(
        user_id=user.user_id,
        team_id=invitation.team_id,
        role=invitation.role,
    )
    return _transition(invitation, InvitationStatus.accepted), member


def decline(
    invitation: TeamInvitation, user: User, now: Optional[datetime] = None
) -> TeamInvitation:
    invitation = observe(invitation, now)
    _check_can_leave_pending(invitation, InvitationStatus.declined)
    _check_invitee(invitation, user)
    return _transition(invitation, InvitationStatus.declined)


def cancel(invitation: TeamInvitation, now: Optional[datetime] = None) -> TeamInvitation:
    """Withdraw a pending invitation; it ends as expired."""
    invitation = observe(invitation, now)
    _check_can_leave_pending(invitation, InvitationStatus.expired)
    return _transition(invitation, InvitationStatus.expired)


def _transition(invitation: TeamInvitation, target: InvitationStatus) -> TeamInvitation:
    if target not in INVITATION_TRANSITIONS[invitation.status]:
        raise InvalidTransition(
            f"Invitation {invitation.id} cannot move from "
            f"{invitation.status.value} to {target.value}"
        )
    return invitation.model_copy(update={"status": target})


def _check_can_leave_pending(invitation: TeamInvitation, target: InvitationStatus) -> None:
    # Checked before identity so a stale invitation reports its state first
    if target not in INVITATION_TRANSITIONS[invitation.status]:
        raise InvalidTransition(
            f"Invitation {invitation.id} is {invitation.status.value}; "
            f"it can no longer be {target.value}"
        )


def _check_invitee(invitation: TeamInvitation, user: User) -> None:
    if user.email.strip().lower() != invitation.invited_email.strip().lower():
        raise PermissionDenied("This invitation was sent to a different email address")


def _now(now: Optional[datetime]) -> datetime:
    return normalize_timestamp(now) if now else utcnow()
