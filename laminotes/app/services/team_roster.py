"""
Team Roster

Team creation and the membership mutations gated by Action.manage_team.
"""

from datetime import datetime
from typing import Iterable, Optional, Tuple

from laminotes.app.services import permission_engine
from laminotes.domain.base import generate_uuid, normalize_timestamp, utcnow
from laminotes.domain.entities import Action, Team, TeamMember, TeamRole, User
from laminotes.domain.errors import AlreadyMember, MalformedInput, PermissionDenied


def create_team(
    name: str,
    owner: User,
    now: Optional[datetime] = None,
    local_directory: Optional[str] = None,
) -> Tuple[Team, TeamMember]:
    """New team together with its owner's membership row."""
    team = Team(
        id=generate_uuid(),
        name=name,
        owner_id=owner.user_id,
        created_at=normalize_timestamp(now) if now else utcnow(),
        local_directory=local_directory,
    )
    owner_member = TeamMember(
        user_id=owner.user_id, team_id=team.id, role=TeamRole.owner
    )
    return team, owner_member


def validate_roster(team: Team, members: Iterable[TeamMember]) -> None:
    """
    Check the membership rows of one team.

    Raises:
        AlreadyMember: two rows for the same user
        MalformedInput: the team owner has no owner row
    """
    seen = set()
    owner_row = None
    for member in members:
        if member.team_id != team.id:
            continue
        if member.user_id in seen:
            raise AlreadyMember(
                f"User {member.user_id} has more than one membership in team {team.id}"
            )
        seen.add(member.user_id)
        if member.user_id == team.owner_id:
            owner_row = member

    if owner_row is None or owner_row.role != TeamRole.owner:
        raise MalformedInput("owner_id", f"owner {team.owner_id} has no owner membership")


def change_role(
    team: Team,
    actor: Optional[TeamMember],
    target: TeamMember,
    new_role: TeamRole,
    now: Optional[datetime] = None,
) -> TeamMember:
    """
    Raises:
        PermissionDenied: actor cannot manage the team, or target is the
            team owner and would be demoted
    """
    permission_engine.require(actor, Action.manage_team, now=now)
    new_role = TeamRole(new_role)
    if target.user_id == team.owner_id and new_role != TeamRole.owner:
        raise PermissionDenied("The team owner cannot be demoted")
    return target.model_copy(update={"role": new_role})


def set_access_expiry(
    actor: Optional[TeamMember],
    target: TeamMember,
    access_expires: Optional[datetime],
    now: Optional[datetime] = None,
) -> TeamMember:
    """Grant time-limited access, or clear the limit with None."""
    permission_engine.require(actor, Action.manage_team, now=now)
    if access_expires is not None:
        access_expires = normalize_timestamp(access_expires)
    return target.model_copy(update={"access_expires": access_expires})


def check_removal(
    team: Team,
    actor: Optional[TeamMember],
    target: TeamMember,
    now: Optional[datetime] = None,
) -> None:
    """
    Raises:
        PermissionDenied: actor cannot manage the team, or target is the
            team owner
    """
    permission_engine.require(actor, Action.manage_team, now=now)
    if target.user_id == team.owner_id:
        raise PermissionDenied("The team owner cannot be removed")
