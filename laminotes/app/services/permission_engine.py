"""
Permission Engine

Side-effect free predicates over a supplied TeamMember. The caller fetches
the membership; an absent membership is passed as None.

Business Rules:
- viewer may view; contributor may view and edit; owner may also manage the
  team (membership mutations, invitations)
- A membership whose access_expires has passed counts as absent but is not
  deleted
- Without an active membership only viewing a public document is allowed
"""

from datetime import datetime
from typing import Optional

from laminotes.domain.base import normalize_timestamp, utcnow
from laminotes.domain.entities import Action, TeamMember, TeamRole
from laminotes.domain.errors import PermissionDenied

# Lowest role allowed to perform each action
REQUIRED_ROLE = {
    Action.view: TeamRole.viewer,
    Action.edit: TeamRole.contributor,
    Action.manage_team: TeamRole.owner,
}


def is_active(member: Optional[TeamMember], now: Optional[datetime] = None) -> bool:
    if member is None:
        return False
    if member.access_expires is None:
        return True
    now = normalize_timestamp(now) if now else utcnow()
    return member.access_expires >= now


def authorize(
    member: Optional[TeamMember],
    action: Action,
    is_public: bool = False,
    now: Optional[datetime] = None,
) -> bool:
    if not is_active(member, now):
        return is_public and action == Action.view
    return member.role.includes(REQUIRED_ROLE[action])


def can_invite(member: Optional[TeamMember], now: Optional[datetime] = None) -> bool:
    # Owner is the top role, so only owners may hand out any role, owner included
    return is_active(member, now) and member.role == TeamRole.owner


def require(
    member: Optional[TeamMember],
    action: Action,
    is_public: bool = False,
    now: Optional[datetime] = None,
) -> None:
    """
    Raises:
        PermissionDenied: authorize() is false for this member and action
    """
    if not authorize(member, action, is_public=is_public, now=now):
        if member is None:
            raise PermissionDenied(f"Not a member of this team; cannot {action.value}")
        if not is_active(member, now):
            raise PermissionDenied(
                f"Team access expired; cannot {action.value}"
            )
        raise PermissionDenied(
            f"Role {member.role.name} cannot {action.value}; "
            f"requires {REQUIRED_ROLE[action].name}"
        )
