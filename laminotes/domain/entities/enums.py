"""
Laminotes Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum, IntEnum


class TeamRole(IntEnum):
    """Permission level within a team; a higher level includes every lower one"""

    viewer = 0
    contributor = 1
    owner = 2

    def includes(self, other: "TeamRole") -> bool:
        return self >= other


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"
    declined = "declined"
    expired = "expired"

    @property
    def is_terminal(self) -> bool:
        return not INVITATION_TRANSITIONS.get(self)


# Allowed status moves; a status with no outgoing moves is terminal.
INVITATION_TRANSITIONS = {
    InvitationStatus.pending: frozenset(
        {
            InvitationStatus.accepted,
            InvitationStatus.declined,
            InvitationStatus.expired,
        }
    ),
    InvitationStatus.accepted: frozenset(),
    InvitationStatus.declined: frozenset(),
    InvitationStatus.expired: frozenset(),
}


class Action(str, Enum):
    """Operations a team member may attempt on a document or team"""

    view = "view"
    edit = "edit"
    manage_team = "manage_team"
