"""
Invitation Entity

Pending offers of team membership.
"""

from typing import Optional

from ..base import Timestamp, ValueObject
from .enums import InvitationStatus, TeamRole


class TeamInvitation(ValueObject):
    """
    Invitation entity - offer to join a team with a given role.

    Business Rules:
    - Created by team owners only
    - Expires after the configured TTL (7 days by default)
    - Status only moves forward; accepted/declined/expired are final
    - Kept as an audit record once final
    """

    id: str
    team_id: str
    team_name: Optional[str] = None
    invited_email: str
    invited_by: str
    invited_by_name: Optional[str] = None
    role: TeamRole
    created_at: Timestamp
    expires_at: Timestamp
    status: InvitationStatus = InvitationStatus.pending
