"""
Team Entities

A collaboration group and its membership edges.
"""

from typing import Optional

from pydantic import Field

from ..base import Timestamp, ValueObject
from .enums import TeamRole


class Team(ValueObject):
    """
    Team entity - collaboration group owning its memberships.

    Business Rules:
    - owner_id has a membership row with role owner
    - Memberships die with the team
    """

    id: str
    name: str
    owner_id: str
    created_at: Timestamp
    local_directory: Optional[str] = Field(default=None, alias="localDirectory")


class TeamMember(ValueObject):
    """
    Membership edge between a user and a team.

    Business Rules:
    - (user_id, team_id) is unique
    - Once access_expires has passed the membership is inactive; the row is
      kept for audit and authorizes nothing
    """

    user_id: str
    team_id: str
    role: TeamRole
    access_expires: Optional[Timestamp] = None
