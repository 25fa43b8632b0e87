"""
Team Use Case DTOs (Data Transfer Objects)

All Response classes for the team domain.
Provides type safety and clear contracts between layers.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


# ============================================================================
# Response DTOs
# ============================================================================


class TeamResponse(BaseModel):
    """Response for create team use case"""

    id: str
    name: str
    owner_id: str
    created_at: str
    role: int


class MemberResponse(BaseModel):
    """Membership as returned to the caller"""

    user_id: str
    team_id: str
    role: int
    access_expires: Optional[str] = None


class MyTeamResponse(BaseModel):
    """A team seen from one of its members"""

    id: str
    name: str
    owner_id: str
    created_at: str
    local_directory: Optional[str] = None
    role: int
    access_expires: Optional[str] = None
    active: bool


class MyTeamsResponse(BaseModel):
    """Response for list my teams use case"""

    teams: List[MyTeamResponse]


class MyRoleResponse(BaseModel):
    """Response for get my role use case"""

    member: MemberResponse
    active: bool


class InviteMemberResponse(BaseModel):
    """Response for invite member use case"""

    invite_id: str
    status: str
    expires_at: str


class RespondToInvitationResponse(BaseModel):
    """Response for accepting or declining an invitation"""

    invitation_id: str
    status: str
    team_id: str
    member: Optional[MemberResponse] = None


class CancelInvitationResponse(BaseModel):
    """Response for cancel invitation use case"""

    status: str


class InvitationListResponse(BaseModel):
    """Invitations in their boundary encoding, lazy expiry applied"""

    invitations: List[Dict[str, Any]]


class RemoveMemberResponse(BaseModel):
    """Response for remove member use case"""

    status: str
