"""
Team Management Use Cases

All team, membership and invitation business logic.
"""

from .cancel_invitation_use_case import CancelInvitationUseCase
from .change_role_use_case import ChangeRoleUseCase
from .create_team_use_case import CreateTeamUseCase
from .dtos import (
    CancelInvitationResponse,
    InvitationListResponse,
    InviteMemberResponse,
    MemberResponse,
    MyRoleResponse,
    MyTeamResponse,
    MyTeamsResponse,
    RemoveMemberResponse,
    RespondToInvitationResponse,
    TeamResponse,
)
from .invite_member_use_case import InviteMemberUseCase
from .list_invitations_use_case import ListMyInvitationsUseCase, ListTeamInvitationsUseCase
from .list_my_teams_use_case import GetMyRoleUseCase, ListMyTeamsUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .respond_to_invitation_use_case import RespondToInvitationUseCase
from .set_access_expiry_use_case import SetAccessExpiryUseCase

__all__ = [
    "CreateTeamUseCase",
    "InviteMemberUseCase",
    "RespondToInvitationUseCase",
    "CancelInvitationUseCase",
    "ListTeamInvitationsUseCase",
    "ListMyInvitationsUseCase",
    "ListMyTeamsUseCase",
    "GetMyRoleUseCase",
    "ChangeRoleUseCase",
    "SetAccessExpiryUseCase",
    "RemoveMemberUseCase",
    "TeamResponse",
    "MemberResponse",
    "MyTeamResponse",
    "MyTeamsResponse",
    "MyRoleResponse",
    "InviteMemberResponse",
    "RespondToInvitationResponse",
    "CancelInvitationResponse",
    "InvitationListResponse",
    "RemoveMemberResponse",
]
