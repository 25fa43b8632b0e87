from laminotes.domain.base import format_timestamp
from laminotes.domain.entities import TeamMember, TeamRole
from laminotes.domain.errors import MalformedInput

from .dtos import MemberResponse


def parse_role(role) -> TeamRole:
    if isinstance(role, bool):
        raise MalformedInput("role", f"Invalid role: {role!r}. Must be one of: 0, 1, 2")
    try:
        return TeamRole(role)
    except ValueError:
        raise MalformedInput(
            "role", f"Invalid role: {role!r}. Must be one of: 0, 1, 2"
        ) from None


def member_response(member: TeamMember) -> MemberResponse:
    return MemberResponse(
        user_id=member.user_id,
        team_id=member.team_id,
        role=int(member.role),
        access_expires=(
            format_timestamp(member.access_expires) if member.access_expires else None
        ),
    )
