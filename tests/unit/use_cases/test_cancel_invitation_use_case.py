import pytest

from laminotes.app.services import invitation_lifecycle
from laminotes.app.use_cases.teams import CancelInvitationUseCase
from laminotes.domain.entities import InvitationStatus, TeamMember, TeamRole
from laminotes.domain.errors import InvalidTransition, NotFound, PermissionDenied

TEAM_ID = "team-1"


@pytest.fixture
def invitation():
    return invitation_lifecycle.create_invitation(
        TEAM_ID, "carol@example.com", "u1", TeamRole.viewer
    )


@pytest.fixture
def owner_membership():
    return TeamMember(user_id="u1", team_id=TEAM_ID, role=TeamRole.owner)


@pytest.mark.asyncio
async def test_owner_cancels_pending_invitation(mock_uow, invitation, owner_membership):
    """Test a cancelled invitation ends as expired"""
    mock_uow.memberships.get_by_user_and_team.return_value = owner_membership
    mock_uow.invitations.get_by_id.return_value = invitation

    use_case = CancelInvitationUseCase(mock_uow)
    result = await use_case.execute("u1", TEAM_ID, invitation.id)

    assert result.status == "expired"
    cancelled = mock_uow.invitations.update.call_args.args[0]
    assert cancelled.status == InvitationStatus.expired
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_cancel_final_invitation(mock_uow, invitation, owner_membership):
    """Test cancelling an invitation that was already declined"""
    mock_uow.memberships.get_by_user_and_team.return_value = owner_membership
    mock_uow.invitations.get_by_id.return_value = invitation.model_copy(
        update={"status": InvitationStatus.declined}
    )

    use_case = CancelInvitationUseCase(mock_uow)
    with pytest.raises(InvalidTransition):
        await use_case.execute("u1", TEAM_ID, invitation.id)


@pytest.mark.asyncio
async def test_invitation_from_other_team(mock_uow, invitation, owner_membership):
    """Test owners only cancel their own team's invitations"""
    mock_uow.memberships.get_by_user_and_team.return_value = owner_membership
    mock_uow.invitations.get_by_id.return_value = invitation.model_copy(
        update={"team_id": "team-2"}
    )

    use_case = CancelInvitationUseCase(mock_uow)
    with pytest.raises(NotFound):
        await use_case.execute("u1", TEAM_ID, invitation.id)


@pytest.mark.asyncio
async def test_contributor_cannot_cancel(mock_uow, invitation):
    """Test contributors cannot cancel invitations"""
    mock_uow.memberships.get_by_user_and_team.return_value = TeamMember(
        user_id="u2", team_id=TEAM_ID, role=TeamRole.contributor
    )

    use_case = CancelInvitationUseCase(mock_uow)
    with pytest.raises(PermissionDenied):
        await use_case.execute("u2", TEAM_ID, invitation.id)

    mock_uow.invitations.update.assert_not_called()
