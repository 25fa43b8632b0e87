"""
Unit tests for team roster rules
"""

from datetime import timedelta

import pytest

from laminotes.app.services import team_roster
from laminotes.domain.entities import TeamMember, TeamRole, User
from laminotes.domain.errors import AlreadyMember, MalformedInput, PermissionDenied


@pytest.fixture
def team_and_owner(t0):
    alice = User(user_id="u1", email="alice@example.com")
    return team_roster.create_team("Docs", alice, now=t0, local_directory="/docs")


@pytest.fixture
def contributor(team_and_owner):
    team, _ = team_and_owner
    return TeamMember(user_id="u2", team_id=team.id, role=TeamRole.contributor)


class TestCreateTeam:
    def test_creator_owns_team(self, team_and_owner, t0):
        team, owner = team_and_owner

        assert team.owner_id == "u1"
        assert team.created_at == t0
        assert team.local_directory == "/docs"
        assert owner.user_id == "u1"
        assert owner.team_id == team.id
        assert owner.role == TeamRole.owner


class TestValidateRoster:
    def test_valid_roster(self, team_and_owner, contributor):
        team, owner = team_and_owner

        team_roster.validate_roster(team, [owner, contributor])

    def test_duplicate_membership(self, team_and_owner, contributor):
        team, owner = team_and_owner
        again = contributor.model_copy(update={"role": TeamRole.viewer})

        with pytest.raises(AlreadyMember):
            team_roster.validate_roster(team, [owner, contributor, again])

    def test_owner_row_missing(self, team_and_owner, contributor):
        team, _ = team_and_owner

        with pytest.raises(MalformedInput) as exc_info:
            team_roster.validate_roster(team, [contributor])

        assert exc_info.value.field == "owner_id"

    def test_owner_row_with_lower_role(self, team_and_owner):
        team, owner = team_and_owner
        demoted = owner.model_copy(update={"role": TeamRole.contributor})

        with pytest.raises(MalformedInput):
            team_roster.validate_roster(team, [demoted])


class TestChangeRole:
    def test_owner_promotes_contributor(self, team_and_owner, contributor):
        team, owner = team_and_owner

        updated = team_roster.change_role(team, owner, contributor, TeamRole.owner)

        assert updated.role == TeamRole.owner
        assert contributor.role == TeamRole.contributor

    def test_contributor_cannot_change_roles(self, team_and_owner, contributor):
        team, owner = team_and_owner

        with pytest.raises(PermissionDenied):
            team_roster.change_role(team, contributor, contributor, TeamRole.viewer)

    def test_team_owner_cannot_be_demoted(self, team_and_owner):
        team, owner = team_and_owner

        with pytest.raises(PermissionDenied):
            team_roster.change_role(team, owner, owner, TeamRole.viewer)


class TestAccessExpiry:
    def test_owner_sets_expiry(self, team_and_owner, contributor, t0):
        _, owner = team_and_owner

        updated = team_roster.set_access_expiry(
            owner, contributor, t0 + timedelta(days=30), now=t0
        )

        assert updated.access_expires == t0 + timedelta(days=30)

    def test_owner_clears_expiry(self, team_and_owner, contributor, t0):
        _, owner = team_and_owner
        limited = contributor.model_copy(update={"access_expires": t0})

        updated = team_roster.set_access_expiry(owner, limited, None, now=t0)

        assert updated.access_expires is None

    def test_expired_owner_cannot_set_expiry(self, team_and_owner, contributor, t0):
        _, owner = team_and_owner
        expired = owner.model_copy(update={"access_expires": t0 - timedelta(days=1)})

        with pytest.raises(PermissionDenied):
            team_roster.set_access_expiry(expired, contributor, None, now=t0)


class TestCheckRemoval:
    def test_owner_removes_contributor(self, team_and_owner, contributor):
        team, owner = team_and_owner

        team_roster.check_removal(team, owner, contributor)

    def test_team_owner_cannot_be_removed(self, team_and_owner):
        team, owner = team_and_owner

        with pytest.raises(PermissionDenied):
            team_roster.check_removal(team, owner, owner)

    def test_non_member_cannot_remove(self, team_and_owner, contributor):
        team, _ = team_and_owner

        with pytest.raises(PermissionDenied):
            team_roster.check_removal(team, None, contributor)
