from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

T0 = datetime(2024, 5, 1, 9, 0, tzinfo=UTC)


@pytest.fixture
def t0():
    return T0


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.get_by_email = AsyncMock(return_value=None)

    uow.teams = MagicMock()
    uow.teams.get_by_id = AsyncMock()
    uow.teams.create = AsyncMock()

    uow.memberships = MagicMock()
    uow.memberships.get_by_user_and_team = AsyncMock(return_value=None)
    uow.memberships.get_by_user_id = AsyncMock(return_value=[])
    uow.memberships.create = AsyncMock()
    uow.memberships.update = AsyncMock()
    uow.memberships.delete = AsyncMock()

    uow.invitations = MagicMock()
    uow.invitations.get_by_id = AsyncMock()
    uow.invitations.get_pending_by_team_and_email = AsyncMock(return_value=None)
    uow.invitations.get_by_team_id = AsyncMock(return_value=[])
    uow.invitations.get_by_email = AsyncMock(return_value=[])
    uow.invitations.create = AsyncMock()
    uow.invitations.update = AsyncMock()

    uow.documents = MagicMock()
    uow.documents.get_by_team_and_id = AsyncMock(return_value=None)
    uow.documents.create = AsyncMock()
    uow.documents.update = AsyncMock()

    uow.files = MagicMock()
    uow.files.get_by_name = AsyncMock(return_value=None)
    uow.files.create = AsyncMock()
    uow.files.update = AsyncMock()
    return uow
