import pytest
import pytest_asyncio

from laminotes.adapter.services.unit_of_work import InMemoryUnitOfWork
from laminotes.adapter.store import InMemoryStore
from laminotes.domain.entities import User
from tests.fixtures.json_loader import TestDataLoader

USERS = [
    User(user_id="u-alice", email="alice@example.com"),
    User(user_id="u-bob", email="bob@example.com"),
    User(user_id="u-carol", email="carol@example.com"),
]


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest_asyncio.fixture
async def uow(store):
    uow = InMemoryUnitOfWork(store)
    async with uow:
        for user in USERS:
            await uow.users.create(user)
        await uow.commit()
    return uow
