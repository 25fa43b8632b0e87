from typing import Optional

from laminotes.adapter.store import InMemoryStore
from laminotes.app.repositories.user_repository import IUserRepository
from laminotes.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation over an InMemoryStore"""

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return self.store.users.get(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        for user in self.store.users.values():
            if user.email.lower() == email:
                return user
        return None

    async def create(self, user: User) -> User:
        """Register a user supplied by the authentication collaborator"""
        self.store.users[user.user_id] = user
        return user
