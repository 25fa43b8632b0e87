from typing import Optional

from laminotes.adapter.repositories.document_repository import DocumentRepository
from laminotes.adapter.repositories.file_metadata_repository import FileMetadataRepository
from laminotes.adapter.repositories.invitation_repository import InvitationRepository
from laminotes.adapter.repositories.membership_repository import MembershipRepository
from laminotes.adapter.repositories.team_repository import TeamRepository
from laminotes.adapter.repositories.user_repository import UserRepository
from laminotes.adapter.store import InMemoryStore
from laminotes.app.services.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory implementation of UnitOfWork pattern; writes stay staged until commit"""

    def __init__(self, store: Optional[InMemoryStore] = None):
        self.store = store if store is not None else InMemoryStore()
        self._staged: Optional[InMemoryStore] = None

    async def __aenter__(self):
        self._staged = self.store.copy()
        # Initialize all repositories with the staged tables
        self.users = UserRepository(self._staged)
        self.teams = TeamRepository(self._staged)
        self.memberships = MembershipRepository(self._staged)
        self.invitations = InvitationRepository(self._staged)
        self.documents = DocumentRepository(self._staged)
        self.files = FileMetadataRepository(self._staged)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        self.store.load(self._staged)

    async def rollback(self):
        self._staged.load(self.store)
