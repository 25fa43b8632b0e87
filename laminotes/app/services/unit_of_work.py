from abc import ABC, abstractmethod

from laminotes.app.repositories.document_repository import IDocumentRepository
from laminotes.app.repositories.file_metadata_repository import IFileMetadataRepository
from laminotes.app.repositories.invitation_repository import IInvitationRepository
from laminotes.app.repositories.membership_repository import IMembershipRepository
from laminotes.app.repositories.team_repository import ITeamRepository
from laminotes.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    teams: ITeamRepository
    memberships: IMembershipRepository
    invitations: IInvitationRepository
    documents: IDocumentRepository
    files: IFileMetadataRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
