from abc import ABC, abstractmethod
from typing import List, Optional

from laminotes.domain.entities import TeamInvitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: str) -> Optional[TeamInvitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_pending_by_team_and_email(
        self, team_id: str, email: str
    ) -> Optional[TeamInvitation]:
        """Get pending invitation by team and invited email"""
        pass

    @abstractmethod
    async def get_by_team_id(self, team_id: str) -> List[TeamInvitation]:
        """Get all invitations for a team"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> List[TeamInvitation]:
        """Get all invitations sent to an email address"""
        pass

    @abstractmethod
    async def create(self, invitation: TeamInvitation) -> TeamInvitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: TeamInvitation) -> TeamInvitation:
        """Replace the stored invitation with the same ID"""
        pass
