from abc import ABC, abstractmethod
from typing import List, Optional

from laminotes.domain.entities import TeamMember


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_team(
        self, user_id: str, team_id: str
    ) -> Optional[TeamMember]:
        """Get membership by user and team"""
        pass

    @abstractmethod
    async def get_by_team_id(self, team_id: str) -> List[TeamMember]:
        """Get all memberships for a team"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> List[TeamMember]:
        """Get all memberships for a user"""
        pass

    @abstractmethod
    async def create(self, member: TeamMember) -> TeamMember:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, member: TeamMember) -> TeamMember:
        """Replace the stored membership for (user_id, team_id)"""
        pass

    @abstractmethod
    async def delete(self, member: TeamMember) -> None:
        """Delete the membership for (user_id, team_id)"""
        pass
