from abc import ABC, abstractmethod
from typing import Optional

from laminotes.domain.entities import MarkdownMetadata


class IDocumentRepository(ABC):
    """Document metadata repository interface - documents are stored per team"""

    @abstractmethod
    async def get_by_team_and_id(
        self, team_id: str, document_id: str
    ) -> Optional[MarkdownMetadata]:
        """Get a team's document metadata by document ID"""
        pass

    @abstractmethod
    async def create(self, team_id: str, metadata: MarkdownMetadata) -> MarkdownMetadata:
        """Store metadata for a new document"""
        pass

    @abstractmethod
    async def update(self, team_id: str, metadata: MarkdownMetadata) -> MarkdownMetadata:
        """Replace the stored metadata with the same document ID"""
        pass
