from abc import ABC, abstractmethod
from typing import Optional

from laminotes.domain.entities import FileMetadata


class IFileMetadataRepository(ABC):
    """File metadata repository interface - application layer"""

    @abstractmethod
    async def get_by_name(
        self, file_name: str, user_id: str, team_id: Optional[str] = None
    ) -> Optional[FileMetadata]:
        """
        Get metadata of a file by name.

        Team files are shared by the team; personal files (team_id None) are
        looked up among the files owned by user_id only.
        """
        pass

    @abstractmethod
    async def create(self, file_metadata: FileMetadata, user_id: str) -> FileMetadata:
        """Create metadata for a new file written by user_id"""
        pass

    @abstractmethod
    async def update(self, file_metadata: FileMetadata) -> FileMetadata:
        """Replace the stored metadata with the same file ID"""
        pass
