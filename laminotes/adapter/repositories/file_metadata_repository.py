from typing import Optional

from laminotes.adapter.store import FileKey, InMemoryStore
from laminotes.app.repositories.file_metadata_repository import IFileMetadataRepository
from laminotes.domain.entities import FileMetadata
from laminotes.domain.errors import NotFound


def _key(file_name: str, user_id: str, team_id: Optional[str]) -> FileKey:
    # team files have no owner column
    owner_id = user_id if team_id is None else None
    return (team_id, owner_id, file_name)


class FileMetadataRepository(IFileMetadataRepository):
    """File metadata repository implementation over an InMemoryStore"""

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_name(
        self, file_name: str, user_id: str, team_id: Optional[str] = None
    ) -> Optional[FileMetadata]:
        return self.store.files.get(_key(file_name, user_id, team_id))

    async def create(self, file_metadata: FileMetadata, user_id: str) -> FileMetadata:
        key = _key(file_metadata.file_name, user_id, file_metadata.team_id)
        self.store.files[key] = file_metadata
        return file_metadata

    async def update(self, file_metadata: FileMetadata) -> FileMetadata:
        for key, stored in self.store.files.items():
            if stored.file_id == file_metadata.file_id:
                self.store.files[key] = file_metadata
                return file_metadata
        raise NotFound(f"File {file_metadata.file_id} not found")
