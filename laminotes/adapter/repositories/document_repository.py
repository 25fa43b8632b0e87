from typing import Optional

from laminotes.adapter.store import InMemoryStore
from laminotes.app.repositories.document_repository import IDocumentRepository
from laminotes.domain.entities import MarkdownMetadata
from laminotes.domain.errors import NotFound


class DocumentRepository(IDocumentRepository):
    """Document metadata repository implementation over an InMemoryStore"""

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_team_and_id(
        self, team_id: str, document_id: str
    ) -> Optional[MarkdownMetadata]:
        return self.store.documents.get((team_id, document_id))

    async def create(self, team_id: str, metadata: MarkdownMetadata) -> MarkdownMetadata:
        self.store.documents[(team_id, metadata.document_id)] = metadata
        return metadata

    async def update(self, team_id: str, metadata: MarkdownMetadata) -> MarkdownMetadata:
        key = (team_id, metadata.document_id)
        if key not in self.store.documents:
            raise NotFound(f"Document {metadata.document_id} not found")
        self.store.documents[key] = metadata
        return metadata
