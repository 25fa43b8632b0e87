from typing import Dict, Optional, Tuple

from laminotes.domain.entities import (
    FileMetadata,
    MarkdownMetadata,
    Team,
    TeamInvitation,
    TeamMember,
    User,
)

# (team_id, owner_id, file_name); owner_id is None for team files
FileKey = Tuple[Optional[str], Optional[str], str]

TABLES = ("users", "teams", "memberships", "invitations", "documents", "files")


class InMemoryStore:
    """Process-local tables keyed like their storage counterparts"""

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.teams: Dict[str, Team] = {}
        self.memberships: Dict[Tuple[str, str], TeamMember] = {}  # (user_id, team_id)
        self.invitations: Dict[str, TeamInvitation] = {}
        self.documents: Dict[Tuple[str, str], MarkdownMetadata] = {}  # (team_id, document_id)
        self.files: Dict[FileKey, FileMetadata] = {}

    def copy(self) -> "InMemoryStore":
        clone = InMemoryStore()
        clone.load(self)
        return clone

    def load(self, other: "InMemoryStore") -> None:
        # Entities are immutable, copying the tables is enough
        for table in TABLES:
            rows = getattr(self, table)
            rows.clear()
            rows.update(getattr(other, table))
