"""
Laminotes Domain Entities

Immutable value types, one module per model.
"""

# Export all enums
from .enums import (
    Action,
    INVITATION_TRANSITIONS,
    InvitationStatus,
    TeamRole,
)

# Export all entities
from .document import DocumentChange, MarkdownMetadata, TextSection
from .file_metadata import FileMetadata
from .invitation import TeamInvitation
from .team import Team, TeamMember
from .user import User

__all__ = [
    # Enums
    "Action",
    "INVITATION_TRANSITIONS",
    "InvitationStatus",
    "TeamRole",
    # Entities
    "TextSection",
    "DocumentChange",
    "MarkdownMetadata",
    "Team",
    "TeamMember",
    "TeamInvitation",
    "User",
    "FileMetadata",
]
