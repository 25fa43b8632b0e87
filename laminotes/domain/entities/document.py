"""
Document Entities

Change history and authorship coloring of one markdown document.
"""

from typing import Tuple

from pydantic import Field

from ..base import FrozenStrMap, Timestamp, ValueObject


class TextSection(ValueObject):
    """
    Contiguous span of document text touched by one change.

    The span is half-open: ``[start_index, end_index)``. Applying the section
    replaces that span of the evolving buffer with ``content``.
    """

    start_index: int = Field(alias="startIndex", ge=0)
    end_index: int = Field(alias="endIndex", ge=0)
    content: str

    def overlaps(self, other: "TextSection") -> bool:
        return (
            self.start_index < other.end_index
            and other.start_index < self.end_index
        )


class DocumentChange(ValueObject):
    """
    One atomic save by one user.

    Business Rules:
    - Sections are ordered by start_index and do not overlap each other
    - Timestamps never decrease along a document's history
    """

    user_id: str = Field(alias="userId")
    username: str
    timestamp: Timestamp
    sections: Tuple[TextSection, ...]


class MarkdownMetadata(ValueObject):
    """
    Full change history plus user colors for one document.

    Business Rules:
    - last_modified equals the last change's timestamp, or the document
      creation time while the history is empty
    - Every user_id referenced by a change has a color
    - user_colors is read-only; a new version carries a new mapping
    """

    document_id: str = Field(alias="documentId")
    changes: Tuple[DocumentChange, ...] = ()
    user_colors: FrozenStrMap = Field(
        alias="userColors", default_factory=dict, validate_default=True
    )
    last_modified: Timestamp = Field(alias="lastModified")
