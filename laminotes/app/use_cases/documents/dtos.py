"""
Document Use Case DTOs (Data Transfer Objects)

Response classes for the document domain.
"""

from typing import Any, Dict, List

from pydantic import BaseModel


class ApplyChangeResponse(BaseModel):
    """Response for apply change use case"""

    document_id: str
    last_modified: str
    change_count: int
    user_color: str
    created: bool


class ConflictInfo(BaseModel):
    """Overlapping edit and the side that survived"""

    start_index: int
    end_index: int
    winner_user_id: str
    loser_user_id: str


class DocumentResponse(BaseModel):
    """Response for get document use case"""

    document_id: str
    content: str
    last_modified: str
    user_colors: Dict[str, str]
    change_count: int
    conflicts: List[ConflictInfo]


class ChangeResponse(BaseModel):
    """Response for get change use case"""

    document_id: str
    position: int
    change: Dict[str, Any]
