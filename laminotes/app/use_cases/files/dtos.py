"""
File Use Case DTOs (Data Transfer Objects)
"""

from typing import Any, Dict

from pydantic import BaseModel


class CommitFileResponse(BaseModel):
    """Response for commit file use case"""

    file_metadata: Dict[str, Any]
    created: bool
