"""
File Use Cases
"""

from .commit_file_use_case import CommitFileUseCase
from .dtos import CommitFileResponse

__all__ = ["CommitFileUseCase", "CommitFileResponse"]
