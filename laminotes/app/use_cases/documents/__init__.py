"""
Document Use Cases

Editing and reading collaborative documents.
"""

from .apply_change_use_case import ApplyChangeUseCase
from .dtos import ApplyChangeResponse, ChangeResponse, ConflictInfo, DocumentResponse
from .get_change_use_case import GetChangeUseCase
from .get_document_use_case import GetDocumentUseCase

__all__ = [
    "ApplyChangeUseCase",
    "GetDocumentUseCase",
    "GetChangeUseCase",
    "ApplyChangeResponse",
    "DocumentResponse",
    "ChangeResponse",
    "ConflictInfo",
]
