"""
User Entity

Account identity as supplied by the authentication collaborator.
"""

from typing import Optional

from ..base import Timestamp, ValueObject


class User(ValueObject):
    """User account; user_id is stable for the account's lifetime"""

    user_id: str
    email: str
    created_at: Optional[Timestamp] = None
