"""
File Metadata Entity

Identity and version stamp of a stored file.
"""

from typing import Optional

from pydantic import Field

from ..base import Timestamp, ValueObject


class FileMetadata(ValueObject):
    """
    File metadata - identity plus last write stamp.

    Business Rules:
    - file_id is assigned once at creation
    - last_modified strictly increases on every write
    """

    file_id: str = Field(alias="fileId")
    file_name: str = Field(alias="fileName")
    last_modified: Timestamp = Field(alias="lastModified")
    team_id: Optional[str] = None
