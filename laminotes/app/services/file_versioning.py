"""
File Versioning

Identity and version stamps of stored files. Every write stamps the file with
a last_modified strictly later than the previous one, even when the clock has
not advanced or has gone backwards.
"""

from datetime import datetime, timedelta
from typing import Optional

from laminotes.domain.base import generate_uuid, normalize_timestamp, utcnow
from laminotes.domain.entities import FileMetadata

# Resolution of boundary timestamps
TICK = timedelta(milliseconds=1)


def create_file_metadata(
    file_name: str, team_id: Optional[str] = None, now: Optional[datetime] = None
) -> FileMetadata:
    return FileMetadata(
        file_id=generate_uuid(),
        file_name=file_name,
        last_modified=normalize_timestamp(now) if now else utcnow(),
        team_id=team_id,
    )


def touch(file_metadata: FileMetadata, now: Optional[datetime] = None) -> FileMetadata:
    """Record a write."""
    stamp = normalize_timestamp(now) if now else utcnow()
    if stamp <= file_metadata.last_modified:
        stamp = file_metadata.last_modified + TICK
    return file_metadata.model_copy(update={"last_modified": stamp})
