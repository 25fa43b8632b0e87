from datetime import datetime
from typing import Optional

from laminotes.domain.errors import MalformedInput


def parse_version_token(token: Optional[str]) -> Optional[datetime]:
    """The lastModified string a writer last read, as a datetime."""
    if token is None:
        return None
    try:
        return datetime.fromisoformat(token)
    except (TypeError, ValueError) as exc:
        raise MalformedInput("lastModified", f"not an ISO-8601 timestamp: {token!r}") from exc
