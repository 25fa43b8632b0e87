import uuid
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Annotated, Dict, Mapping

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer


def generate_uuid() -> str:
    return str(uuid.uuid4())


def normalize_timestamp(value: datetime) -> datetime:
    """Coerce to UTC and truncate to millisecond precision (naive values are UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    else:
        value = value.astimezone(UTC)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    value = normalize_timestamp(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"


def utcnow() -> datetime:
    return normalize_timestamp(datetime.now(UTC))


def frozen_mapping(value: Mapping) -> Mapping:
    """Read-only snapshot of a mapping."""
    return MappingProxyType(dict(value))


# ISO-8601 UTC instant, rendered as 2024-05-01T09:30:00.000Z on the wire
Timestamp = Annotated[
    datetime,
    AfterValidator(normalize_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


def _plain_dict(value: Mapping) -> Dict[str, str]:
    return dict(value)


# Read-only str -> str mapping; dumped as a plain dict
FrozenStrMap = Annotated[
    Dict[str, str],
    AfterValidator(frozen_mapping),
    PlainSerializer(_plain_dict, return_type=Dict[str, str]),
]


class ValueObject(BaseModel):
    """Immutable entity; boundary field names are carried as aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)
