"""
Metadata Codec

Single owner of encoding and decoding for every boundary entity.

Payloads are JSON objects whose field names are fixed by existing consumers,
including the mixed naming (``fileId``/``lastModified`` next to
``user_id``/``created_at``). ``TeamRole`` travels as an integer,
``InvitationStatus`` as a lowercase string, timestamps as ISO-8601 UTC strings.
Optional fields are omitted when absent, never sent as ``null``.
"""

import json
from typing import Any, Dict, Mapping, Type, TypeVar, Union

from pydantic import ValidationError

from .base import ValueObject
from .entities import (
    DocumentChange,
    FileMetadata,
    MarkdownMetadata,
    Team,
    TeamInvitation,
    TeamMember,
    TextSection,
    User,
)
from .errors import MalformedInput
from .rules import section_violation, timestamp_violation

E = TypeVar("E", bound=ValueObject)

Raw = Union[Mapping[str, Any], str, bytes]

ENTITY_TYPES = (
    TextSection,
    DocumentChange,
    MarkdownMetadata,
    Team,
    TeamMember,
    TeamInvitation,
    User,
    FileMetadata,
)

ROOT_FIELD = "<root>"


def decode(entity_type: Type[E], raw: Raw) -> E:
    """
    Validate a boundary payload and build the entity.

    Args:
        entity_type: One of ENTITY_TYPES
        raw: JSON object as a mapping, or JSON text

    Returns:
        The decoded entity

    Raises:
        MalformedInput: naming the first offending field
    """
    if entity_type not in ENTITY_TYPES:
        raise TypeError(f"{entity_type!r} is not a boundary entity")

    if isinstance(raw, (str, bytes, bytearray)):
        payload = raw
    elif isinstance(raw, Mapping):
        try:
            payload = json.dumps(dict(raw))
        except (TypeError, ValueError) as exc:
            raise MalformedInput(ROOT_FIELD, f"not JSON compatible ({exc})") from exc
    else:
        raise MalformedInput(ROOT_FIELD, "expected a JSON object")

    try:
        entity = entity_type.model_validate_json(payload, strict=True)
    except ValidationError as exc:
        raise _first_error(exc) from exc

    _check_consistency(entity)
    return entity


def encode(entity: ValueObject) -> Dict[str, Any]:
    """Inverse of decode: JSON-compatible dict with boundary field names."""
    if not isinstance(entity, ENTITY_TYPES):
        raise TypeError(f"{type(entity)!r} is not a boundary entity")
    return entity.model_dump(mode="json", by_alias=True, exclude_none=True)


def encode_json(entity: ValueObject) -> str:
    if not isinstance(entity, ENTITY_TYPES):
        raise TypeError(f"{type(entity)!r} is not a boundary entity")
    return entity.model_dump_json(by_alias=True, exclude_none=True)


def decode_text_section(raw: Raw) -> TextSection:
    return decode(TextSection, raw)


def decode_document_change(raw: Raw) -> DocumentChange:
    return decode(DocumentChange, raw)


def decode_markdown_metadata(raw: Raw) -> MarkdownMetadata:
    return decode(MarkdownMetadata, raw)


def decode_team(raw: Raw) -> Team:
    return decode(Team, raw)


def decode_team_member(raw: Raw) -> TeamMember:
    return decode(TeamMember, raw)


def decode_team_invitation(raw: Raw) -> TeamInvitation:
    return decode(TeamInvitation, raw)


def decode_user(raw: Raw) -> User:
    return decode(User, raw)


def decode_file_metadata(raw: Raw) -> FileMetadata:
    return decode(FileMetadata, raw)


def _first_error(exc: ValidationError) -> MalformedInput:
    errors = exc.errors(include_url=False)
    if not errors:
        return MalformedInput(ROOT_FIELD, str(exc))
    first = errors[0]
    field = ".".join(str(part) for part in first["loc"]) or ROOT_FIELD
    return MalformedInput(field, first["msg"])


def _check_consistency(entity: ValueObject) -> None:
    """Cross-field rules the per-field schema cannot express."""
    if isinstance(entity, MarkdownMetadata):
        late = timestamp_violation(entity.changes)
        if late is not None:
            raise MalformedInput(
                f"changes.{late}.timestamp", "earlier than the previous change"
            )
        for position, change in enumerate(entity.changes):
            violation = section_violation(change)
            if violation is not None:
                section, reason = violation
                raise MalformedInput(
                    f"changes.{position}.sections.{section}", f"section {reason}"
                )
            if change.user_id not in entity.user_colors:
                raise MalformedInput(
                    "userColors", f"missing color for user {change.user_id}"
                )
        if entity.changes and entity.last_modified != entity.changes[-1].timestamp:
            raise MalformedInput(
                "lastModified", "must equal the timestamp of the last change"
            )
    elif isinstance(entity, TeamInvitation):
        if entity.expires_at <= entity.created_at:
            raise MalformedInput("expires_at", "must be later than created_at")
