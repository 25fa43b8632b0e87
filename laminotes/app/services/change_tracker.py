"""
Change Tracker

Pure transformations over a document's MarkdownMetadata: appending change
sets, replaying them into the merged content, and reporting overlapping edits.

Conflict policy: sections from different changes that cover the same span are
resolved by the configured ConflictPolicy. The default, last-writer-wins,
replays changes in timestamp order (ties keep their insertion order in the
history) so the later write overwrites the earlier one. First-writer-wins
replays in the same order but drops any section whose span was already
written by another change.
"""

import hashlib
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from laminotes.config import ApplicationConfig
from laminotes.domain.base import ValueObject, frozen_mapping, normalize_timestamp, utcnow
from laminotes.domain.entities import DocumentChange, MarkdownMetadata, TextSection
from laminotes.domain.errors import IndexOutOfRange, InvalidChange, StaleWrite
from laminotes.domain.rules import validate_change


class ConflictPolicy:
    """Decides replay order and which side of an overlap survives"""

    name = "abstract"
    later_wins = True

    def order(self, changes: Sequence[DocumentChange]) -> List[int]:
        """Positions into ``changes`` in application order."""
        # sorted() is stable, so equal timestamps keep insertion order
        return sorted(range(len(changes)), key=lambda i: changes[i].timestamp)


class LastWriterWins(ConflictPolicy):
    name = "last_writer_wins"
    later_wins = True


class FirstWriterWins(ConflictPolicy):
    name = "first_writer_wins"
    later_wins = False


POLICIES: Dict[str, ConflictPolicy] = {
    policy.name: policy for policy in (LastWriterWins(), FirstWriterWins())
}


def get_policy(name: Optional[str] = None) -> ConflictPolicy:
    name = name or ApplicationConfig.CONFLICT_POLICY
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown conflict policy: {name}. Must be one of: {', '.join(POLICIES)}"
        ) from None


class SectionConflict(ValueObject):
    """Two sections from different changes covering a common span"""

    start_index: int
    end_index: int
    winner_position: int
    winner_user_id: str
    loser_position: int
    loser_user_id: str


def assign_color(user_id: str, palette: Optional[Sequence[str]] = None) -> str:
    """Stable palette pick for a user; identical across processes and documents."""
    palette = palette or ApplicationConfig.USER_COLOR_PALETTE
    digest = hashlib.sha256(user_id.encode("utf-8")).digest()
    return palette[int.from_bytes(digest[:4], "big") % len(palette)]


def new_document(
    document_id: str, created_at: Optional[datetime] = None
) -> MarkdownMetadata:
    return MarkdownMetadata(
        document_id=document_id,
        changes=(),
        user_colors={},
        last_modified=created_at or utcnow(),
    )


def append_change(
    metadata: MarkdownMetadata,
    change: DocumentChange,
    expected_last_modified: Optional[datetime] = None,
) -> MarkdownMetadata:
    """
    Append a change set and return the new metadata version.

    Args:
        metadata: Current document metadata
        change: Change set to append
        expected_last_modified: Version token the writer last read; when
            given it must still match metadata.last_modified

    Returns:
        New MarkdownMetadata with the change appended

    Raises:
        StaleWrite: the version token no longer matches
        InvalidChange: the change is older than the document or its sections
            are malformed
    """
    if (
        expected_last_modified is not None
        and normalize_timestamp(expected_last_modified) != metadata.last_modified
    ):
        raise StaleWrite(
            f"Document {metadata.document_id} was modified since it was read"
        )

    if change.timestamp < metadata.last_modified:
        raise InvalidChange(
            "Change timestamp is earlier than the document's last modification"
        )

    validate_change(change)

    user_colors = dict(metadata.user_colors)
    if change.user_id not in user_colors:
        user_colors[change.user_id] = assign_color(change.user_id)

    return metadata.model_copy(
        update={
            "changes": metadata.changes + (change,),
            "user_colors": frozen_mapping(user_colors),
            "last_modified": change.timestamp,
        }
    )


def materialize(
    metadata: MarkdownMetadata, policy: Optional[ConflictPolicy] = None
) -> str:
    """Replay the history into the current document text."""
    policy = policy or get_policy()
    buffer = ""
    written: List[Tuple[int, TextSection]] = []

    for position in policy.order(metadata.changes):
        change = metadata.changes[position]
        # Right to left, so every section indexes the base its change was cut from
        for section in reversed(change.sections):
            if not policy.later_wins and any(
                owner != position and section.overlaps(prior)
                for owner, prior in written
            ):
                continue
            buffer = _apply_section(buffer, section)
            written.append((position, section))

    return buffer


def history(
    metadata: MarkdownMetadata, index: int, policy: Optional[ConflictPolicy] = None
) -> DocumentChange:
    """
    Change at ``index`` in application order.

    Raises:
        IndexOutOfRange: no change at that position
    """
    policy = policy or get_policy()
    order = policy.order(metadata.changes)
    if index < 0 or index >= len(order):
        raise IndexOutOfRange(
            f"No change at position {index}; history has {len(order)} changes"
        )
    return metadata.changes[order[index]]


def find_conflicts(
    metadata: MarkdownMetadata, policy: Optional[ConflictPolicy] = None
) -> List[SectionConflict]:
    """Overlapping sections across changes, with the side the policy keeps."""
    policy = policy or get_policy()
    conflicts: List[SectionConflict] = []
    placed: List[Tuple[int, DocumentChange, TextSection]] = []

    for applied, position in enumerate(policy.order(metadata.changes)):
        change = metadata.changes[position]
        for section in change.sections:
            for prior_applied, prior_change, prior in placed:
                if not section.overlaps(prior):
                    continue
                if policy.later_wins:
                    winner, loser = (applied, change), (prior_applied, prior_change)
                else:
                    winner, loser = (prior_applied, prior_change), (applied, change)
                conflicts.append(
                    SectionConflict(
                        start_index=max(section.start_index, prior.start_index),
                        end_index=min(section.end_index, prior.end_index),
                        winner_position=winner[0],
                        winner_user_id=winner[1].user_id,
                        loser_position=loser[0],
                        loser_user_id=loser[1].user_id,
                    )
                )
        placed.extend((applied, change, section) for section in change.sections)

    return conflicts


def _apply_section(buffer: str, section: TextSection) -> str:
    # spans past the end of the buffer are clamped to it
    start = min(section.start_index, len(buffer))
    end = min(max(section.end_index, start), len(buffer))
    return buffer[:start] + section.content + buffer[end:]
