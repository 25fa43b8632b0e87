"""
History Rules

Ordering rules of a document history, shared by the change tracker (on
append) and the metadata codec (on decode).
"""

from typing import Optional, Sequence, Tuple

from .entities import DocumentChange
from .errors import InvalidChange


def section_violation(change: DocumentChange) -> Optional[Tuple[int, str]]:
    """Position and reason of the first section breaking the rules, if any."""
    furthest_end = None
    previous_start = None
    for position, section in enumerate(change.sections):
        if section.start_index > section.end_index:
            return position, (
                f"starts after it ends ({section.start_index} > {section.end_index})"
            )
        if previous_start is not None and section.start_index < previous_start:
            return position, "out of order; sections must be sorted by startIndex"
        if furthest_end is not None and section.start_index < furthest_end:
            return position, "overlaps an earlier section"
        previous_start = section.start_index
        # zero-width inserts cover no span of their own
        if section.end_index > section.start_index:
            furthest_end = max(furthest_end or 0, section.end_index)
    return None


def timestamp_violation(changes: Sequence[DocumentChange]) -> Optional[int]:
    """Position of the first change older than the one before it, if any."""
    for position in range(1, len(changes)):
        if changes[position].timestamp < changes[position - 1].timestamp:
            return position
    return None


def validate_change(change: DocumentChange) -> None:
    """
    Check a change's own sections.

    Raises:
        InvalidChange: a section starts after it ends, sections are out of
            order, or two sections overlap
    """
    violation = section_violation(change)
    if violation is not None:
        position, reason = violation
        raise InvalidChange(f"Section {position} {reason}")
