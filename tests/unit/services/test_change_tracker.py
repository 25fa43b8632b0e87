"""
Unit tests for the change tracker
"""

from datetime import timedelta

import pytest

from laminotes.app.services import change_tracker
from laminotes.app.services.change_tracker import FirstWriterWins, LastWriterWins
from laminotes.config import ApplicationConfig
from laminotes.domain.entities import DocumentChange, MarkdownMetadata, TextSection
from laminotes.domain.errors import IndexOutOfRange, InvalidChange, StaleWrite


def make_change(user_id, timestamp, *sections):
    return DocumentChange(
        user_id=user_id,
        username=user_id.upper(),
        timestamp=timestamp,
        sections=tuple(
            TextSection(start_index=start, end_index=end, content=content)
            for start, end, content in sections
        ),
    )


@pytest.fixture
def empty_doc(t0):
    return change_tracker.new_document("doc-1", created_at=t0)


@pytest.fixture
def hello_doc(empty_doc, t0):
    """Two overlapping writes to [0, 5): alice at T0, bob at T0+5m"""
    metadata = change_tracker.append_change(
        empty_doc, make_change("alice", t0, (0, 5, "hello"))
    )
    return change_tracker.append_change(
        metadata, make_change("bob", t0 + timedelta(minutes=5), (0, 5, "HELLO"))
    )


class TestAppendChange:
    """Appending change sets to a document history"""

    def test_new_document_is_empty(self, empty_doc, t0):
        assert empty_doc.changes == ()
        assert empty_doc.user_colors == {}
        assert empty_doc.last_modified == t0

    def test_append_records_change_color_and_timestamp(self, empty_doc, t0):
        # Arrange
        change = make_change("alice", t0 + timedelta(seconds=1), (0, 0, "hi"))

        # Act
        metadata = change_tracker.append_change(empty_doc, change)

        # Assert
        assert metadata.changes == (change,)
        assert metadata.last_modified == change.timestamp
        assert metadata.user_colors["alice"] == change_tracker.assign_color("alice")
        assert metadata.user_colors["alice"] in ApplicationConfig.USER_COLOR_PALETTE

    def test_append_does_not_mutate_input(self, empty_doc, t0):
        change_tracker.append_change(empty_doc, make_change("alice", t0, (0, 0, "hi")))

        assert empty_doc.changes == ()
        assert empty_doc.user_colors == {}

    def test_existing_color_is_kept(self, t0):
        metadata = MarkdownMetadata(
            document_id="doc-1", user_colors={"alice": "#000000"}, last_modified=t0
        )

        metadata = change_tracker.append_change(
            metadata, make_change("alice", t0, (0, 0, "hi"))
        )

        assert metadata.user_colors == {"alice": "#000000"}

    def test_user_colors_cannot_be_edited_in_place(self, empty_doc, t0):
        metadata = change_tracker.append_change(
            empty_doc, make_change("alice", t0, (0, 0, "hi"))
        )

        with pytest.raises(TypeError):
            metadata.user_colors["alice"] = "#000000"
        assert metadata.user_colors["alice"] == change_tracker.assign_color("alice")

    def test_color_is_stable_across_documents(self, t0):
        first = change_tracker.append_change(
            change_tracker.new_document("doc-a", t0), make_change("carol", t0)
        )
        second = change_tracker.append_change(
            change_tracker.new_document("doc-b", t0), make_change("carol", t0)
        )

        assert first.user_colors["carol"] == second.user_colors["carol"]

    def test_equal_timestamp_is_accepted(self, hello_doc):
        change = make_change("alice", hello_doc.last_modified, (5, 5, "!"))

        metadata = change_tracker.append_change(hello_doc, change)

        assert len(metadata.changes) == 3
        assert metadata.last_modified == hello_doc.last_modified

    @pytest.mark.parametrize(
        "delta", [timedelta(milliseconds=-1), timedelta(minutes=-10)]
    )
    def test_older_change_is_rejected(self, hello_doc, delta):
        change = make_change("alice", hello_doc.last_modified + delta, (0, 0, "x"))

        with pytest.raises(InvalidChange):
            change_tracker.append_change(hello_doc, change)

    def test_last_modified_never_decreases(self, empty_doc, t0):
        metadata = empty_doc
        for minute in (0, 1, 1, 7):
            previous = metadata.last_modified
            metadata = change_tracker.append_change(
                metadata, make_change("alice", t0 + timedelta(minutes=minute))
            )
            assert metadata.last_modified >= previous

    def test_stale_version_token(self, hello_doc, t0):
        change = make_change("alice", t0 + timedelta(minutes=6), (0, 0, "x"))

        with pytest.raises(StaleWrite):
            change_tracker.append_change(
                hello_doc, change, expected_last_modified=t0
            )

    def test_matching_version_token(self, hello_doc, t0):
        change = make_change("alice", t0 + timedelta(minutes=6), (0, 0, "x"))

        metadata = change_tracker.append_change(
            hello_doc, change, expected_last_modified=hello_doc.last_modified
        )

        assert len(metadata.changes) == 3


class TestMaterialize:
    """Replaying history into document text"""

    def test_last_writer_wins(self, hello_doc):
        assert change_tracker.materialize(hello_doc, LastWriterWins()) == "HELLO"

    def test_first_writer_wins(self, hello_doc):
        assert change_tracker.materialize(hello_doc, FirstWriterWins()) == "hello"

    def test_default_policy_is_last_writer_wins(self, hello_doc):
        assert change_tracker.get_policy().name == "last_writer_wins"
        assert change_tracker.materialize(hello_doc) == "HELLO"

    def test_materialize_is_deterministic(self, hello_doc):
        results = {change_tracker.materialize(hello_doc) for _ in range(5)}

        assert results == {"HELLO"}

    def test_empty_document(self, empty_doc):
        assert change_tracker.materialize(empty_doc) == ""

    def test_sections_index_the_base_of_their_change(self, empty_doc, t0):
        # Arrange
        metadata = change_tracker.append_change(
            empty_doc, make_change("alice", t0, (0, 0, "abc"))
        )
        change = make_change(
            "bob", t0 + timedelta(seconds=1), (0, 1, "XX"), (2, 3, "YY")
        )

        # Act
        metadata = change_tracker.append_change(metadata, change)

        # Assert
        assert change_tracker.materialize(metadata) == "XXbYY"

    def test_zero_width_section_inserts(self, empty_doc, t0):
        metadata = change_tracker.append_change(
            empty_doc, make_change("alice", t0, (0, 0, "helloworld"))
        )
        metadata = change_tracker.append_change(
            metadata, make_change("bob", t0 + timedelta(seconds=1), (5, 5, " "))
        )

        assert change_tracker.materialize(metadata) == "hello world"

    def test_span_past_end_is_clamped(self, empty_doc, t0):
        metadata = change_tracker.append_change(
            empty_doc, make_change("alice", t0, (3, 6, "abc"))
        )

        assert change_tracker.materialize(metadata) == "abc"

    def test_equal_timestamps_keep_insertion_order(self, empty_doc, t0):
        metadata = change_tracker.append_change(
            empty_doc, make_change("alice", t0, (0, 0, "first"))
        )
        metadata = change_tracker.append_change(
            metadata, make_change("bob", t0, (0, 5, "second"))
        )

        assert change_tracker.materialize(metadata) == "second"

    def test_replay_orders_by_timestamp(self, t0):
        # Built directly; the codec would refuse this order on decode
        later = make_change("bob", t0 + timedelta(minutes=5), (0, 5, "HELLO"))
        earlier = make_change("alice", t0, (0, 5, "hello"))
        metadata = MarkdownMetadata(
            document_id="doc-1",
            changes=(later, earlier),
            user_colors={"alice": "#FF6B6B", "bob": "#4ECDC4"},
            last_modified=later.timestamp,
        )

        assert change_tracker.materialize(metadata, LastWriterWins()) == "HELLO"
        assert change_tracker.history(metadata, 0) == earlier


class TestHistory:
    """Reading single changes by position"""

    def test_history_in_application_order(self, hello_doc):
        assert change_tracker.history(hello_doc, 0).user_id == "alice"
        assert change_tracker.history(hello_doc, 1).user_id == "bob"

    @pytest.mark.parametrize("index", [2, 10, -1])
    def test_out_of_range(self, hello_doc, index):
        with pytest.raises(IndexOutOfRange):
            change_tracker.history(hello_doc, index)

    def test_empty_history(self, empty_doc):
        with pytest.raises(IndexOutOfRange):
            change_tracker.history(empty_doc, 0)


class TestFindConflicts:
    """Overlap reporting"""

    def test_overlap_reports_winner_under_last_writer_wins(self, hello_doc):
        conflicts = change_tracker.find_conflicts(hello_doc, LastWriterWins())

        assert len(conflicts) == 1
        conflict = conflicts[0]
        assert (conflict.start_index, conflict.end_index) == (0, 5)
        assert conflict.winner_user_id == "bob"
        assert conflict.winner_position == 1
        assert conflict.loser_user_id == "alice"
        assert conflict.loser_position == 0

    def test_overlap_reports_winner_under_first_writer_wins(self, hello_doc):
        conflicts = change_tracker.find_conflicts(hello_doc, FirstWriterWins())

        assert len(conflicts) == 1
        assert conflicts[0].winner_user_id == "alice"
        assert conflicts[0].loser_user_id == "bob"

    def test_disjoint_edits_do_not_conflict(self, empty_doc, t0):
        metadata = change_tracker.append_change(
            empty_doc, make_change("alice", t0, (0, 5, "hello"))
        )
        metadata = change_tracker.append_change(
            metadata, make_change("bob", t0 + timedelta(seconds=1), (5, 8, "abc"))
        )

        assert change_tracker.find_conflicts(metadata) == []


class TestPolicies:
    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            change_tracker.get_policy("most_votes_wins")

    def test_policies_by_name(self):
        assert isinstance(change_tracker.get_policy("first_writer_wins"), FirstWriterWins)
        assert isinstance(change_tracker.get_policy("last_writer_wins"), LastWriterWins)

    def test_assign_color_uses_given_palette(self):
        assert change_tracker.assign_color("alice", ["#123456"]) == "#123456"
