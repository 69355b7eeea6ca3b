"""Tests for note references and the notes index format."""

from ceramic_notes.models.note import (
    NoteItem,
    index_content,
    notes_from_index,
    prepend_note,
    stream_id_from_url,
    stream_url,
)


def test_stream_id_from_url_strips_scheme_and_version() -> None:
    assert stream_id_from_url("ceramic://kjzl1?version=abc") == "kjzl1"
    assert stream_id_from_url("kjzl1") == "kjzl1"


def test_stream_url_is_idempotent() -> None:
    assert stream_url("kjzl1") == "ceramic://kjzl1"
    assert stream_url("ceramic://kjzl1") == "ceramic://kjzl1"


def test_notes_from_missing_index_is_empty() -> None:
    assert notes_from_index(None) == []
    assert notes_from_index({}) == []


def test_index_round_trip_keeps_order() -> None:
    items = [NoteItem("ceramic://b", "B"), NoteItem("ceramic://a", "A")]
    assert notes_from_index(index_content(items)) == items


def test_prepend_note_puts_newest_first_and_keeps_ids_unique() -> None:
    items = [NoteItem("ceramic://a", "A"), NoteItem("ceramic://b", "B")]

    result = prepend_note(items, NoteItem("ceramic://b?version=2", "B2"))

    assert result == [NoteItem("ceramic://b?version=2", "B2"), NoteItem("ceramic://a", "A")]


def test_index_items_without_id_are_skipped() -> None:
    content = {"notes": [{"title": "orphan"}, {"id": "ceramic://a", "title": "A"}, {"id": ""}]}

    assert notes_from_index(content) == [NoteItem("ceramic://a", "A")]
