"""Tests for the reducer — pure state transitions."""

import copy

from ceramic_notes.core.reducer import reduce
from ceramic_notes.models import actions
from ceramic_notes.models.note import NoteItem
from ceramic_notes.models.state import (
    Authenticated,
    IndexLoadedNote,
    NavDefault,
    NavDraft,
    NavNote,
    NoteEntry,
    State,
    StoredNote,
    Unauthenticated,
)
from tests.unit.fakes import FakeDocument, make_session

SESSION = make_session()


def _authed(
    notes: dict[str, NoteEntry] | None = None,
    nav: NavDefault | NavDraft | NavNote | None = None,
) -> State:
    return State(
        auth=Authenticated(session=SESSION),
        nav=nav or NavDefault(),
        notes=notes or {},
    )


def _loading() -> State:
    return reduce(State(), actions.Auth(status="loading"))


def test_initial_state_is_pending_default_unsaved() -> None:
    state = State()
    assert state.auth == Unauthenticated(status="pending")
    assert state.nav == NavDefault()
    assert state.draft_status == "unsaved"
    assert state.notes == {}


def test_auth_resets_navigation_and_sets_status() -> None:
    state = _authed(nav=NavNote(stream_id="a"))

    result = reduce(state, actions.Auth(status="loading"))

    assert result.nav == NavDefault()
    assert result.auth == Unauthenticated(status="loading")
    assert result.session is None


def test_auth_success_populates_index_loaded_notes() -> None:
    result = reduce(
        _loading(), actions.AuthSuccess(session=SESSION, notes=(NoteItem("a", "Alpha"),))
    )

    assert result.auth.status == "done"
    assert result.session is SESSION
    assert result.notes == {"a": IndexLoadedNote(status="init", title="Alpha")}
    assert result.nav == NavDefault()
    assert result.draft_status == "unsaved"


def test_auth_success_keys_notes_by_bare_stream_id() -> None:
    notes = (NoteItem("ceramic://kjzl1", "One"), NoteItem("ceramic://kjzl2?version=c3", "Two"))

    result = reduce(_loading(), actions.AuthSuccess(session=SESSION, notes=notes))

    assert list(result.notes) == ["kjzl1", "kjzl2"]


def test_auth_success_with_empty_index_opens_a_draft() -> None:
    state = State(
        auth=Unauthenticated(status="loading"),
        draft_status="failed",
        notes={"stale": IndexLoadedNote(status="init", title="Old")},
    )

    result = reduce(state, actions.AuthSuccess(session=SESSION, notes=()))

    assert result.auth.status == "done"
    assert result.nav.type == "draft"
    assert result.draft_status == "unsaved"
    assert result.notes == {}


def test_auth_success_is_ignored_unless_loading() -> None:
    state = State()
    assert reduce(state, actions.AuthSuccess(session=SESSION)) is state


def test_nav_reset_is_idempotent() -> None:
    state = _authed(nav=NavNote(stream_id="a"))

    once = reduce(state, actions.NavReset())
    twice = reduce(once, actions.NavReset())

    assert once == twice
    assert once.nav == NavDefault()


def test_navigation_requires_authentication() -> None:
    state = State()
    assert reduce(state, actions.NavDraft()) is state
    assert reduce(state, actions.NavNote(stream_id="a")) is state
    assert reduce(state, actions.DraftStatusChanged(status="saving")) is state


def test_nav_draft_and_nav_note_when_authenticated() -> None:
    state = _authed()
    assert reduce(state, actions.NavDraft()).nav == NavDraft()
    assert reduce(state, actions.NavNote(stream_id="a")).nav == NavNote(stream_id="a")


def test_draft_delete_resets_draft_and_navigation() -> None:
    state = _authed(nav=NavDraft())
    state = reduce(state, actions.DraftStatusChanged(status="failed"))

    result = reduce(state, actions.DraftDelete())

    assert result.draft_status == "unsaved"
    assert result.nav == NavDefault()


def test_draft_saved_stores_note_and_navigates_to_it() -> None:
    doc = FakeDocument("s1")
    other = IndexLoadedNote(status="init", title="Other")
    state = _authed(notes={"o": other}, nav=NavDraft())
    state = reduce(state, actions.DraftStatusChanged(status="saving"))

    result = reduce(state, actions.DraftSaved(title="T", stream_id="s1", doc=doc))

    assert result.notes["s1"] == StoredNote(status="saved", title="T", doc=doc)
    assert result.notes["o"] is other
    assert result.nav == NavNote(stream_id="s1")
    assert result.draft_status == "unsaved"


def test_saved_draft_title_survives_opening_the_note() -> None:
    doc = FakeDocument("s1", {"text": "World"})
    state = reduce(_authed(nav=NavDraft()), actions.DraftSaved(title="Hello", stream_id="s1", doc=doc))
    state = reduce(state, actions.NavReset())

    state = reduce(state, actions.NavNote(stream_id="s1"))

    entry = state.current_note
    assert isinstance(entry, StoredNote)
    assert entry.title == "Hello"


def test_note_loaded_carries_title_from_index_entry() -> None:
    doc = FakeDocument("a")
    state = _authed(notes={"a": IndexLoadedNote(status="loading", title="Alpha")})

    result = reduce(state, actions.NoteLoaded(stream_id="a", doc=doc))

    assert result.notes["a"] == StoredNote(status="loaded", title="Alpha", doc=doc)


def test_note_loaded_applies_to_its_own_stream_after_navigating_away() -> None:
    doc = FakeDocument("a")
    state = _authed(
        notes={
            "a": IndexLoadedNote(status="loading", title="Alpha"),
            "b": IndexLoadedNote(status="init", title="Beta"),
        },
        nav=NavNote(stream_id="b"),
    )

    result = reduce(state, actions.NoteLoaded(stream_id="a", doc=doc))

    assert isinstance(result.notes["a"], StoredNote)
    assert result.notes["b"] == IndexLoadedNote(status="init", title="Beta")
    assert result.nav == NavNote(stream_id="b")


def test_note_loaded_for_unknown_stream_leaves_state_unchanged() -> None:
    state = _authed(nav=NavNote(stream_id="unknown"))
    assert reduce(state, actions.NoteLoaded(stream_id="unknown", doc=FakeDocument("x"))) is state


def test_note_loading_status_changes_only_target_status() -> None:
    notes: dict[str, NoteEntry] = {
        "a": IndexLoadedNote(status="init", title="Alpha"),
        "b": IndexLoadedNote(status="loading", title="Beta"),
        "c": StoredNote(status="loaded", title="Gamma", doc=FakeDocument("c")),
    }
    state = _authed(notes=notes, nav=NavNote(stream_id="b"))

    result = reduce(
        state, actions.NoteLoadingStatusChanged(stream_id="b", status="loading failed")
    )

    assert result.notes["b"] == IndexLoadedNote(status="loading failed", title="Beta")
    assert result.notes["a"] is notes["a"]
    assert result.notes["c"] is notes["c"]
    assert state.notes["b"] == IndexLoadedNote(status="loading", title="Beta")


def test_note_loading_status_ignored_for_stored_note() -> None:
    state = _authed(notes={"a": StoredNote(status="loaded", title="A", doc=FakeDocument("a"))})
    assert reduce(state, actions.NoteLoadingStatusChanged(stream_id="a", status="loading")) is state


def test_note_saving_status_updates_stored_note_only() -> None:
    doc = FakeDocument("a")
    state = _authed(
        notes={
            "a": StoredNote(status="loaded", title="A", doc=doc),
            "b": IndexLoadedNote(status="init", title="B"),
        }
    )

    result = reduce(state, actions.NoteSavingStatusChanged(stream_id="a", status="saving"))
    ignored = reduce(result, actions.NoteSavingStatusChanged(stream_id="b", status="saving"))

    assert result.notes["a"] == StoredNote(status="saving", title="A", doc=doc)
    assert ignored is result


def test_overlapping_saves_end_with_last_applied_status() -> None:
    doc = FakeDocument("a")
    state = _authed(notes={"a": StoredNote(status="loaded", title="A", doc=doc)})
    sequence = [
        actions.NoteSavingStatusChanged(stream_id="a", status="saving"),  # first call starts
        actions.NoteSavingStatusChanged(stream_id="a", status="saving"),  # second call starts
        actions.NoteSavingStatusChanged(stream_id="a", status="saved"),  # second completes
        actions.NoteSavingStatusChanged(stream_id="a", status="saving failed"),  # first completes
    ]

    for action in sequence:
        state = reduce(state, action)

    assert state.notes["a"].status == "saving failed"


def test_reducer_is_pure() -> None:
    state = _authed(notes={"a": IndexLoadedNote(status="init", title="Alpha")})
    notes_before = copy.copy(state.notes)
    action = actions.NoteLoadingStatusChanged(stream_id="a", status="loading")

    first = reduce(state, action)
    second = reduce(state, action)

    assert first == second
    assert state.notes == notes_before
    assert first.notes is not state.notes
