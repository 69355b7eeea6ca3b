"""Pure state transitions for the notes application."""

from dataclasses import replace

from ceramic_notes.models import actions
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


def _with_note(state: State, stream_id: str, entry: NoteEntry) -> State:
    return replace(state, notes={**state.notes, stream_id: entry})


def reduce(state: State, action: actions.Action) -> State:
    """Return the state that results from applying ``action`` to ``state``.

    Actions whose precondition does not hold (e.g. navigating to a note
    before authentication) leave the state unchanged.
    """
    authenticated = isinstance(state.auth, Authenticated)

    if isinstance(action, actions.Auth):
        return replace(state, nav=NavDefault(), auth=Unauthenticated(status=action.status))

    if isinstance(action, actions.AuthSuccess):
        if state.auth.status != "loading":
            return state
        auth = Authenticated(session=action.session)
        if action.notes:
            notes: dict[str, NoteEntry] = {
                item.stream_id: IndexLoadedNote(status="init", title=item.title)
                for item in action.notes
            }
            return replace(state, auth=auth, notes=notes)
        return State(auth=auth, nav=NavDraft(), draft_status="unsaved", notes={})

    if isinstance(action, actions.NavReset):
        return replace(state, nav=NavDefault())

    if isinstance(action, actions.DraftDelete):
        return replace(state, draft_status="unsaved", nav=NavDefault())

    if not authenticated:
        return state

    if isinstance(action, actions.NavDraft):
        return replace(state, nav=NavDraft())

    if isinstance(action, actions.NavNote):
        return replace(state, nav=NavNote(stream_id=action.stream_id))

    if isinstance(action, actions.DraftStatusChanged):
        return replace(state, draft_status=action.status)

    if isinstance(action, actions.DraftSaved):
        saved = StoredNote(status="saved", title=action.title, doc=action.doc)
        return replace(
            _with_note(state, action.stream_id, saved),
            nav=NavNote(stream_id=action.stream_id),
            draft_status="unsaved",
        )

    if isinstance(action, actions.NoteLoaded):
        previous = state.notes.get(action.stream_id)
        if previous is None:
            # No title to carry over for a stream that is not in the index.
            return state
        loaded = StoredNote(status="loaded", title=previous.title, doc=action.doc)
        return _with_note(state, action.stream_id, loaded)

    if isinstance(action, actions.NoteLoadingStatusChanged):
        entry = state.notes.get(action.stream_id)
        if not isinstance(entry, IndexLoadedNote):
            return state
        return _with_note(state, action.stream_id, replace(entry, status=action.status))

    if isinstance(action, actions.NoteSavingStatusChanged):
        entry = state.notes.get(action.stream_id)
        if not isinstance(entry, StoredNote):
            return state
        return _with_note(state, action.stream_id, replace(entry, status=action.status))

    return state
