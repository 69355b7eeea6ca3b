"""Action dispatchers: perform the external calls and feed results to the store.

Every dispatcher follows the same shape: emit an in-progress action, await
the external operation, then emit either a success action or a failure
status. Exceptions never propagate past a dispatcher; they end up as a
status in the state tree. Nothing is retried, cancelled or de-duplicated:
two overlapping saves of the same note are applied in completion order.
"""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime

from loguru import logger

from ceramic_notes.config import NOTES_ALIAS, AppConfig
from ceramic_notes.core.session import SessionOpener
from ceramic_notes.core.store import Store
from ceramic_notes.errors import AuthError
from ceramic_notes.models import actions
from ceramic_notes.models.note import (
    NoteItem,
    index_content,
    notes_from_index,
    prepend_note,
    stream_id_from_url,
)
from ceramic_notes.models.state import IndexLoadedNote, Session, State
from ceramic_notes.protocols import DocumentProtocol


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class NotesApp:
    """The notes application: a store plus the dispatchers that drive it."""

    def __init__(
        self,
        open_session: SessionOpener,
        *,
        config: AppConfig,
        store: Store | None = None,
        clock: Callable[[], str] = utc_timestamp,
    ) -> None:
        self._open_session = open_session
        self.config = config
        self.store = store if store is not None else Store()
        self._clock = clock

    @property
    def state(self) -> State:
        return self.store.state

    def _require_session(self) -> Session:
        session = self.state.session
        if session is None:
            msg = "Not authenticated"
            raise AuthError(msg)
        return session

    async def authenticate(self, seed: bytes) -> None:
        self.store.dispatch(actions.Auth(status="loading"))
        try:
            session, notes = await self._open_session(seed)
        except Exception:
            logger.opt(exception=True).warning("authenticate call failed")
            self.store.dispatch(actions.Auth(status="failed"))
            return
        logger.info("Authenticated as {} with {} notes", session.did, len(notes))
        self.store.dispatch(actions.AuthSuccess(session=session, notes=tuple(notes)))

    def open_draft(self) -> None:
        self.store.dispatch(actions.NavDraft())

    def delete_draft(self) -> None:
        self.store.dispatch(actions.DraftDelete())

    def reset_nav(self) -> None:
        self.store.dispatch(actions.NavReset())

    async def save_draft(self, title: str, text: str) -> None:
        """Create the note document, then prepend it to the notes index.

        The document is not deleted if the index write fails.
        """
        self.store.dispatch(actions.DraftStatusChanged(status="saving"))
        try:
            session = self._require_session()
            doc, index = await asyncio.gather(
                session.store.create(
                    {"date": self._clock(), "text": text},
                    controllers=[session.directory.id],
                    schema=self.config.schemas.get("Note"),
                ),
                session.directory.get(NOTES_ALIAS),
            )
            notes = prepend_note(notes_from_index(index), NoteItem(id=doc.url, title=title))
            await session.directory.set(NOTES_ALIAS, index_content(notes))
        except Exception:
            logger.opt(exception=True).warning("failed to save draft")
            self.store.dispatch(actions.DraftStatusChanged(status="failed"))
            return
        self.store.dispatch(actions.DraftSaved(title=title, stream_id=doc.id, doc=doc))

    async def open_note(self, stream_id: str) -> None:
        """Show a note, fetching its document unless it is loaded or loading."""
        stream_id = stream_id_from_url(stream_id)
        self.store.dispatch(actions.NavNote(stream_id=stream_id))

        entry = self.state.notes.get(stream_id)
        if entry is None:
            logger.warning("Opening {} which is not in the notes index", stream_id)
        elif not isinstance(entry, IndexLoadedNote) or entry.status == "loading":
            return

        self.store.dispatch(actions.NoteLoadingStatusChanged(stream_id=stream_id, status="loading"))
        try:
            session = self._require_session()
            doc = await session.store.load(stream_id)
        except Exception:
            logger.opt(exception=True).warning("failed to load note {}", stream_id)
            self.store.dispatch(
                actions.NoteLoadingStatusChanged(stream_id=stream_id, status="loading failed")
            )
            return
        self.store.dispatch(actions.NoteLoaded(stream_id=stream_id, doc=doc))

    async def save_note(self, doc: DocumentProtocol, text: str) -> None:
        stream_id = doc.id
        self.store.dispatch(actions.NoteSavingStatusChanged(stream_id=stream_id, status="saving"))
        try:
            await doc.update({"date": self._clock(), "text": text})
        except Exception:
            logger.opt(exception=True).warning("failed to save note {}", stream_id)
            self.store.dispatch(
                actions.NoteSavingStatusChanged(stream_id=stream_id, status="saving failed")
            )
            return
        self.store.dispatch(actions.NoteSavingStatusChanged(stream_id=stream_id, status="saved"))
