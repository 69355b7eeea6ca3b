"""Application state tree: authentication, navigation, draft and note cache."""

from dataclasses import dataclass, field
from typing import Literal

from ceramic_notes.protocols import DirectoryProtocol, DocumentProtocol, DocumentStoreProtocol

AuthStatus = Literal["pending", "loading", "failed"]
DraftStatus = Literal["unsaved", "saving", "failed", "saved"]
NoteLoadingStatus = Literal["init", "loading", "loading failed"]
NoteSavingStatus = Literal["loaded", "saving", "saving failed", "saved"]


@dataclass(frozen=True)
class Session:
    """Handles of an authenticated identity."""

    did: str
    store: DocumentStoreProtocol
    directory: DirectoryProtocol


@dataclass(frozen=True)
class Unauthenticated:
    status: AuthStatus = "pending"


@dataclass(frozen=True)
class Authenticated:
    session: Session
    status: Literal["done"] = field(default="done", init=False)


AuthState = Unauthenticated | Authenticated


@dataclass(frozen=True)
class NavDefault:
    type: Literal["default"] = field(default="default", init=False)


@dataclass(frozen=True)
class NavDraft:
    type: Literal["draft"] = field(default="draft", init=False)


@dataclass(frozen=True)
class NavNote:
    stream_id: str
    type: Literal["note"] = field(default="note", init=False)


Nav = NavDefault | NavDraft | NavNote


@dataclass(frozen=True)
class IndexLoadedNote:
    """A note known from the index whose document has not been fetched."""

    status: NoteLoadingStatus
    title: str


@dataclass(frozen=True)
class StoredNote:
    """A note whose document has been fetched or freshly created."""

    status: NoteSavingStatus
    title: str
    doc: DocumentProtocol


NoteEntry = IndexLoadedNote | StoredNote


@dataclass(frozen=True)
class State:
    """The single state tree of an application instance.

    Only the reducer produces new values; ``notes`` is never mutated in place.
    """

    auth: AuthState = field(default_factory=Unauthenticated)
    nav: Nav = field(default_factory=NavDefault)
    draft_status: DraftStatus = "unsaved"
    notes: dict[str, NoteEntry] = field(default_factory=dict)

    @property
    def session(self) -> Session | None:
        return self.auth.session if isinstance(self.auth, Authenticated) else None

    @property
    def current_note(self) -> NoteEntry | None:
        if isinstance(self.nav, NavNote):
            return self.notes.get(self.nav.stream_id)
        return None
