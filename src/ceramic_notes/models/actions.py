"""Actions understood by the reducer."""

from dataclasses import dataclass

from ceramic_notes.models.note import NoteItem
from ceramic_notes.models.state import (
    AuthStatus,
    DraftStatus,
    NoteLoadingStatus,
    NoteSavingStatus,
    Session,
)
from ceramic_notes.protocols import DocumentProtocol


@dataclass(frozen=True)
class Auth:
    status: AuthStatus


@dataclass(frozen=True)
class AuthSuccess:
    session: Session
    notes: tuple[NoteItem, ...] = ()


@dataclass(frozen=True)
class NavReset:
    pass


@dataclass(frozen=True)
class NavDraft:
    pass


@dataclass(frozen=True)
class NavNote:
    stream_id: str


@dataclass(frozen=True)
class DraftStatusChanged:
    status: DraftStatus


@dataclass(frozen=True)
class DraftDelete:
    pass


@dataclass(frozen=True)
class DraftSaved:
    title: str
    stream_id: str
    doc: DocumentProtocol


@dataclass(frozen=True)
class NoteLoaded:
    stream_id: str
    doc: DocumentProtocol


@dataclass(frozen=True)
class NoteLoadingStatusChanged:
    stream_id: str
    status: NoteLoadingStatus


@dataclass(frozen=True)
class NoteSavingStatusChanged:
    stream_id: str
    status: NoteSavingStatus


Action = (
    Auth
    | AuthSuccess
    | NavReset
    | NavDraft
    | NavNote
    | DraftStatusChanged
    | DraftDelete
    | DraftSaved
    | NoteLoaded
    | NoteLoadingStatusChanged
    | NoteSavingStatusChanged
)
