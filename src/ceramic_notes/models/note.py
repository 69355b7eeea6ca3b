"""Note references as stored in the notes index document."""

from dataclasses import dataclass
from typing import Any

from loguru import logger

STREAM_URL_SCHEME = "ceramic://"


def stream_id_from_url(value: str) -> str:
    """Strip the ``ceramic://`` scheme and any ``?version=`` suffix."""
    if value.startswith(STREAM_URL_SCHEME):
        value = value[len(STREAM_URL_SCHEME) :]
    return value.split("?", 1)[0]


def stream_url(stream_id: str) -> str:
    """Return the ``ceramic://`` URL form of a stream id."""
    return STREAM_URL_SCHEME + stream_id_from_url(stream_id)


@dataclass(frozen=True)
class NoteItem:
    """A reference to a note document, as listed in the notes index."""

    id: str
    title: str

    @property
    def stream_id(self) -> str:
        return stream_id_from_url(self.id)

    def to_json(self) -> dict[str, str]:
        return {"id": self.id, "title": self.title}


def notes_from_index(content: dict[str, Any] | None) -> list[NoteItem]:
    """Parse the ``{"notes": [...]}`` index content; a missing index is empty.

    Items without an ``id`` cannot be opened and are skipped.
    """
    if not content:
        return []
    notes = []
    for item in content.get("notes", []):
        if not item.get("id"):
            logger.warning("Skipping notes index item without id: {!r}", item)
            continue
        notes.append(NoteItem(id=item["id"], title=item.get("title", "")))
    return notes


def index_content(notes: list[NoteItem]) -> dict[str, Any]:
    """Build index content from note references, keeping their order."""
    return {"notes": [item.to_json() for item in notes]}


def prepend_note(notes: list[NoteItem], item: NoteItem) -> list[NoteItem]:
    """Put ``item`` first (newest first), dropping any older entry with the same stream."""
    return [item, *(n for n in notes if n.stream_id != item.stream_id)]
