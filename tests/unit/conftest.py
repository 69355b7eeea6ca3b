"""Shared test fixtures."""

import pytest

from ceramic_notes.config import AppConfig
from ceramic_notes.core.app import NotesApp
from tests.unit.fakes import FakeDirectory, FakeDocumentStore, FakeSessionOpener, make_session

SEED_HEX = "461b477fd6e44f0ce3cfddb7b5fc19d940aef92fd70f36f62b63ab7d9402cf27"

APP_CONFIG = AppConfig(
    definitions={"notes": "kjzl-notes-definition"},
    schemas={
        "Note": "ceramic://kjzl-note-schema?version=c1",
        "NotesList": "ceramic://kjzl-notes-list-schema?version=c1",
    },
)

FIXED_DATE = "2021-05-04T10:20:30.000Z"


@pytest.fixture
def seed() -> bytes:
    return bytes.fromhex(SEED_HEX)


@pytest.fixture
def fake_store() -> FakeDocumentStore:
    return FakeDocumentStore()


@pytest.fixture
def fake_directory() -> FakeDirectory:
    return FakeDirectory()


@pytest.fixture
def opener(fake_store: FakeDocumentStore, fake_directory: FakeDirectory) -> FakeSessionOpener:
    return FakeSessionOpener(make_session(fake_store, fake_directory))


@pytest.fixture
def notes_app(opener: FakeSessionOpener) -> NotesApp:
    """An unauthenticated app wired to fakes, with a fixed clock."""
    return NotesApp(opener, config=APP_CONFIG, clock=lambda: FIXED_DATE)
