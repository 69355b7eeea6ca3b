"""Authenticate an identity and read its notes index."""

from collections.abc import Awaitable, Callable

from ceramic_notes.api import CeramicApi
from ceramic_notes.ceramic.did import KeyDidProvider
from ceramic_notes.ceramic.directory import IdxDirectory
from ceramic_notes.ceramic.documents import TileDocumentStore
from ceramic_notes.config import CERAMIC_URL, NOTES_ALIAS, AppConfig
from ceramic_notes.models.note import NoteItem, notes_from_index
from ceramic_notes.models.state import Session
from ceramic_notes.protocols import ApiProtocol

SessionOpener = Callable[[bytes], Awaitable[tuple[Session, list[NoteItem]]]]


def connect(seed: bytes, api: ApiProtocol) -> tuple[TileDocumentStore, str]:
    """Authenticate the seed's DID and return a document store acting as it."""
    provider = KeyDidProvider(seed)
    did = provider.authenticate()
    return TileDocumentStore(api, provider), did


async def open_session(
    seed: bytes, *, config: AppConfig, api: ApiProtocol | None = None
) -> tuple[Session, list[NoteItem]]:
    """Build session handles from ``seed`` and fetch the current notes index."""
    store, did = connect(seed, api or CeramicApi(CERAMIC_URL))
    directory = IdxDirectory(store, did, config.definitions)
    notes = notes_from_index(await directory.get(NOTES_ALIAS))
    return Session(did=did, store=store, directory=directory), notes


def session_opener(config: AppConfig, api: ApiProtocol | None = None) -> SessionOpener:
    """Bind ``open_session`` to a config (and optionally an API client)."""

    async def _open(seed: bytes) -> tuple[Session, list[NoteItem]]:
        return await open_session(seed, config=config, api=api)

    return _open
