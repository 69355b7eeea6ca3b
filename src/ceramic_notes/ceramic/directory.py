"""Per-identity keyed-document directory (IDX).

Each DID owns one deterministic index document mapping definition ids to
record URLs. Aliases such as ``"notes"`` are resolved to definition ids
through the bootstrap config.
"""

from typing import Any

from loguru import logger

from ceramic_notes.errors import ConfigError
from ceramic_notes.protocols import DocumentProtocol, DocumentStoreProtocol

IDX_FAMILY = "IDX"


class IdxDirectory:
    """Reads and writes records addressed by alias for a single DID."""

    def __init__(self, store: DocumentStoreProtocol, did: str, aliases: dict[str, str]) -> None:
        self._store = store
        self._did = did
        self._aliases = dict(aliases)
        self._index: DocumentProtocol | None = None

    @property
    def id(self) -> str:
        return self._did

    def definition_id(self, alias: str) -> str:
        try:
            return self._aliases[alias]
        except KeyError:
            msg = f"Unknown directory alias {alias!r}, known: {sorted(self._aliases)!r}"
            raise ConfigError(msg) from None

    async def _get_index(self) -> DocumentProtocol:
        if self._index is None:
            self._index = await self._store.create(
                {}, controllers=[self._did], family=IDX_FAMILY, deterministic=True
            )
        return self._index

    async def _get_record(self, definition_id: str) -> DocumentProtocol | None:
        index = await self._get_index()
        record_url = index.content.get(definition_id)
        if not record_url:
            return None
        return await self._store.load(record_url)

    async def get(self, alias: str) -> dict[str, Any] | None:
        """Return the record content for ``alias``, or None if never set."""
        record = await self._get_record(self.definition_id(alias))
        return None if record is None else record.content

    async def set(self, alias: str, content: dict[str, Any]) -> str:
        """Write the record for ``alias``, creating and indexing it on first use."""
        definition_id = self.definition_id(alias)
        record = await self._get_record(definition_id)
        if record is not None:
            await record.update(content)
            return record.id

        record = await self._store.create(
            content, controllers=[self._did], family=definition_id, deterministic=True
        )
        index = await self._get_index()
        await index.update({**index.content, definition_id: record.url})
        logger.debug("Indexed {} as {}", alias, record.url)
        return record.id
