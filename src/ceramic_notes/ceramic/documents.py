"""Tile documents: JSON content streams created and updated through signed commits."""

import asyncio
import secrets
from typing import Any

import requests
from loguru import logger

from ceramic_notes.ceramic.commits import base64_string, link, signed_commit
from ceramic_notes.errors import CeramicApiError, FetchError, WriteError
from ceramic_notes.models.note import stream_id_from_url, stream_url
from ceramic_notes.protocols import ApiProtocol, SignerProtocol


def _unwrap(response: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Split a node response into (stream id, stream state)."""
    try:
        return response["streamId"], response["state"]
    except KeyError as e:
        msg = f"Unexpected stream response, keys {sorted(response)!r}"
        raise CeramicApiError(msg) from e


class TileDocument:
    """A loaded tile document. ``content`` reflects the last state seen from the node."""

    def __init__(
        self, api: ApiProtocol, signer: SignerProtocol, stream_id: str, state: dict[str, Any]
    ) -> None:
        self._api = api
        self._signer = signer
        self._id = stream_id_from_url(stream_id)
        self._state = state

    def __repr__(self) -> str:
        return f"TileDocument({self._id!r})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def url(self) -> str:
        return stream_url(self._id)

    @property
    def commit_url(self) -> str:
        log = self.commit_ids
        return f"{self.url}?version={log[-1]}" if log else self.url

    @property
    def content(self) -> dict[str, Any]:
        return self._state.get("content") or {}

    @property
    def commit_ids(self) -> list[str]:
        return [entry["cid"] for entry in self._state.get("log", [])]

    async def update(self, content: dict[str, Any]) -> None:
        """Replace the whole content with a signed JSON-patch commit."""
        log = self.commit_ids
        if not log:
            msg = f"Stream {self._id!r} has no commit log, cannot update"
            raise WriteError(msg)
        commit = signed_commit(
            self._signer,
            {
                "header": {},
                "data": [{"op": "replace", "path": "", "value": content}],
                "prev": link(log[-1]),
                "id": link(log[0]),
            },
        )
        try:
            response = await asyncio.to_thread(self._api.apply_commit, self._id, commit)
        except (CeramicApiError, requests.RequestException) as e:
            msg = f"Failed to update {self._id!r}: {e}"
            raise WriteError(msg) from e
        _, self._state = _unwrap(response)
        logger.debug("Updated {}", self._id)


class TileDocumentStore:
    """Creates and loads tile documents as the signer's identity."""

    def __init__(self, api: ApiProtocol, signer: SignerProtocol) -> None:
        self._api = api
        self._signer = signer

    async def create(
        self,
        content: dict[str, Any],
        *,
        controllers: list[str],
        schema: str | None = None,
        family: str | None = None,
        deterministic: bool = False,
    ) -> TileDocument:
        """Create a document.

        A deterministic document has an unsigned, content-free genesis, so the
        same header always yields the same stream id; ``content`` is then
        applied as a first update when non-empty.
        """
        header: dict[str, Any] = {"controllers": controllers}
        if schema:
            header["schema"] = schema
        if family:
            header["family"] = family

        genesis: dict[str, Any]
        if deterministic:
            genesis = {"header": header, "data": None}
        else:
            header["unique"] = base64_string(secrets.token_bytes(12))
            genesis = signed_commit(self._signer, {"header": header, "data": content})

        try:
            response = await asyncio.to_thread(self._api.create_stream, genesis)
        except (CeramicApiError, requests.RequestException) as e:
            msg = f"Failed to create document: {e}"
            raise WriteError(msg) from e
        stream_id, state = _unwrap(response)
        doc = TileDocument(self._api, self._signer, stream_id, state)
        logger.debug("Created {}", doc.id)

        if deterministic and content and doc.content != content:
            await doc.update(content)
        return doc

    async def load(self, stream_id: str) -> TileDocument:
        try:
            response = await asyncio.to_thread(self._api.load_stream, stream_id)
        except (CeramicApiError, requests.RequestException) as e:
            msg = f"Failed to load {stream_id!r}: {e}"
            raise FetchError(msg) from e
        loaded_id, state = _unwrap(response)
        return TileDocument(self._api, self._signer, loaded_id, state)
