"""Ceramic node HTTP API client."""

import logging
from typing import Any

import requests

from ceramic_notes.config import CERAMIC_URL
from ceramic_notes.errors import CeramicApiError
from ceramic_notes.models.note import stream_id_from_url

# Stream type of tile documents.
TILE_STREAM_TYPE = 0


class CeramicApi:
    """Thin wrapper over the node's ``/api/v0`` endpoints."""

    def __init__(self, base_url: str = CERAMIC_URL, *, timeout: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.sess = requests.Session()
        self.logger = logging.getLogger("ceramic")
        self.logger.debug(f"API ready: node {self.base_url!r}")

    def call(self, method: str, path: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
        """Invoke a node endpoint, return json."""
        self.logger.debug(f"Making request: {method} {path!r} {repr(payload)[:32]}")
        r = self.sess.request(
            method,
            f"{self.base_url}/api/v0/{path}",
            json=payload,
            timeout=self.timeout,
        )
        if not r.ok:
            try:
                detail = r.json().get("error", r.text)
            except ValueError:
                detail = r.text
            msg = f"API call failed: ({method} {path!r}) -> ({r.status_code}, {detail!r})"
            raise CeramicApiError(msg, status_code=r.status_code)
        rv: dict[str, Any] = r.json()
        return rv

    def load_stream(self, stream_id: str) -> dict[str, Any]:
        return self.call("GET", f"streams/{stream_id_from_url(stream_id)}")

    def create_stream(
        self, genesis: dict[str, Any], *, stream_type: int = TILE_STREAM_TYPE
    ) -> dict[str, Any]:
        return self.call(
            "POST",
            "streams",
            {"type": stream_type, "genesis": genesis, "opts": {"anchor": True, "publish": True}},
        )

    def apply_commit(self, stream_id: str, commit: dict[str, Any]) -> dict[str, Any]:
        return self.call(
            "POST",
            "commits",
            {
                "streamId": stream_id_from_url(stream_id),
                "commit": commit,
                "opts": {"anchor": True, "publish": True},
            },
        )
