"""Protocols for the external collaborators of the notes client."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ApiProtocol(Protocol):
    """Protocol for Ceramic node HTTP clients."""

    def load_stream(self, stream_id: str) -> dict[str, Any]:
        """Return the current state of a stream."""
        ...

    def create_stream(self, genesis: dict[str, Any], *, stream_type: int = 0) -> dict[str, Any]:
        """Submit a signed genesis commit and return the new stream state."""
        ...

    def apply_commit(self, stream_id: str, commit: dict[str, Any]) -> dict[str, Any]:
        """Submit a signed update commit and return the updated stream state."""
        ...


@runtime_checkable
class SignerProtocol(Protocol):
    """Protocol for the identity that signs commits."""

    @property
    def id(self) -> str:
        """The DID of the authenticated identity."""
        ...

    def sign(self, payload: bytes) -> dict[str, Any]:
        """Return a general-serialization JWS over the payload bytes."""
        ...


@runtime_checkable
class DocumentProtocol(Protocol):
    """Protocol for a mutable, versioned document on the network."""

    @property
    def id(self) -> str:
        """Bare stream identifier."""
        ...

    @property
    def url(self) -> str:
        """Stream identifier in ``ceramic://`` URL form."""
        ...

    @property
    def commit_url(self) -> str:
        """URL pinned to the latest known commit (``?version=``)."""
        ...

    @property
    def content(self) -> dict[str, Any]:
        """Latest known content."""
        ...

    async def update(self, content: dict[str, Any]) -> None:
        """Replace the document content."""
        ...


@runtime_checkable
class DocumentStoreProtocol(Protocol):
    """Protocol for creating and loading documents."""

    async def create(
        self,
        content: dict[str, Any],
        *,
        controllers: list[str],
        schema: str | None = None,
        family: str | None = None,
        deterministic: bool = False,
    ) -> DocumentProtocol:
        """Create a document owned by ``controllers``."""
        ...

    async def load(self, stream_id: str) -> DocumentProtocol:
        """Load a document by stream id or URL."""
        ...


@runtime_checkable
class DirectoryProtocol(Protocol):
    """Protocol for the per-identity alias -> document directory."""

    @property
    def id(self) -> str:
        """DID owning the directory."""
        ...

    async def get(self, alias: str) -> dict[str, Any] | None:
        """Return the content stored under ``alias``, or None if unset."""
        ...

    async def set(self, alias: str, content: dict[str, Any]) -> str:
        """Store content under ``alias``; return the record stream id."""
        ...
