"""Exception hierarchy for the notes client."""


class NotesError(RuntimeError):
    """Base class for all errors raised by ceramic-notes."""


class ConfigError(NotesError):
    """Missing or malformed configuration (seed, generated config file)."""


class CeramicApiError(NotesError):
    """The Ceramic node rejected a request."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthError(NotesError):
    """The identity could not be authenticated."""


class FetchError(NotesError):
    """A document or the notes index could not be read."""


class WriteError(NotesError):
    """A document or the notes index could not be written."""
