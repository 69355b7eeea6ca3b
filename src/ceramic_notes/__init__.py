"""Simple text notes stored on a Ceramic node."""

from ceramic_notes.api import CeramicApi
from ceramic_notes.core.app import NotesApp
from ceramic_notes.core.reducer import reduce
from ceramic_notes.core.store import Store
from ceramic_notes.models.state import State

__all__ = ["CeramicApi", "NotesApp", "State", "Store", "reduce"]
