"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .flag import InMemoryFlagRepository
from .snippet_access import InMemorySnippetAccess
from .store import InMemoryStore, StoredSnippet

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryFlagRepository",
    "InMemorySnippetAccess",
    "InMemoryStore",
    "StoredSnippet",
]
