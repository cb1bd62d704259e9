"""Repository interfaces for the comment domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from discuss.domain.repository.comment import CommentRepository
from discuss.domain.repository.flag import FlagRepository
from discuss.domain.repository.snippet_access import SnippetAccess

__all__ = [
    "CommentRepository",
    "FlagRepository",
    "SnippetAccess",
]
