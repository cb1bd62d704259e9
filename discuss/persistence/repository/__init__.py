"""PostgreSQL repository implementations."""

from discuss.persistence.repository.comment import PostgresCommentRepository
from discuss.persistence.repository.flag import PostgresFlagRepository
from discuss.persistence.repository.snippet_access import PostgresSnippetAccess

__all__ = [
    "PostgresCommentRepository",
    "PostgresFlagRepository",
    "PostgresSnippetAccess",
]
