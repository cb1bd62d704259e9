"""In-memory comment flag repository for testing."""

from discuss.domain.model.flag import CommentFlag
from discuss.domain.repository.flag import FlagRepository
from discuss.domain.value import CommentId, FlagReason, UserId

from .store import InMemoryStore


class InMemoryFlagRepository(FlagRepository):
    """In-memory implementation of FlagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _index(
        self, comment_id: CommentId, reporter_id: UserId, reason: FlagReason
    ) -> int | None:
        for i, flag in enumerate(self._store.flags):
            if (
                flag.comment_id == comment_id
                and flag.reporter_id == reporter_id
                and flag.reason == reason
            ):
                return i
        return None

    async def add(self, flag: CommentFlag) -> bool:
        """Insert a flag unless the same comment/reporter/reason exists."""
        if self._index(flag.comment_id, flag.reporter_id, flag.reason) is not None:
            return False

        self._store.flags.append(flag)
        return True

    async def remove(
        self, comment_id: CommentId, reporter_id: UserId, reason: FlagReason
    ) -> bool:
        """Delete a flag by comment, reporter and reason."""
        index = self._index(comment_id, reporter_id, reason)
        if index is None:
            return False

        self._store.flags.pop(index)
        return True

    async def find_by_comment(self, comment_id: CommentId) -> list[CommentFlag]:
        """Find all flags on a comment, oldest first."""
        flags = [f for f in self._store.flags if f.comment_id == comment_id]
        flags.sort(key=lambda f: (f.created_at, f.id))
        return flags
