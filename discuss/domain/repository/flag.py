"""Comment flag repository interface."""

from abc import ABC, abstractmethod
from typing import List

from discuss.domain.model.flag import CommentFlag
from discuss.domain.value import CommentId, FlagReason, UserId


class FlagRepository(ABC):
    """Repository for CommentFlag entity.

    Defines the contract for flag persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def add(self, flag: CommentFlag) -> bool:
        """Insert a flag unless one exists for the same comment/reporter/reason.

        Must rely on the store's uniqueness guarantee rather than a prior
        existence check, so concurrent duplicates insert at most one row.

        Args:
            flag: The flag to insert

        Returns:
            True if a row was inserted, False if it already existed
        """
        pass

    @abstractmethod
    async def remove(
        self, comment_id: CommentId, reporter_id: UserId, reason: FlagReason
    ) -> bool:
        """Delete the flag for a comment/reporter/reason if present.

        Args:
            comment_id: Comment ID
            reporter_id: Reporter user ID
            reason: Flag reason

        Returns:
            True if a flag was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[CommentFlag]:
        """Find all flags on a comment, oldest first.

        Args:
            comment_id: Comment ID

        Returns:
            List of flags
        """
        pass
