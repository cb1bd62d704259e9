"""Comment flag (moderation report) domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel

from discuss.domain.error import InvalidStateError, NotAuthorizedError, NotFoundError
from discuss.domain.model.flag import CommentFlag
from discuss.domain.repository import CommentRepository, FlagRepository
from discuss.domain.value import (
    CommentId,
    FlagId,
    FlagMessage,
    FlagReason,
    Requester,
)

from .base import Service, parse_value
from .permission_service import PermissionService


class FlagResult(BaseModel):
    """Outcome of a flag submission."""

    created: bool


class FlagService(Service):
    """Domain service for flag operations.

    Flags are idempotent per (comment, reporter, reason): repeating a
    report neither errors nor adds a row.
    """

    def __init__(
        self,
        flag_repository: FlagRepository,
        comment_repository: CommentRepository,
        permission_service: PermissionService,
    ) -> None:
        """Initialize flag service.

        Args:
            flag_repository: Flag repository
            comment_repository: Comment repository
            permission_service: Ownership/role checks
        """
        self.flag_repository = flag_repository
        self.comment_repository = comment_repository
        self.permission_service = permission_service

    async def flag_comment(
        self,
        comment_id: CommentId,
        reporter: Requester,
        reason: FlagReason,
        message: str | None = None,
    ) -> FlagResult:
        """Flag a comment for moderation.

        Args:
            comment_id: Comment ID
            reporter: Reporting user
            reason: Flag reason
            message: Optional explanation (trimmed, at most 500 characters)

        Returns:
            FlagResult with created=False when the same flag already existed

        Raises:
            ValidationError: If the message is too long
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the reporter wrote the comment
            InvalidStateError: If the comment is tombstoned
        """
        flag_message = (
            parse_value(FlagMessage, message, "message").root
            if message is not None
            else None
        )

        with logfire.span(
            "flag_service.flag_comment",
            comment_id=str(comment_id),
            reporter_id=str(reporter.user_id),
            reason=reason.value,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))

            if self.permission_service.is_author(comment, reporter):
                logfire.warn(
                    "Self-flag attempt",
                    comment_id=str(comment_id),
                    reporter_id=str(reporter.user_id),
                )
                raise NotAuthorizedError(
                    "flag", "comment", str(comment_id), str(reporter.user_id)
                )

            if comment.is_deleted:
                logfire.warn("Flag on deleted comment", comment_id=str(comment_id))
                raise InvalidStateError("comment", str(comment_id), "comment is deleted")

            flag = CommentFlag(
                id=FlagId(uuid4()),
                comment_id=comment_id,
                reporter_id=reporter.user_id,
                reason=reason,
                message=flag_message or None,
                created_at=datetime.now(timezone.utc),
            )

            # Uniqueness is enforced by the store; no prior existence check
            created = await self.flag_repository.add(flag)

            if created:
                logfire.info(
                    "Comment flagged", comment_id=str(comment_id), reason=reason.value
                )
            else:
                logfire.info(
                    "Duplicate flag ignored",
                    comment_id=str(comment_id),
                    reporter_id=str(reporter.user_id),
                    reason=reason.value,
                )

            return FlagResult(created=created)

    async def unflag_comment(
        self, comment_id: CommentId, reporter: Requester, reason: FlagReason
    ) -> None:
        """Remove the reporter's flag for a reason, if present.

        Args:
            comment_id: Comment ID
            reporter: Reporting user
            reason: Flag reason
        """
        with logfire.span(
            "flag_service.unflag_comment",
            comment_id=str(comment_id),
            reporter_id=str(reporter.user_id),
            reason=reason.value,
        ):
            removed = await self.flag_repository.remove(
                comment_id, reporter.user_id, reason
            )
            if removed:
                logfire.info(
                    "Flag removed", comment_id=str(comment_id), reason=reason.value
                )
            else:
                logfire.info(
                    "No flag to remove", comment_id=str(comment_id), reason=reason.value
                )

    async def list_flags(
        self, comment_id: CommentId, requester: Requester
    ) -> list[CommentFlag]:
        """List all flags on a comment for moderators.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If requester is not admin-equivalent
        """
        with logfire.span(
            "flag_service.list_flags",
            comment_id=str(comment_id),
            user_id=str(requester.user_id),
        ):
            if not self.permission_service.is_admin(requester):
                raise NotAuthorizedError(
                    "list flags of", "comment", str(comment_id), str(requester.user_id)
                )

            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))

            flags = await self.flag_repository.find_by_comment(comment_id)
            logfire.info("Flags listed", comment_id=str(comment_id), count=len(flags))
            return flags
