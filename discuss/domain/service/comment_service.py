"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from discuss.domain.error import InvalidStateError, NotAuthorizedError, NotFoundError
from discuss.domain.model.comment import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import (
    CommentBody,
    CommentId,
    CommentStatus,
    Requester,
    SnippetId,
    UserId,
)

from .base import Service, parse_value
from .permission_service import PermissionService
from .reply_counter import ReplyCounter
from .thread_service import ThreadService


class CommentService(Service):
    """Domain service for the comment lifecycle.

    A comment is created once, edited while live and tombstoned at most
    once. Rows are never removed.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_service: ThreadService,
        reply_counter: ReplyCounter,
        permission_service: PermissionService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            thread_service: Thread placement service
            reply_counter: Reply counter for top-level comments
            permission_service: Ownership/role checks
        """
        self.comment_repository = comment_repository
        self.thread_service = thread_service
        self.reply_counter = reply_counter
        self.permission_service = permission_service

    async def create_comment(
        self,
        snippet_id: SnippetId,
        author_id: UserId,
        body: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        Replies to replies are reparented to the top-level ancestor.
        The parent's reply count is incremented in the same transaction
        as the insert.

        Args:
            snippet_id: Snippet ID
            author_id: Author user ID
            body: Untrusted comment text (trimmed before storing)
            parent_id: Comment being replied to (None for top-level)

        Returns:
            The stored comment

        Raises:
            ValidationError: If the body is blank or too long
            NotFoundError: If the parent is missing or on another snippet
        """
        comment_body = parse_value(CommentBody, body, "body")

        with logfire.span(
            "comment_service.create_comment",
            snippet_id=str(snippet_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            placement = await self.thread_service.classify(snippet_id, parent_id)

            now = datetime.now(timezone.utc)
            comment = Comment(
                id=CommentId(uuid4()),
                snippet_id=snippet_id,
                author_id=author_id,
                parent_id=placement.parent_id,
                body=comment_body.root,
                status=CommentStatus.VISIBLE,
                reply_count=0,
                edited_at=None,
                deleted_at=None,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)

            if saved.parent_id is not None:
                await self.reply_counter.increment(saved.parent_id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                snippet_id=str(snippet_id),
                parent_id=str(saved.parent_id) if saved.parent_id else None,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID, including tombstoned comments.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_visible_comment(
        self, comment_id: CommentId, requester: Requester | None
    ) -> Comment:
        """Get a single comment as seen by the requester.

        Tombstoned or moderated comments are only returned to their author
        or an admin-equivalent role.

        Raises:
            NotFoundError: If missing or not visible to the requester
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))

        hidden = comment.is_deleted or comment.status != CommentStatus.VISIBLE
        if hidden and not self.permission_service.can_manage(comment, requester):
            raise NotFoundError("Comment", str(comment_id))

        return comment

    async def edit_comment(
        self, comment_id: CommentId, requester: Requester, body: str
    ) -> Comment:
        """Replace a comment's body.

        Sets edited_at; created_at and reply_count are untouched.

        Args:
            comment_id: Comment ID
            requester: Author or admin-equivalent user
            body: Untrusted new text (trimmed before storing)

        Returns:
            The updated comment

        Raises:
            ValidationError: If the body is blank or too long
            NotFoundError: If the comment doesn't exist
            InvalidStateError: If the comment is tombstoned
            NotAuthorizedError: If requester is neither author nor admin
        """
        comment_body = parse_value(CommentBody, body, "body")

        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            user_id=str(requester.user_id),
            body_length=len(comment_body.root),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))

            if comment.is_deleted:
                logfire.warn("Edit on deleted comment", comment_id=str(comment_id))
                raise InvalidStateError("comment", str(comment_id), "comment is deleted")

            if not self.permission_service.can_manage(comment, requester):
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    user_id=str(requester.user_id),
                )
                raise NotAuthorizedError(
                    "edit", "comment", str(comment_id), str(requester.user_id)
                )

            updated = await self.comment_repository.update_body(
                comment_id, comment_body.root, datetime.now(timezone.utc)
            )

            # Tombstoned between the read and the update
            if updated is None:
                raise InvalidStateError("comment", str(comment_id), "comment is deleted")

            logfire.info("Comment edited", comment_id=str(comment_id))
            return updated

    async def soft_delete_comment(
        self, comment_id: CommentId, requester: Requester
    ) -> None:
        """Tombstone a comment.

        Idempotent: deleting a tombstoned comment succeeds without changes.
        Reply counts are never decremented.

        Args:
            comment_id: Comment ID
            requester: Author or admin-equivalent user

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If requester is neither author nor admin
        """
        with logfire.span(
            "comment_service.soft_delete_comment",
            comment_id=str(comment_id),
            user_id=str(requester.user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))

            if not self.permission_service.can_manage(comment, requester):
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    user_id=str(requester.user_id),
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(comment_id), str(requester.user_id)
                )

            if comment.is_deleted:
                logfire.info("Comment already deleted", comment_id=str(comment_id))
                return

            await self.comment_repository.mark_deleted(
                comment_id, datetime.now(timezone.utc)
            )
            logfire.info("Comment deleted", comment_id=str(comment_id))
