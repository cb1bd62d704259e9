"""Comment engine facade.

One entry point for everything the API does with comments. Each method
builds the use case request and delegates to the matching use case.
"""

from discuss.domain.value import (
    CommentId,
    FlagReason,
    Requester,
    SnippetId,
    SortOrder,
)

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .flag_comment import FlagCommentRequest, FlagCommentResponse, FlagCommentUseCase
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from .list_flags import ListFlagsRequest, ListFlagsResponse, ListFlagsUseCase
from .unflag_comment import UnflagCommentRequest, UnflagCommentUseCase
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)


class CommentEngine:
    """Facade over the comment use cases."""

    def __init__(
        self,
        create_comment: CreateCommentUseCase,
        update_comment: UpdateCommentUseCase,
        delete_comment: DeleteCommentUseCase,
        get_comment: GetCommentUseCase,
        list_comments: ListCommentsUseCase,
        flag_comment: FlagCommentUseCase,
        unflag_comment: UnflagCommentUseCase,
        list_flags: ListFlagsUseCase,
    ) -> None:
        self._create_comment = create_comment
        self._update_comment = update_comment
        self._delete_comment = delete_comment
        self._get_comment = get_comment
        self._list_comments = list_comments
        self._flag_comment = flag_comment
        self._unflag_comment = unflag_comment
        self._list_flags = list_flags

    async def create(
        self,
        snippet_id: SnippetId,
        requester: Requester,
        body: str,
        parent_id: CommentId | None = None,
    ) -> CreateCommentResponse:
        """Create a top-level comment, or a reply when parent_id is given."""
        return await self._create_comment.execute(
            CreateCommentRequest(
                snippet_id=snippet_id,
                body=body,
                requester=requester,
                parent_id=parent_id,
            )
        )

    async def edit(
        self, comment_id: CommentId, requester: Requester, body: str
    ) -> UpdateCommentResponse:
        """Replace a comment's body."""
        return await self._update_comment.execute(
            UpdateCommentRequest(comment_id=comment_id, body=body, requester=requester)
        )

    async def delete(self, comment_id: CommentId, requester: Requester) -> None:
        """Tombstone a comment (idempotent)."""
        await self._delete_comment.execute(
            DeleteCommentRequest(comment_id=comment_id, requester=requester)
        )

    async def get(
        self, comment_id: CommentId, requester: Requester | None = None
    ) -> GetCommentResponse:
        """Read a single comment."""
        return await self._get_comment.execute(
            GetCommentRequest(comment_id=comment_id, requester=requester)
        )

    async def list(
        self,
        snippet_id: SnippetId,
        requester: Requester | None = None,
        parent_id: CommentId | None = None,
        page: int | None = None,
        limit: int | None = None,
        order: SortOrder | None = None,
    ) -> ListCommentsResponse:
        """List the top-level feed, or one comment's replies when parent_id is given."""
        return await self._list_comments.execute(
            ListCommentsRequest(
                snippet_id=snippet_id,
                requester=requester,
                parent_id=parent_id,
                page=page,
                limit=limit,
                order=order,
            )
        )

    async def flag(
        self,
        comment_id: CommentId,
        reporter: Requester,
        reason: FlagReason,
        message: str | None = None,
    ) -> FlagCommentResponse:
        """Report a comment (idempotent per reporter and reason)."""
        return await self._flag_comment.execute(
            FlagCommentRequest(
                comment_id=comment_id,
                reporter=reporter,
                reason=reason,
                message=message,
            )
        )

    async def unflag(
        self, comment_id: CommentId, reporter: Requester, reason: FlagReason
    ) -> None:
        """Withdraw a report, if present."""
        await self._unflag_comment.execute(
            UnflagCommentRequest(comment_id=comment_id, reporter=reporter, reason=reason)
        )

    async def list_flags(
        self, comment_id: CommentId, requester: Requester
    ) -> ListFlagsResponse:
        """List reports on a comment for moderators."""
        return await self._list_flags.execute(
            ListFlagsRequest(comment_id=comment_id, requester=requester)
        )
