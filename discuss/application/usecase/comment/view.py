"""Response shapes shared by the comment use cases."""

from datetime import datetime

from discuss.application.usecase.base import CamelModel
from discuss.domain.model import Comment, CommentFlag, PaginationMeta


class CommentItem(CamelModel):
    """Comment as returned to clients.

    Tombstoned comments keep their place in listings but their body is
    withheld.
    """

    id: str
    snippet_id: str
    author_id: str | None
    parent_id: str | None
    body: str | None
    status: str
    reply_count: int
    is_deleted: bool
    edited_at: datetime | None
    deleted_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=str(comment.id),
            snippet_id=str(comment.snippet_id),
            author_id=str(comment.author_id) if comment.author_id else None,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            body=None if comment.is_deleted else comment.body,
            status=comment.status.value,
            reply_count=comment.reply_count,
            is_deleted=comment.is_deleted,
            edited_at=comment.edited_at,
            deleted_at=comment.deleted_at,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class PaginationMetaItem(CamelModel):
    """Pagination metadata as returned to clients."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> "PaginationMetaItem":
        return cls(**meta.model_dump())


class FlagItem(CamelModel):
    """Flag as returned to moderators."""

    id: str
    comment_id: str
    reporter_id: str
    reason: str
    message: str | None
    created_at: datetime

    @classmethod
    def from_flag(cls, flag: CommentFlag) -> "FlagItem":
        return cls(
            id=str(flag.id),
            comment_id=str(flag.comment_id),
            reporter_id=str(flag.reporter_id),
            reason=flag.reason.value,
            message=flag.message,
            created_at=flag.created_at,
        )
