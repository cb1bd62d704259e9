"""Comment entity.

Comments form single-level threads on a snippet: a comment is either
top-level (no parent) or a reply to a top-level comment. Replies to
replies are reparented to the top-level ancestor when written.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, CommentStatus, SnippetId, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Top-level ancestor (None for top-level comments)
    - reply_count: Number of replies ever inserted under a top-level comment.
      Never decremented, so tombstoned replies still count.

    Deletion is a tombstone (deleted_at); the row stays in listings.
    """

    id: CommentId
    snippet_id: SnippetId
    author_id: Optional[UserId]  # None once the author account is removed
    parent_id: Optional[CommentId] = None
    body: str = Field(min_length=1)
    status: CommentStatus = CommentStatus.VISIBLE
    reply_count: int = Field(default=0, ge=0)
    edited_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
