"""Domain model entities for comment threads."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.flag import CommentFlag
from discuss.domain.model.page import CommentPage, PaginationMeta
from discuss.domain.model.thread import Reply, ThreadPlacement, TopLevel

__all__ = [
    "Comment",
    "CommentFlag",
    "CommentPage",
    "PaginationMeta",
    "Reply",
    "ThreadPlacement",
    "TopLevel",
]
