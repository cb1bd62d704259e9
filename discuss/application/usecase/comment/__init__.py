"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .engine import CommentEngine
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
from .view import CommentItem, FlagItem, PaginationMetaItem

__all__ = [
    "CommentEngine",
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "FlagCommentRequest",
    "FlagCommentResponse",
    "FlagCommentUseCase",
    "FlagItem",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ListFlagsRequest",
    "ListFlagsResponse",
    "ListFlagsUseCase",
    "PaginationMetaItem",
    "UnflagCommentRequest",
    "UnflagCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
