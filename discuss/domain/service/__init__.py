"""Domain services."""

from .base import Service, parse_value
from .comment_query_service import CommentQueryService
from .comment_service import CommentService
from .flag_service import FlagResult, FlagService
from .jwt_service import JWTService
from .permission_service import PermissionService
from .reply_counter import ReplyCounter
from .snippet_guard import SnippetGuard
from .thread_service import ThreadService

__all__ = [
    "CommentQueryService",
    "CommentService",
    "FlagResult",
    "FlagService",
    "JWTService",
    "PermissionService",
    "ReplyCounter",
    "Service",
    "SnippetGuard",
    "ThreadService",
    "parse_value",
]
