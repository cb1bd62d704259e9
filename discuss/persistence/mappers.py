"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from discuss.domain.model import Comment, CommentFlag
from discuss.domain.value import (
    CommentId,
    CommentStatus,
    FlagId,
    FlagReason,
    SnippetId,
    UserId,
)


def _uuid(value: Any) -> Optional[UUID]:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    author_id = _uuid(row.get("author_id"))
    parent_id = _uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        snippet_id=SnippetId(_uuid(row["snippet_id"])),
        author_id=UserId(author_id) if author_id else None,
        parent_id=CommentId(parent_id) if parent_id else None,
        body=row["body"],
        status=CommentStatus(row["status"]),
        reply_count=row["reply_count"],
        edited_at=row.get("edited_at"),
        deleted_at=row.get("deleted_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    # Enums are stored by value in the PostgreSQL enum columns
    return comment.model_dump(mode="python") | {"status": comment.status.value}


def row_to_flag(row: Dict[str, Any]) -> CommentFlag:
    """Convert database row to CommentFlag domain model.

    Args:
        row: Database row as dict

    Returns:
        CommentFlag domain model
    """
    return CommentFlag(
        id=FlagId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        reason=FlagReason(row["reason"]),
        message=row.get("message"),
        created_at=row["created_at"],
    )


def flag_to_dict(flag: CommentFlag) -> Dict[str, Any]:
    """Convert CommentFlag domain model to database dict.

    Args:
        flag: CommentFlag domain model

    Returns:
        Dict suitable for database insertion
    """
    return flag.model_dump(mode="python") | {"reason": flag.reason.value}
