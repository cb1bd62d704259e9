"""Domain value objects for comment threads.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from discuss.domain.value.common import RootValueObject, ValueObject
from discuss.domain.value.identifiers import UserId

BODY_MAX_LENGTH = 5000
FLAG_MESSAGE_MAX_LENGTH = 500


class Role(str, Enum):
    """Role of an authenticated user, resolved by the identity provider."""

    USER = "USER"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"


class CommentStatus(str, Enum):
    """Moderation status of a comment.

    - visible: shown to everyone
    - hidden: hidden by a moderator
    - flagged: awaiting moderation
    """

    VISIBLE = "visible"
    HIDDEN = "hidden"
    FLAGGED = "flagged"


class FlagReason(str, Enum):
    """Reason a comment was reported."""

    SPAM = "spam"
    ABUSE = "abuse"
    OFF_TOPIC = "off-topic"
    OTHER = "other"


class SortOrder(str, Enum):
    """Direction of a listing on created_at."""

    ASC = "asc"
    DESC = "desc"


class CommentBody(RootValueObject[str]):
    """Plain-text comment body.

    Surrounding whitespace is trimmed; the trimmed text must be
    1-5000 characters. The body is never interpreted as markup.
    """

    @field_validator("root")
    @classmethod
    def validate_body(cls, v: str) -> str:
        """Trim and validate body length."""
        v = v.strip()
        if not v:
            raise ValueError("Comment body is required")
        if len(v) > BODY_MAX_LENGTH:
            raise ValueError(
                f"Comment body must be at most {BODY_MAX_LENGTH} characters"
            )
        return v


class FlagMessage(RootValueObject[str]):
    """Optional free-text explanation attached to a flag (trimmed, <= 500)."""

    @field_validator("root")
    @classmethod
    def validate_message(cls, v: str) -> str:
        """Trim and validate message length."""
        v = v.strip()
        if len(v) > FLAG_MESSAGE_MAX_LENGTH:
            raise ValueError(
                f"Message must be at most {FLAG_MESSAGE_MAX_LENGTH} characters"
            )
        return v


class Requester(ValueObject):
    """Already-authenticated identity on whose behalf an operation runs."""

    user_id: UserId
    role: Role = Role.USER
