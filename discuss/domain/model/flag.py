"""Comment flag entity.

Flags are moderation reports. Each reporter can flag a comment once per
reason; repeating the same report is a no-op.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, FlagId, FlagReason, UserId


class CommentFlag(DomainModel):
    """Comment flag entity.

    Business rules:
    - One flag per (comment, reporter, reason) (enforced by database unique constraint)
    - Reporters cannot flag their own comments
    - Tombstoned comments stop accepting flags
    """

    id: FlagId
    comment_id: CommentId
    reporter_id: UserId
    reason: FlagReason
    message: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now)
