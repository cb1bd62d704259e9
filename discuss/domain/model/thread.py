"""Thread placement of a new comment.

A comment is written either as top-level or as a reply to a top-level
comment. The placement is decided before the insert and never changes.
"""

from typing import Literal, Optional, Union

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId


class TopLevel(DomainModel):
    """Comment attached directly to the snippet."""

    kind: Literal["top_level"] = "top_level"

    @property
    def parent_id(self) -> Optional[CommentId]:
        return None


class Reply(DomainModel):
    """Comment attached to a top-level comment."""

    kind: Literal["reply"] = "reply"
    parent_id: CommentId


ThreadPlacement = Union[TopLevel, Reply]
