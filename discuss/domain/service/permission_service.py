"""Comment ownership and moderation permissions."""

from typing import Iterable, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import Requester, Role

from .base import Service


class PermissionService(Service):
    """Decides who may manage a comment.

    Authors manage their own comments; admin-equivalent roles manage all.
    """

    def __init__(self, admin_roles: Iterable[str]) -> None:
        """Initialize permission service.

        Args:
            admin_roles: Role names treated as admin-equivalent
        """
        self.admin_roles = frozenset(Role(role) for role in admin_roles)

    def is_admin(self, requester: Optional[Requester]) -> bool:
        """Check whether the requester holds an admin-equivalent role."""
        return requester is not None and requester.role in self.admin_roles

    def is_author(self, comment: Comment, requester: Optional[Requester]) -> bool:
        """Check whether the requester wrote the comment."""
        return (
            requester is not None
            and comment.author_id is not None
            and comment.author_id == requester.user_id
        )

    def can_manage(self, comment: Comment, requester: Optional[Requester]) -> bool:
        """Check whether the requester may edit or delete the comment."""
        return self.is_author(comment, requester) or self.is_admin(requester)
