"""Read guard for resources nested under a snippet."""

from typing import Optional

import logfire

from discuss.domain.error import NotFoundError
from discuss.domain.model import Comment
from discuss.domain.repository import SnippetAccess
from discuss.domain.value import Requester, SnippetId

from .base import Service


class SnippetGuard(Service):
    """Shared anti-enumeration guard for snippet-scoped resources.

    A snippet that is missing and a snippet the requester may not read
    produce the same NotFoundError, never an authorization error.
    """

    def __init__(self, snippet_access: SnippetAccess) -> None:
        """Initialize snippet guard.

        Args:
            snippet_access: Snippet read-access capability
        """
        self.snippet_access = snippet_access

    async def assert_readable(
        self, snippet_id: SnippetId, requester: Optional[Requester]
    ) -> None:
        """Ensure the snippet exists and is readable by the requester.

        Args:
            snippet_id: Snippet ID
            requester: Authenticated requester, or None for anonymous reads

        Raises:
            NotFoundError: If the snippet is missing or not readable
        """
        with logfire.span(
            "snippet_guard.assert_readable",
            snippet_id=str(snippet_id),
            user_id=str(requester.user_id) if requester else None,
        ):
            if not await self.snippet_access.can_read(snippet_id, requester):
                logfire.warn("Snippet not readable", snippet_id=str(snippet_id))
                raise NotFoundError("Snippet", str(snippet_id))

    async def assert_comment_readable(
        self, comment: Comment, requester: Optional[Requester]
    ) -> None:
        """Ensure the comment's snippet is readable by the requester.

        Unreadable comments are reported as missing comments, so the error
        is identical to the one for an unknown comment ID.

        Raises:
            NotFoundError: If the comment's snippet is missing or not readable
        """
        try:
            await self.assert_readable(comment.snippet_id, requester)
        except NotFoundError:
            raise NotFoundError("Comment", str(comment.id)) from None
