"""Snippet read-access capability.

Snippets are owned outside the comment engine. The engine only asks
whether a requester may read one.
"""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.value import Requester, SnippetId


class SnippetAccess(ABC):
    """Answers "can requester read snippet S" with allow/deny."""

    @abstractmethod
    async def can_read(
        self, snippet_id: SnippetId, requester: Optional[Requester]
    ) -> bool:
        """Check whether the requester may read the snippet.

        Missing snippets are reported the same way as unreadable ones.

        Args:
            snippet_id: Snippet ID
            requester: Authenticated requester, or None for anonymous reads

        Returns:
            True if the snippet exists and is readable by the requester
        """
        pass
