"""Unit tests for ReplyCounter and reply counting on create/delete."""

import asyncio
from uuid import uuid4

import pytest

from discuss.domain.repository import CommentRepository
from discuss.domain.service import CommentService, ReplyCounter
from discuss.domain.value import SnippetId
from tests.conftest import make_comment, make_requester
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReplyCounter:
    """Tests for reply_count maintenance."""

    @pytest.mark.asyncio
    async def test_increment_adds_one(self, unit_env):
        """Each increment raises the count by exactly one."""
        # Arrange
        reply_counter = await unit_env.get(ReplyCounter)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.save(make_comment(SnippetId(uuid4())))

        # Act
        await reply_counter.increment(parent.id)
        await reply_counter.increment(parent.id)

        # Assert
        stored = await comment_repo.find_by_id(parent.id)
        assert stored.reply_count == 2

    @pytest.mark.asyncio
    async def test_concurrent_replies_are_all_counted(self, unit_env):
        """N concurrent replies leave reply_count at exactly N."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        snippet_id = SnippetId(uuid4())
        parent = await comment_repo.save(make_comment(snippet_id))
        replies = 25

        # Act
        await asyncio.gather(
            *(
                comment_service.create_comment(
                    snippet_id=snippet_id,
                    author_id=make_requester().user_id,
                    body=f"reply {i}",
                    parent_id=parent.id,
                )
                for i in range(replies)
            )
        )

        # Assert
        stored = await comment_repo.find_by_id(parent.id)
        assert stored.reply_count == replies

    @pytest.mark.asyncio
    async def test_deleting_reply_keeps_count(self, unit_env):
        """Tombstoning a reply never decrements its parent's count."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        snippet_id = SnippetId(uuid4())
        author = make_requester()
        parent = await comment_repo.save(make_comment(snippet_id))
        reply = await comment_service.create_comment(
            snippet_id=snippet_id,
            author_id=author.user_id,
            body="first!",
            parent_id=parent.id,
        )

        # Act
        await comment_service.soft_delete_comment(reply.id, author)

        # Assert
        stored = await comment_repo.find_by_id(parent.id)
        assert stored.reply_count == 1

    @pytest.mark.asyncio
    async def test_flattened_reply_counts_on_top_level(self, unit_env):
        """A reply to a reply is counted on the top-level comment only."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        snippet_id = SnippetId(uuid4())
        author = make_requester()
        top = await comment_repo.save(make_comment(snippet_id))
        reply = await comment_service.create_comment(
            snippet_id, author.user_id, "reply", parent_id=top.id
        )

        # Act
        nested = await comment_service.create_comment(
            snippet_id, author.user_id, "nested", parent_id=reply.id
        )

        # Assert
        assert nested.parent_id == top.id
        assert (await comment_repo.find_by_id(top.id)).reply_count == 2
        assert (await comment_repo.find_by_id(reply.id)).reply_count == 0
