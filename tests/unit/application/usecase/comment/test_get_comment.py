"""Unit tests for GetCommentUseCase."""

from uuid import uuid4

import pytest

from discuss.application.usecase.comment import GetCommentRequest, GetCommentUseCase
from discuss.domain.error import NotFoundError
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, Role, SnippetId
from discuss.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_comment, make_requester
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentUseCase:
    """Tests for reading a single comment."""

    @pytest.mark.asyncio
    async def test_comment_on_private_snippet_is_not_found(self, unit_env):
        """Comments inherit the visibility of their snippet."""
        # Arrange
        use_case = await unit_env.get(GetCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        store = await unit_env.get(InMemoryStore)
        snippet_id = SnippetId(uuid4())
        store.add_snippet(snippet_id, make_requester().user_id, is_public=False)
        comment = await comment_repo.save(make_comment(snippet_id))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetCommentRequest(comment_id=comment.id, requester=make_requester())
            )

    @pytest.mark.asyncio
    async def test_author_reads_own_deleted_comment_without_body(self, unit_env):
        """Authors can still open their tombstones; the body stays withheld."""
        # Arrange
        use_case = await unit_env.get(GetCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        store = await unit_env.get(InMemoryStore)
        author = make_requester()
        snippet_id = SnippetId(uuid4())
        store.add_snippet(snippet_id, author.user_id)
        comment = await comment_repo.save(
            make_comment(snippet_id, author_id=author.user_id, deleted=True)
        )

        # Act
        result = await use_case.execute(
            GetCommentRequest(comment_id=comment.id, requester=author)
        )

        # Assert
        assert result.is_deleted is True
        assert result.body is None
        assert result.deleted_at is not None

    @pytest.mark.asyncio
    async def test_anonymous_reader_cannot_see_deleted_comment(self, unit_env):
        """Tombstones read as missing for everyone but the author and admins."""
        # Arrange
        use_case = await unit_env.get(GetCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        store = await unit_env.get(InMemoryStore)
        snippet_id = SnippetId(uuid4())
        store.add_snippet(snippet_id, make_requester().user_id)
        comment = await comment_repo.save(make_comment(snippet_id, deleted=True))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentRequest(comment_id=comment.id))

    @pytest.mark.asyncio
    async def test_admin_reads_deleted_comment(self, unit_env):
        """Admins can open any tombstone."""
        # Arrange
        use_case = await unit_env.get(GetCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        store = await unit_env.get(InMemoryStore)
        snippet_id = SnippetId(uuid4())
        store.add_snippet(snippet_id, make_requester().user_id)
        comment = await comment_repo.save(make_comment(snippet_id, deleted=True))

        # Act
        result = await use_case.execute(
            GetCommentRequest(comment_id=comment.id, requester=make_requester(Role.ADMIN))
        )

        # Assert
        assert result.id == str(comment.id)

    @pytest.mark.asyncio
    async def test_unknown_comment_is_not_found(self, unit_env):
        """Missing comments raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(GetCommentUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentRequest(comment_id=CommentId(uuid4())))
