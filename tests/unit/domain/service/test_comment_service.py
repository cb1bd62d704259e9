"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from discuss.domain.error import (
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from discuss.domain.repository import CommentRepository
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, CommentStatus, Role, SnippetId, SortOrder
from tests.conftest import make_comment, make_requester
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment is stored live and visible with no replies."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        snippet_id = SnippetId(uuid4())
        author = make_requester()

        # Act
        result = await comment_service.create_comment(
            snippet_id=snippet_id, author_id=author.user_id, body="Nice loop"
        )

        # Assert
        assert result.parent_id is None
        assert result.body == "Nice loop"
        assert result.status == CommentStatus.VISIBLE
        assert result.reply_count == 0
        assert result.edited_at is None
        assert result.deleted_at is None
        assert result.created_at.tzinfo is not None

        saved = await comment_repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_body_is_trimmed(self, unit_env):
        """Surrounding whitespace is removed before storing."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act
        result = await comment_service.create_comment(
            SnippetId(uuid4()), make_requester().user_id, "  \n hello \t "
        )

        # Assert
        assert result.body == "hello"

    @pytest.mark.asyncio
    async def test_body_at_max_length_is_accepted(self, unit_env):
        """A 5000 character body is allowed."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act
        result = await comment_service.create_comment(
            SnippetId(uuid4()), make_requester().user_id, "x" * 5000
        )

        # Assert
        assert len(result.body) == 5000

    @pytest.mark.asyncio
    async def test_body_over_max_length_is_rejected(self, unit_env):
        """A 5001 character body fails validation on the body field."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await comment_service.create_comment(
                SnippetId(uuid4()), make_requester().user_id, "x" * 5001
            )
        assert exc_info.value.field == "body"

    @pytest.mark.asyncio
    async def test_blank_body_is_rejected(self, unit_env):
        """A whitespace-only body fails validation."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(ValidationError, match="required"):
            await comment_service.create_comment(
                SnippetId(uuid4()), make_requester().user_id, "   "
            )

    @pytest.mark.asyncio
    async def test_validation_happens_before_parent_lookup(self, unit_env):
        """An invalid body is reported even when the parent is also missing."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                SnippetId(uuid4()),
                make_requester().user_id,
                "",
                parent_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_reply_with_missing_parent_raises_not_found(self, unit_env):
        """Replying to an unknown comment fails without storing anything."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        snippet_id = SnippetId(uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                snippet_id,
                make_requester().user_id,
                "reply",
                parent_id=CommentId(uuid4()),
            )

        _, total = await comment_repo.find_by_snippet(
            snippet_id, None, order=SortOrder.DESC, limit=10, offset=0
        )
        assert total == 0


class TestEditComment:
    """Tests for edit_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """Editing replaces the body and sets edited_at only."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_requester()
        original = await comment_repo.save(
            make_comment(SnippetId(uuid4()), author_id=author.user_id)
        )

        # Act
        result = await comment_service.edit_comment(original.id, author, " updated ")

        # Assert
        assert result.body == "updated"
        assert result.edited_at is not None
        assert result.created_at == original.created_at
        assert result.reply_count == original.reply_count

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        """Non-authors without an admin role are refused."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(SnippetId(uuid4())))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.edit_comment(comment.id, make_requester(), "mine now")

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.body == comment.body

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [Role.ADMIN, Role.MODERATOR])
    async def test_admin_roles_can_edit_any_comment(self, unit_env, role):
        """Admin-equivalent roles edit other users' comments."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(SnippetId(uuid4())))

        # Act
        result = await comment_service.edit_comment(
            comment.id, make_requester(role), "moderated"
        )

        # Assert
        assert result.body == "moderated"

    @pytest.mark.asyncio
    async def test_edit_deleted_comment_raises_invalid_state(self, unit_env):
        """Tombstoned comments cannot be edited, even by their author."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_requester()
        comment = await comment_repo.save(
            make_comment(SnippetId(uuid4()), author_id=author.user_id, deleted=True)
        )

        # Act & Assert
        with pytest.raises(InvalidStateError):
            await comment_service.edit_comment(comment.id, author, "resurrect")

    @pytest.mark.asyncio
    async def test_edit_missing_comment_raises_not_found(self, unit_env):
        """Editing an unknown comment fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.edit_comment(
                CommentId(uuid4()), make_requester(), "text"
            )

    @pytest.mark.asyncio
    async def test_edit_with_blank_body_is_rejected(self, unit_env):
        """Edits go through the same body validation as creates."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_requester()
        comment = await comment_repo.save(
            make_comment(SnippetId(uuid4()), author_id=author.user_id)
        )

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.edit_comment(comment.id, author, "\n\n")


class TestSoftDeleteComment:
    """Tests for soft_delete_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        """Deleting sets deleted_at and keeps the row."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_requester()
        comment = await comment_repo.save(
            make_comment(SnippetId(uuid4()), author_id=author.user_id)
        )

        # Act
        await comment_service.soft_delete_comment(comment.id, author)

        # Assert
        stored = await comment_repo.find_by_id(comment.id)
        assert stored is not None
        assert stored.is_deleted

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, unit_env):
        """A second delete succeeds and leaves deleted_at unchanged."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_requester()
        comment = await comment_repo.save(
            make_comment(SnippetId(uuid4()), author_id=author.user_id)
        )
        await comment_service.soft_delete_comment(comment.id, author)
        first = await comment_repo.find_by_id(comment.id)

        # Act
        await comment_service.soft_delete_comment(comment.id, author)

        # Assert
        second = await comment_repo.find_by_id(comment.id)
        assert second.deleted_at == first.deleted_at

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """Non-authors without an admin role are refused."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(SnippetId(uuid4())))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.soft_delete_comment(comment.id, make_requester())

        assert not (await comment_repo.find_by_id(comment.id)).is_deleted

    @pytest.mark.asyncio
    async def test_admin_can_delete_any_comment(self, unit_env):
        """Admins tombstone other users' comments."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(SnippetId(uuid4())))

        # Act
        await comment_service.soft_delete_comment(comment.id, make_requester(Role.ADMIN))

        # Assert
        assert (await comment_repo.find_by_id(comment.id)).is_deleted

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises_not_found(self, unit_env):
        """Deleting an unknown comment fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.soft_delete_comment(
                CommentId(uuid4()), make_requester()
            )


class TestGetVisibleComment:
    """Tests for get_visible_comment method."""

    @pytest.mark.asyncio
    async def test_visible_comment_is_returned_to_anyone(self, unit_env):
        """Live visible comments are readable anonymously."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(SnippetId(uuid4())))

        # Act
        result = await comment_service.get_visible_comment(comment.id, None)

        # Assert
        assert result.id == comment.id

    @pytest.mark.asyncio
    async def test_deleted_comment_is_hidden_from_others(self, unit_env):
        """Tombstoned comments read as missing to non-authors."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(
            make_comment(SnippetId(uuid4()), deleted=True)
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.get_visible_comment(comment.id, make_requester())

    @pytest.mark.asyncio
    async def test_hidden_comment_is_returned_to_author(self, unit_env):
        """Authors still see their own moderated comments."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_requester()
        comment = await comment_repo.save(
            make_comment(
                SnippetId(uuid4()),
                author_id=author.user_id,
                status=CommentStatus.HIDDEN,
            )
        )

        # Act
        result = await comment_service.get_visible_comment(comment.id, author)

        # Assert
        assert result.status == CommentStatus.HIDDEN

    @pytest.mark.asyncio
    async def test_flagged_comment_is_returned_to_moderator(self, unit_env):
        """Moderators see comments awaiting moderation."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(
            make_comment(SnippetId(uuid4()), status=CommentStatus.FLAGGED)
        )

        # Act
        result = await comment_service.get_visible_comment(
            comment.id, make_requester(Role.MODERATOR)
        )

        # Assert
        assert result.id == comment.id
