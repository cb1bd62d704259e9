"""End-to-end tests for the comment endpoints."""

from uuid import uuid4

from discuss.domain.value import Requester, Role, SnippetId
from tests.conftest import make_requester, make_token
from tests.harness import create_api_fixture

# E2E fixture - full app over in-memory persistence
api = create_api_fixture()


def auth(requester: Requester) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(requester)}"}


def public_snippet(api) -> str:
    snippet = api.store.add_snippet(SnippetId(uuid4()), make_requester().user_id)
    return str(snippet.id)


class TestCreateComment:
    """Tests for POST /snippets/{snippet_id}/comments."""

    def test_create_top_level_comment(self, api):
        """Creating a comment returns 201 with the trimmed body."""
        # Arrange
        snippet_id = public_snippet(api)
        u1 = make_requester()

        # Act
        response = api.client.post(
            f"/snippets/{snippet_id}/comments",
            json={"body": "  Great snippet!  "},
            headers=auth(u1),
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["body"] == "Great snippet!"
        assert data["parentId"] is None
        assert data["replyCount"] == 0
        assert data["authorId"] == str(u1.user_id)
        assert data["snippetId"] == snippet_id
        assert data["isDeleted"] is False

    def test_token_from_cookie_is_accepted(self, api):
        """The auth cookie authenticates like a bearer token."""
        # Arrange
        snippet_id = public_snippet(api)
        author = make_requester()
        api.client.cookies.set("auth_token", make_token(author))

        # Act
        response = api.client.post(
            f"/snippets/{snippet_id}/comments", json={"body": "via cookie"}
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["authorId"] == str(author.user_id)

    def test_reply_and_expand(self, api):
        """Replies update the parent's count and appear in the expansion."""
        # Arrange
        snippet_id = public_snippet(api)
        c1 = api.client.post(
            f"/snippets/{snippet_id}/comments",
            json={"body": "Top"},
            headers=auth(make_requester()),
        ).json()

        # Act
        reply = api.client.post(
            f"/snippets/{snippet_id}/comments",
            json={"body": "Thanks", "parentId": c1["id"]},
            headers=auth(make_requester()),
        )

        # Assert
        assert reply.status_code == 201
        assert reply.json()["parentId"] == c1["id"]

        parent = api.client.get(f"/comments/{c1['id']}").json()
        assert parent["replyCount"] == 1

        replies = api.client.get(
            f"/snippets/{snippet_id}/comments",
            params={"parentId": c1["id"], "order": "asc"},
        ).json()
        assert [item["id"] for item in replies["items"]] == [reply.json()["id"]]

    def test_reply_to_reply_is_flattened(self, api):
        """A reply to a reply is stored under the top-level comment."""
        # Arrange
        snippet_id = public_snippet(api)
        headers = auth(make_requester())
        top = api.client.post(
            f"/snippets/{snippet_id}/comments", json={"body": "top"}, headers=headers
        ).json()
        reply = api.client.post(
            f"/snippets/{snippet_id}/comments",
            json={"body": "reply", "parentId": top["id"]},
            headers=headers,
        ).json()

        # Act
        nested = api.client.post(
            f"/snippets/{snippet_id}/comments",
            json={"body": "nested", "parentId": reply["id"]},
            headers=headers,
        )

        # Assert
        assert nested.json()["parentId"] == top["id"]

    def test_overlong_body_is_rejected(self, api):
        """A 5001 character body fails with a body field error."""
        # Arrange
        snippet_id = public_snippet(api)

        # Act
        response = api.client.post(
            f"/snippets/{snippet_id}/comments",
            json={"body": "a" * 5001},
            headers=auth(make_requester()),
        )

        # Assert
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "body" in error["details"]["fields"]

    def test_create_requires_authentication(self, api):
        """Anonymous writes are refused with 401."""
        # Arrange
        snippet_id = public_snippet(api)

        # Act
        response = api.client.post(
            f"/snippets/{snippet_id}/comments", json={"body": "hi"}
        )

        # Assert
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTH_TOKEN_MISSING"


class TestListComments:
    """Tests for GET /snippets/{snippet_id}/comments."""

    def test_feed_newest_first_with_meta(self, api):
        """The feed lists newest first with full pagination metadata."""
        # Arrange
        snippet_id = public_snippet(api)
        headers = auth(make_requester())
        ids = [
            api.client.post(
                f"/snippets/{snippet_id}/comments",
                json={"body": f"comment {i}"},
                headers=headers,
            ).json()["id"]
            for i in range(3)
        ]

        # Act
        response = api.client.get(
            f"/snippets/{snippet_id}/comments",
            params={"page": 1, "limit": 20, "order": "desc"},
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert [item["id"] for item in data["items"]] == list(reversed(ids))
        assert data["meta"] == {
            "page": 1,
            "limit": 20,
            "total": 3,
            "totalPages": 1,
            "hasNextPage": False,
            "hasPreviousPage": False,
        }

    def test_deleted_comment_keeps_its_slot(self, api):
        """Tombstones stay listed with their body withheld."""
        # Arrange
        snippet_id = public_snippet(api)
        author = make_requester()
        comment = api.client.post(
            f"/snippets/{snippet_id}/comments",
            json={"body": "oops"},
            headers=auth(author),
        ).json()
        api.client.delete(f"/comments/{comment['id']}", headers=auth(author))

        # Act
        data = api.client.get(f"/snippets/{snippet_id}/comments").json()

        # Assert
        assert data["meta"]["total"] == 1
        assert data["items"][0]["isDeleted"] is True
        assert data["items"][0]["body"] is None
        assert data["items"][0]["deletedAt"] is not None

    def test_private_snippet_is_not_found(self, api):
        """Private snippets read as missing to other users."""
        # Arrange
        snippet = api.store.add_snippet(
            SnippetId(uuid4()), make_requester().user_id, is_public=False
        )

        # Act
        response = api.client.get(
            f"/snippets/{snippet.id}/comments", headers=auth(make_requester())
        )

        # Assert
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"

    def test_private_snippet_readable_by_owner(self, api):
        """Owners list comments on their own private snippets."""
        # Arrange
        owner = make_requester()
        snippet = api.store.add_snippet(
            SnippetId(uuid4()), owner.user_id, is_public=False
        )

        # Act
        response = api.client.get(
            f"/snippets/{snippet.id}/comments", headers=auth(owner)
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_invalid_token_on_read_is_anonymous(self, api):
        """Reads ignore unusable tokens instead of failing."""
        # Arrange
        snippet_id = public_snippet(api)

        # Act
        response = api.client.get(
            f"/snippets/{snippet_id}/comments",
            headers={"Authorization": "Bearer not-a-token"},
        )

        # Assert
        assert response.status_code == 200

    def test_enormous_page_number_is_an_empty_page(self, api):
        """Page numbers beyond any real offset still answer 200."""
        # Arrange
        snippet_id = public_snippet(api)

        # Act
        response = api.client.get(
            f"/snippets/{snippet_id}/comments",
            params={"page": "10000000000000000000"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_unknown_parent_is_not_found(self, api):
        """Expanding a missing comment returns 404."""
        # Arrange
        snippet_id = public_snippet(api)

        # Act
        response = api.client.get(
            f"/snippets/{snippet_id}/comments", params={"parentId": str(uuid4())}
        )

        # Assert
        assert response.status_code == 404


class TestEditAndDelete:
    """Tests for PUT and DELETE /comments/{comment_id}."""

    def _create(self, api, author):
        snippet_id = public_snippet(api)
        return api.client.post(
            f"/snippets/{snippet_id}/comments",
            json={"body": "draft"},
            headers=auth(author),
        ).json()

    def test_author_edits_comment(self, api):
        """Edits return the new body and an editedAt timestamp."""
        # Arrange
        author = make_requester()
        comment = self._create(api, author)

        # Act
        response = api.client.put(
            f"/comments/{comment['id']}", json={"body": "final"}, headers=auth(author)
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["body"] == "final"
        assert data["editedAt"] is not None
        assert data["createdAt"] == comment["createdAt"]

    def test_edit_deleted_comment_conflicts(self, api):
        """Editing a tombstone returns 409."""
        # Arrange
        author = make_requester()
        comment = self._create(api, author)
        api.client.delete(f"/comments/{comment['id']}", headers=auth(author))

        # Act
        response = api.client.put(
            f"/comments/{comment['id']}", json={"body": "again"}, headers=auth(author)
        )

        # Assert
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "RESOURCE_INVALID_STATE"

    def test_non_author_cannot_delete(self, api):
        """Other users get 403 when deleting."""
        # Arrange
        comment = self._create(api, make_requester())

        # Act
        response = api.client.delete(
            f"/comments/{comment['id']}", headers=auth(make_requester())
        )

        # Assert
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "AUTH_ACCESS_DENIED"

    def test_delete_twice_succeeds(self, api):
        """Deleting is idempotent."""
        # Arrange
        author = make_requester()
        comment = self._create(api, author)

        # Act
        first = api.client.delete(f"/comments/{comment['id']}", headers=auth(author))
        second = api.client.delete(f"/comments/{comment['id']}", headers=auth(author))

        # Assert
        assert first.status_code == 204
        assert second.status_code == 204

    def test_moderator_deletes_any_comment(self, api):
        """Moderators can remove other users' comments."""
        # Arrange
        comment = self._create(api, make_requester())

        # Act
        response = api.client.delete(
            f"/comments/{comment['id']}", headers=auth(make_requester(Role.MODERATOR))
        )

        # Assert
        assert response.status_code == 204
