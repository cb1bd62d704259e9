"""Paginated comment listings."""

import math

from pydantic import BaseModel

from discuss.domain.model.comment import Comment


class PaginationMeta(BaseModel):
    """Pagination metadata for a listing page."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        """Derive page counts and navigation flags from a total."""
        total_pages = math.ceil(total / limit) if limit else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )


class CommentPage(BaseModel):
    """One page of comments plus its metadata."""

    items: list[Comment]
    meta: PaginationMeta
