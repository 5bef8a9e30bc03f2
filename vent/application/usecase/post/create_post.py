"""Create post use case."""

from typing import Any

import logfire
from pydantic import BaseModel, Field

from vent.application.usecase.identity import resolve_identity
from vent.application.usecase.post.get_post import PostItem
from vent.domain.service import PostService
from vent.domain.value import Category


class CreatePostRequest(BaseModel):
    """Create post request."""

    frustration: str = Field(min_length=1, max_length=500)
    identity: str = Field(min_length=1, max_length=100)
    category: Category
    anonymous_id: Any = None
    user_id: str | None = None  # From the auth cookie, if signed in


class CreatePostUseCase:
    """Use case for creating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        The author is recorded the same way a voter is resolved, so that
        karma can later be attributed to a registered author.
        """
        author = resolve_identity(request.user_id, request.anonymous_id)
        post = await self.post_service.create_post(
            frustration=request.frustration.strip(),
            identity=request.identity.strip(),
            category=request.category,
            author=author,
        )
        logfire.info("Post created via API", post_id=str(post.id))
        return PostItem.from_post(post)
