"""Post domain service."""

from uuid import uuid4

import logfire

from vent.domain.error import NotFoundError
from vent.domain.model.common import utc_now
from vent.domain.model.post import Post
from vent.domain.repository import PostRepository, PostSortOrder
from vent.domain.value import Category, PostId, UserId, Voter

from .base import Service
from .score_service import hot_score


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        frustration: str,
        identity: str,
        category: Category,
        author: Voter | None = None,
    ) -> Post:
        """Create a post with zeroed counters.

        The hot score starts at the time component of the formula so new
        posts rank by recency in the hot feed until they receive votes.

        Args:
            frustration: Post body
            identity: Self-described identity of the poster
            category: Post category
            author: Registered or anonymous author (None if unknown)

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post",
            category=category.value,
            author=str(author) if author else None,
        ):
            created_at = utc_now()
            post = Post(
                id=PostId(uuid4()),
                frustration=frustration,
                identity=identity,
                category=category,
                author_id=author.user_id if author else None,
                anonymous_id=author.anonymous_id if author else None,
                hot_score=hot_score(0, 0, created_at),
                created_at=created_at,
            )

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), category=category.value)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def list_posts(
        self,
        sort: PostSortOrder = PostSortOrder.HOT,
        category: Category | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        """List posts for a feed.

        Returns:
            The page of posts and the total number of matching posts
        """
        with logfire.span(
            "post_service.list_posts",
            sort=sort.value,
            category=category.value if category else None,
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_all(
                sort=sort, category=category, limit=limit, offset=offset
            )
            total = await self.post_repository.count(category=category)
            return posts, total

    async def list_user_posts(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> tuple[list[Post], int]:
        """List a registered user's posts, newest first.

        Returns:
            The page of posts and the user's total post count
        """
        with logfire.span(
            "post_service.list_user_posts",
            user_id=str(user_id),
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_by_author(
                user_id, limit=limit, offset=offset
            )
            total = await self.post_repository.count_by_author(user_id)
            return posts, total

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Increment a post's comment count.

        Args:
            post_id: Post ID

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.increment_comment_count", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.error(
                    "Post not found for comment count increment", post_id=str(post_id)
                )
                raise NotFoundError("Post", str(post_id))

            await self.post_repository.increment_comment_count(post_id)
            logfire.info("Comment count incremented", post_id=str(post_id))
