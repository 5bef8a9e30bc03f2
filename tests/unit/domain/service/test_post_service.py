"""Unit tests for PostService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from vent.domain.error import NotFoundError
from vent.domain.repository import PostRepository, PostSortOrder
from vent.domain.service import PostService, hot_score
from vent.domain.value import Category, PostId, UserId, Voter
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_starts_with_zero_counters(self, unit_env):
        """New posts have no votes and a recency-only hot score."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        # Act
        post = await post_service.create_post(
            frustration="Meetings that could have been emails",
            identity="Engineer",
            category=Category.WORK,
            author=Voter.anonymous("device-1"),
        )

        # Assert
        assert (post.upvotes, post.downvotes, post.score) == (0, 0, 0)
        assert post.comment_count == 0
        assert post.hot_score == pytest.approx(hot_score(0, 0, post.created_at))
        assert post.anonymous_id.root == "device-1"
        assert post.author_id is None

        saved = await post_repo.find_by_id(post.id)
        assert saved == post

    @pytest.mark.asyncio
    async def test_create_post_for_registered_author(self, unit_env):
        post_service = await unit_env.get(PostService)
        user_id = UserId(uuid4())

        post = await post_service.create_post(
            frustration="Wifi keeps dropping",
            identity="Remote worker",
            category=Category.TECHNOLOGY,
            author=Voter.registered(user_id),
        )

        assert post.author_id == user_id
        assert post.anonymous_id is None


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_sort_orders(self, unit_env):
        """Hot, top and new feeds each order by their own key."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        now = datetime.now(timezone.utc)

        old_popular = await post_repo.save(
            make_post(
                created_at=now - timedelta(days=3),
                upvotes=40,
                score=40,
                hot_score=5.0,
            )
        )
        fresh = await post_repo.save(make_post(created_at=now, hot_score=9.0))
        middling = await post_repo.save(
            make_post(
                created_at=now - timedelta(hours=1),
                upvotes=5,
                score=5,
                hot_score=7.0,
            )
        )

        # Act
        hot, _ = await post_service.list_posts(sort=PostSortOrder.HOT)
        top, _ = await post_service.list_posts(sort=PostSortOrder.TOP)
        new, _ = await post_service.list_posts(sort=PostSortOrder.NEW)

        # Assert
        assert [p.id for p in hot] == [fresh.id, middling.id, old_popular.id]
        assert [p.id for p in top] == [old_popular.id, middling.id, fresh.id]
        assert [p.id for p in new] == [fresh.id, middling.id, old_popular.id]

    @pytest.mark.asyncio
    async def test_category_filter_and_total(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(category=Category.HEALTH))
        await post_repo.save(make_post(category=Category.HEALTH))
        await post_repo.save(make_post(category=Category.FINANCE))

        posts, total = await post_service.list_posts(category=Category.HEALTH)

        assert total == 2
        assert {p.category for p in posts} == {Category.HEALTH}

    @pytest.mark.asyncio
    async def test_pagination_reports_full_total(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        now = datetime.now(timezone.utc)
        for minutes in range(5):
            await post_repo.save(make_post(created_at=now - timedelta(minutes=minutes)))

        posts, total = await post_service.list_posts(
            sort=PostSortOrder.NEW, limit=2, offset=2
        )

        assert total == 5
        assert len(posts) == 2


class TestListUserPosts:
    """Tests for list_user_posts method."""

    @pytest.mark.asyncio
    async def test_user_posts_are_newest_first(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = UserId(uuid4())
        now = datetime.now(timezone.utc)
        older = await post_repo.save(
            make_post(author_id=author, created_at=now - timedelta(hours=1))
        )
        newer = await post_repo.save(make_post(author_id=author, created_at=now))
        await post_repo.save(make_post(author_id=UserId(uuid4())))
        await post_repo.save(make_post())

        posts, total = await post_service.list_user_posts(author)

        assert [p.id for p in posts] == [newer.id, older.id]
        assert total == 2

    @pytest.mark.asyncio
    async def test_user_posts_are_paginated(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = UserId(uuid4())
        for _ in range(3):
            await post_repo.save(make_post(author_id=author))

        posts, total = await post_service.list_user_posts(author, limit=2, offset=2)

        assert len(posts) == 1
        assert total == 3

    @pytest.mark.asyncio
    async def test_user_without_posts(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.list_user_posts(UserId(uuid4())) == ([], 0)


class TestIncrementCommentCount:
    """Tests for increment_comment_count method."""

    @pytest.mark.asyncio
    async def test_increment_comment_count_updates_post(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(comment_count=5))

        await post_service.increment_comment_count(post.id)

        saved_post = await post_repo.find_by_id(post.id)
        assert saved_post.comment_count == 6

    @pytest.mark.asyncio
    async def test_increment_missing_post_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.increment_comment_count(PostId(uuid4()))


class TestGetPostById:
    """Tests for get_post_by_id method."""

    @pytest.mark.asyncio
    async def test_missing_post_returns_none(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post_by_id(PostId(uuid4())) is None
