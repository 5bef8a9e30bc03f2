"""Unit tests for CreateCommentUseCase and GetCommentsUseCase."""

from uuid import uuid4

import pytest

from vent.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from vent.domain.error import NotFoundError, ValidationError
from vent.domain.repository import PostRepository
from vent.domain.service import VoteService
from vent.domain.value import Voter, VoteTarget, VoteValue
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_increments_post_count(self, unit_env):
        """Creating a comment bumps the post's comment count."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        item = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), content="  Me too  ", anonymous_id="device-1"
            )
        )

        # Assert
        assert item.content == "Me too"
        assert item.depth == 0
        assert item.post_id == str(post.id)
        assert (await post_repo.find_by_id(post.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_reply_to_comment(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        parent = await use_case.execute(
            CreateCommentRequest(post_id=str(post.id), content="Top")
        )

        reply = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), content="Reply", parent_id=parent.comment_id
            )
        )

        assert reply.parent_id == parent.comment_id
        assert reply.depth == 1

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        with pytest.raises(ValidationError, match="blank"):
            await use_case.execute(
                CreateCommentRequest(post_id=str(post.id), content="   ")
            )

    @pytest.mark.asyncio
    async def test_malformed_parent_id_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        with pytest.raises(ValidationError, match="parent_id"):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id), content="Hi", parent_id="nope"
                )
            )

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError, match="Post not found"):
            await use_case.execute(
                CreateCommentRequest(post_id=str(uuid4()), content="Hi")
            )


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_comments_carry_viewer_votes(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        first = await create_comment.execute(
            CreateCommentRequest(post_id=str(post.id), content="First")
        )
        await create_comment.execute(
            CreateCommentRequest(post_id=str(post.id), content="Second")
        )
        await vote_service.cast_vote(
            VoteTarget.comment(first.comment_id),
            Voter.anonymous("device-1"),
            VoteValue.UP,
        )

        response = await get_comments.execute(
            GetCommentsRequest(post_id=str(post.id), anonymous_id="device-1")
        )

        assert response.total == 2
        votes = {c.content: c.my_vote for c in response.comments}
        assert votes == {"First": 1, "Second": None}

    @pytest.mark.asyncio
    async def test_comments_of_missing_post(self, unit_env):
        get_comments = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError, match="Post not found"):
            await get_comments.execute(GetCommentsRequest(post_id=str(uuid4())))
