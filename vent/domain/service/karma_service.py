"""Karma domain service."""

import logfire

from vent.domain.model.karma import Karma
from vent.domain.repository import CommentRepository, PostRepository
from vent.domain.value import UserId

from .base import Service


class KarmaService(Service):
    """Derives a registered user's karma from the scores of their content.

    Karma is never stored; it is summed from post and comment scores on
    every read, so it cannot drift from the vote counters.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def get_karma(self, user_id: UserId) -> Karma:
        """Get a user's post, comment and total karma.

        Users without any content have zero karma.
        """
        with logfire.span("karma_service.get_karma", user_id=str(user_id)):
            post_karma = await self.post_repository.sum_score_by_author(user_id)
            comment_karma = await self.comment_repository.sum_score_by_author(user_id)
            return Karma(
                user_id=user_id, post_karma=post_karma, comment_karma=comment_karma
            )
