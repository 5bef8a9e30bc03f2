"""Application layer DI providers."""

from dishka import Scope, provide

from vent.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from vent.application.usecase.post import (
    CalculateHotScoreUseCase,
    CreatePostUseCase,
    GetPostUseCase,
    GetRankingUseCase,
    ListPostsUseCase,
)
from vent.application.usecase.user import GetKarmaUseCase, ListUserPostsUseCase
from vent.application.usecase.vote import CastVoteUseCase, GetVoteUseCase
from vent.config import FeedSettings
from vent.domain.service import (
    CommentService,
    KarmaService,
    PostService,
    ScoreService,
    VoteService,
)
from vent.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_vote_use_case(self, vote_service: VoteService) -> GetVoteUseCase:
        """Provide get vote use case."""
        return GetVoteUseCase(vote_service=vote_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, vote_service: VoteService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        vote_service: VoteService,
        feed_settings: FeedSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            vote_service=vote_service,
            feed_settings=feed_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_ranking_use_case(
        self, score_service: ScoreService
    ) -> GetRankingUseCase:
        """Provide get ranking use case."""
        return GetRankingUseCase(score_service=score_service)

    @provide(scope=Scope.APP)
    def get_calculate_hot_score_use_case(self) -> CalculateHotScoreUseCase:
        """Provide calculate hot score use case (stateless)."""
        return CalculateHotScoreUseCase()

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            post_service=post_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_karma_use_case(self, karma_service: KarmaService) -> GetKarmaUseCase:
        """Provide get karma use case."""
        return GetKarmaUseCase(karma_service=karma_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_posts_use_case(
        self,
        post_service: PostService,
        vote_service: VoteService,
        feed_settings: FeedSettings,
    ) -> ListUserPostsUseCase:
        """Provide list user posts use case."""
        return ListUserPostsUseCase(
            post_service=post_service,
            vote_service=vote_service,
            feed_settings=feed_settings,
        )
