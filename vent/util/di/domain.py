"""Domain layer DI providers."""

from dishka import Scope, provide

from vent.config import AuthSettings
from vent.domain.repository import CommentRepository, PostRepository, VoteRepository
from vent.domain.service import (
    CommentService,
    JWTService,
    KarmaService,
    PostService,
    ScoreService,
    VoteService,
)
from vent.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with the repository session
    lifecycle: a vote and its counter update share one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, post_service: PostService
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, post_service=post_service
        )

    @provide
    def get_score_service(
        self, post_repository: PostRepository, comment_repository: CommentRepository
    ) -> ScoreService:
        """Provide score domain service."""
        return ScoreService(
            post_repository=post_repository, comment_repository=comment_repository
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
        score_service: ScoreService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            comment_service=comment_service,
            score_service=score_service,
        )

    @provide
    def get_karma_service(
        self, post_repository: PostRepository, comment_repository: CommentRepository
    ) -> KarmaService:
        """Provide karma domain service."""
        return KarmaService(
            post_repository=post_repository, comment_repository=comment_repository
        )
