"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .karma_service import KarmaService
from .post_service import PostService
from .score_service import (
    ScoreService,
    hot_score,
    parse_ranking_inputs,
    recompute_counters,
)
from .vote_service import VoteService, counter_deltas, decide_transition

__all__ = [
    "CommentService",
    "JWTService",
    "KarmaService",
    "PostService",
    "ScoreService",
    "Service",
    "VoteService",
    "counter_deltas",
    "decide_transition",
    "hot_score",
    "parse_ranking_inputs",
    "recompute_counters",
]
