"""Domain model entities for Vent."""

from vent.domain.model.comment import MAX_COMMENT_DEPTH, Comment
from vent.domain.model.karma import Karma
from vent.domain.model.post import Post
from vent.domain.model.score import RankingInputs, ScoreSnapshot, VoteCounters
from vent.domain.model.vote import Vote, VoteResult

__all__ = [
    "MAX_COMMENT_DEPTH",
    "Comment",
    "Karma",
    "Post",
    "RankingInputs",
    "ScoreSnapshot",
    "Vote",
    "VoteCounters",
    "VoteResult",
]
