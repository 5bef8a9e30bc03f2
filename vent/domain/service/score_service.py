"""Score engine.

Maintains the vote counters of posts and comments and derives their
score and, for posts, the hot score used by the "hot" feed.

The hot score formula is a ranking contract shared with clients:

    hot_score = sign(score) * log10(max(|score|, 1)) + age_seconds / 45000

where score = upvotes - downvotes and age_seconds is measured from
2024-01-01T00:00:00Z. Posts 12.5 hours apart differ by one full unit.
"""

import math
from datetime import datetime, timezone
from typing import Any, Mapping

import logfire

from vent.domain.error import NotFoundError, ValidationError
from vent.domain.model import Comment, Post, RankingInputs, ScoreSnapshot, VoteCounters
from vent.domain.repository import CommentRepository, PostRepository
from vent.domain.value import VotableType, VoteTarget

from .base import Service

HOT_SCORE_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)
HOT_SCORE_TIMESCALE = 45000  # seconds per hot score unit

_ALLOWED_DELTAS = (-1, 0, 1)


def _as_aware(moment: datetime) -> datetime:
    """Read naive datetimes as UTC; aware values keep their own offset.

    Converting aware values to UTC overflows at the edges of the
    datetime range; subtraction handles the offset instead.
    """
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def recompute_counters(
    upvotes: int, downvotes: int, upvote_delta: int, downvote_delta: int
) -> VoteCounters:
    """Apply counter deltas, clamping each counter at zero.

    Args:
        upvotes: Current upvotes
        downvotes: Current downvotes
        upvote_delta: Change to upvotes
        downvote_delta: Change to downvotes

    Returns:
        New counters with score recomputed from them
    """
    new_upvotes = max(0, upvotes + upvote_delta)
    new_downvotes = max(0, downvotes + downvote_delta)
    return VoteCounters(
        upvotes=new_upvotes,
        downvotes=new_downvotes,
        score=new_upvotes - new_downvotes,
    )


def hot_score(upvotes: int, downvotes: int, created_at: datetime) -> float:
    """Calculate the hot score of a post.

    Args:
        upvotes: Number of upvotes
        downvotes: Number of downvotes
        created_at: When the post was created (naive values are read as UTC)

    Returns:
        Hot score (may be negative)
    """
    score = upvotes - downvotes
    sign = (score > 0) - (score < 0)
    order = math.log10(max(abs(score), 1))
    seconds = (_as_aware(created_at) - HOT_SCORE_EPOCH).total_seconds()
    return sign * order + seconds / HOT_SCORE_TIMESCALE


def _non_negative_int(value: Any) -> int | None:
    """Return value as an int if it is a non-negative integer, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float) and value.is_integer() and value >= 0:
        return int(value)
    return None


def _parse_date(value: Any) -> datetime | None:
    """Parse an ISO 8601 date or datetime string, None if invalid."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None
    try:
        # fromisoformat only accepts a trailing Z from Python 3.11
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (ValueError, OverflowError):
        return None


def parse_ranking_inputs(payload: Mapping[str, Any]) -> RankingInputs:
    """Validate a raw ``{upvotes, downvotes, createdAt}`` payload.

    Presence is checked for every field before any type check, always in
    the order upvotes, downvotes, createdAt, so a payload with several
    problems reports the same message every time.

    Args:
        payload: Untrusted request body

    Returns:
        Validated ranking inputs

    Raises:
        ValidationError: With a field-level message
    """
    for field in ("upvotes", "downvotes", "createdAt"):
        if payload.get(field) is None:
            raise ValidationError(f"{field} is required")

    upvotes = _non_negative_int(payload["upvotes"])
    if upvotes is None:
        raise ValidationError("upvotes must be a non-negative integer")

    downvotes = _non_negative_int(payload["downvotes"])
    if downvotes is None:
        raise ValidationError("downvotes must be a non-negative integer")

    created_at = _parse_date(payload["createdAt"])
    if created_at is None:
        raise ValidationError("createdAt must be a valid ISO date string")

    return RankingInputs(upvotes=upvotes, downvotes=downvotes, created_at=created_at)


def post_snapshot(post: Post) -> ScoreSnapshot:
    """Ranking inputs of a post."""
    return ScoreSnapshot(
        target=VoteTarget.post(post.id),
        upvotes=post.upvotes,
        downvotes=post.downvotes,
        score=post.score,
        hot_score=post.hot_score,
        created_at=post.created_at,
    )


def comment_snapshot(comment: Comment) -> ScoreSnapshot:
    """Ranking inputs of a comment (no hot score)."""
    return ScoreSnapshot(
        target=VoteTarget.comment(comment.id),
        upvotes=comment.upvotes,
        downvotes=comment.downvotes,
        score=comment.score,
        hot_score=None,
        created_at=comment.created_at,
    )


class ScoreService(Service):
    """Domain service owning the vote counters of posts and comments."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize score service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def apply_delta(
        self, target: VoteTarget, upvote_delta: int, downvote_delta: int
    ) -> ScoreSnapshot:
        """Apply vote counter deltas to a post or comment.

        Locks the target row, recomputes counters and score (and hot score
        for posts) and writes them back in the caller's transaction.

        Args:
            target: Post or comment
            upvote_delta: Change to upvotes (-1, 0 or 1)
            downvote_delta: Change to downvotes (-1, 0 or 1)

        Returns:
            The target's ranking inputs after the update

        Raises:
            ValidationError: If a delta is out of range
            NotFoundError: If the target does not exist
        """
        if upvote_delta not in _ALLOWED_DELTAS:
            raise ValidationError("upvote_delta must be -1, 0 or 1")
        if downvote_delta not in _ALLOWED_DELTAS:
            raise ValidationError("downvote_delta must be -1, 0 or 1")

        with logfire.span(
            "score_service.apply_delta",
            target=str(target),
            upvote_delta=upvote_delta,
            downvote_delta=downvote_delta,
        ):
            if target.type == VotableType.POST:
                return await self._apply_to_post(target, upvote_delta, downvote_delta)
            return await self._apply_to_comment(target, upvote_delta, downvote_delta)

    async def _apply_to_post(
        self, target: VoteTarget, upvote_delta: int, downvote_delta: int
    ) -> ScoreSnapshot:
        post = await self.post_repository.find_by_id_for_update(target.post_id)
        if not post:
            logfire.warn("Score update on non-existent post", post_id=str(target.id))
            raise NotFoundError("Post", str(target.id))

        counters = recompute_counters(
            post.upvotes, post.downvotes, upvote_delta, downvote_delta
        )
        self._warn_if_clamped(target, post.upvotes, post.downvotes, upvote_delta, downvote_delta)
        new_hot_score = hot_score(counters.upvotes, counters.downvotes, post.created_at)

        updated = await self.post_repository.update_scores(
            post.id, counters, new_hot_score
        )
        logfire.info(
            "Post score updated",
            post_id=str(post.id),
            upvotes=updated.upvotes,
            downvotes=updated.downvotes,
            score=updated.score,
            hot_score=updated.hot_score,
        )
        return post_snapshot(updated)

    async def _apply_to_comment(
        self, target: VoteTarget, upvote_delta: int, downvote_delta: int
    ) -> ScoreSnapshot:
        comment = await self.comment_repository.find_by_id_for_update(
            target.comment_id
        )
        if not comment:
            logfire.warn(
                "Score update on non-existent comment", comment_id=str(target.id)
            )
            raise NotFoundError("Comment", str(target.id))

        counters = recompute_counters(
            comment.upvotes, comment.downvotes, upvote_delta, downvote_delta
        )
        self._warn_if_clamped(
            target, comment.upvotes, comment.downvotes, upvote_delta, downvote_delta
        )

        updated = await self.comment_repository.update_scores(comment.id, counters)
        logfire.info(
            "Comment score updated",
            comment_id=str(comment.id),
            upvotes=updated.upvotes,
            downvotes=updated.downvotes,
            score=updated.score,
        )
        return comment_snapshot(updated)

    @staticmethod
    def _warn_if_clamped(
        target: VoteTarget,
        upvotes: int,
        downvotes: int,
        upvote_delta: int,
        downvote_delta: int,
    ) -> None:
        """Log when a counter would have gone negative (ledger out of sync)."""
        if upvotes + upvote_delta < 0 or downvotes + downvote_delta < 0:
            logfire.warn(
                "Vote counter clamped at zero",
                target=str(target),
                upvotes=upvotes,
                downvotes=downvotes,
                upvote_delta=upvote_delta,
                downvote_delta=downvote_delta,
            )

    async def get_ranking_inputs(self, target: VoteTarget) -> ScoreSnapshot:
        """Read the current ranking inputs of a post or comment.

        Args:
            target: Post or comment

        Returns:
            upvotes, downvotes, score, hot_score and created_at

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span("score_service.get_ranking_inputs", target=str(target)):
            if target.type == VotableType.POST:
                post = await self.post_repository.find_by_id(target.post_id)
                if not post:
                    raise NotFoundError("Post", str(target.id))
                return post_snapshot(post)

            comment = await self.comment_repository.find_by_id(target.comment_id)
            if not comment:
                raise NotFoundError("Comment", str(target.id))
            return comment_snapshot(comment)
