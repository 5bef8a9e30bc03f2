"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from vent.domain.model import Comment, Post, Vote
from vent.domain.value import (
    AnonymousId,
    Category,
    CommentId,
    PostId,
    UserId,
    VoteId,
    Voter,
    VoteTarget,
    VoteValue,
)


def _uuid(value: Any) -> UUID | None:
    if value is None:
        return None
    return value if isinstance(value, UUID) else UUID(str(value))


def _anonymous_id(value: str | None) -> AnonymousId | None:
    return AnonymousId(value) if value is not None else None


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    author_id = _uuid(row.get("author_id"))
    return Post(
        id=PostId(_uuid(row["id"])),
        frustration=row["frustration"],
        identity=row["identity"],
        category=Category(row["category"]),
        author_id=UserId(author_id) if author_id else None,
        anonymous_id=_anonymous_id(row.get("anonymous_id")),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        score=row["score"],
        hot_score=row["hot_score"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion
    """
    data = post.model_dump()
    data["category"] = post.category.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = _uuid(row.get("parent_id"))
    author_id = _uuid(row.get("author_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id else None,
        depth=row["depth"],
        author_id=UserId(author_id) if author_id else None,
        anonymous_id=_anonymous_id(row.get("anonymous_id")),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        score=row["score"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert a votes row to a Vote domain model.

    The row stores target and voter as pairs of nullable columns, of which
    the table's CHECK constraints guarantee exactly one is set.
    """
    post_id = _uuid(row.get("post_id"))
    if post_id is not None:
        target = VoteTarget.post(PostId(post_id))
    else:
        target = VoteTarget.comment(CommentId(_uuid(row["comment_id"])))

    user_id = _uuid(row.get("user_id"))
    if user_id is not None:
        voter = Voter.registered(UserId(user_id))
    else:
        voter = Voter.anonymous(row["anonymous_id"])

    return Vote(
        id=VoteId(_uuid(row["id"])),
        target=target,
        voter=voter,
        value=VoteValue(row["value"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Flatten a Vote domain model into votes columns."""
    return {
        "id": vote.id,
        "post_id": vote.target.post_id,
        "comment_id": vote.target.comment_id,
        "user_id": vote.voter.user_id,
        "anonymous_id": vote.voter.anonymous_id.root
        if vote.voter.anonymous_id
        else None,
        "value": int(vote.value),
        "created_at": vote.created_at,
    }
