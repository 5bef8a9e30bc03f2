"""Test configuration and fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from vent.domain.model import Comment, Post
from vent.domain.value import Category, CommentId, PostId, UserId

# Keep test output local; app code logs through logfire unconditionally
logfire.configure(send_to_logfire=False, console=False)


def make_post(
    created_at: datetime | None = None,
    author_id: UserId | None = None,
    category: Category = Category.WORK,
    **overrides,
) -> Post:
    """Build a post with zeroed counters for seeding repositories."""
    fields = dict(
        id=PostId(uuid4()),
        frustration="The printer jammed again",
        identity="Office worker",
        category=category,
        author_id=author_id,
        created_at=created_at or datetime.now(timezone.utc),
    )
    fields.update(overrides)
    return Post(**fields)


def make_comment(
    post_id: PostId,
    author_id: UserId | None = None,
    parent_id: CommentId | None = None,
    depth: int = 0,
    **overrides,
) -> Comment:
    """Build a comment with zeroed counters for seeding repositories."""
    fields = dict(
        id=CommentId(uuid4()),
        post_id=post_id,
        content="Same here",
        parent_id=parent_id,
        depth=depth,
        author_id=author_id,
    )
    fields.update(overrides)
    return Comment(**fields)
