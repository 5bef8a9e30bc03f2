"""SQLAlchemy table definitions for Vent.

Counters on posts and comments are a projection of the votes table and
are only written by the score engine.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("frustration", Text, nullable=False),
    Column("identity", String(100), nullable=False),
    Column("category", String(50), nullable=False),
    Column("author_id", UUID, nullable=True),  # Registered users live elsewhere
    Column("anonymous_id", String(255), nullable=True),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("score", Integer, nullable=False, server_default="0"),
    Column("hot_score", Float, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0", name="posts_upvotes_non_negative"),
    CheckConstraint("downvotes >= 0", name="posts_downvotes_non_negative"),
    CheckConstraint("comment_count >= 0", name="posts_comment_count_non_negative"),
    CheckConstraint(
        "author_id IS NULL OR anonymous_id IS NULL", name="posts_single_author"
    ),
)

Index("idx_posts_hot", posts_table.c.hot_score.desc(), posts_table.c.created_at.desc())
Index("idx_posts_score", posts_table.c.score.desc())
Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_category", posts_table.c.category)
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("content", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("author_id", UUID, nullable=True),
    Column("anonymous_id", String(255), nullable=True),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("score", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0", name="comments_depth_non_negative"),
    CheckConstraint("upvotes >= 0", name="comments_upvotes_non_negative"),
    CheckConstraint("downvotes >= 0", name="comments_downvotes_non_negative"),
    CheckConstraint(
        "author_id IS NULL OR anonymous_id IS NULL", name="comments_single_author"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=True),
    Column(
        "comment_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("user_id", UUID, nullable=True),
    Column("anonymous_id", String(255), nullable=True),
    Column("value", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(post_id IS NULL) <> (comment_id IS NULL)", name="votes_single_target"
    ),
    CheckConstraint(
        "(user_id IS NULL) <> (anonymous_id IS NULL)", name="votes_single_voter"
    ),
    CheckConstraint("value IN (1, -1)", name="votes_value_signed"),
    UniqueConstraint("post_id", "user_id", name="uq_votes_post_user"),
    UniqueConstraint("post_id", "anonymous_id", name="uq_votes_post_anonymous"),
    UniqueConstraint("comment_id", "user_id", name="uq_votes_comment_user"),
    UniqueConstraint("comment_id", "anonymous_id", name="uq_votes_comment_anonymous"),
)

Index("idx_votes_post_id", votes_table.c.post_id)
Index("idx_votes_comment_id", votes_table.c.comment_id)
