"""Domain value objects for Vent.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules for voting: who votes, on what, and how.
"""

from enum import Enum, IntEnum
from typing import Any
from uuid import UUID

from pydantic import field_validator, model_validator

from vent.domain.error import ValidationError
from vent.domain.value.common import RootValueObject, ValueObject
from vent.domain.value.identifiers import CommentId, PostId, UserId


class VoteValue(IntEnum):
    """Direction of a vote.

    A stored vote is always +1 or -1; the absence of a vote record means
    "no vote", never a zero vote.
    """

    UP = 1
    DOWN = -1

    @classmethod
    def parse(cls, raw: Any) -> "VoteValue":
        """Parse an untrusted vote value.

        Args:
            raw: Value from a request body (any JSON type)

        Returns:
            The matching VoteValue

        Raises:
            ValidationError: If the value is missing or not exactly 1 or -1
        """
        if raw is None:
            raise ValidationError("value is required")
        # bool is an int subclass; True must not count as an upvote
        if isinstance(raw, bool) or not isinstance(raw, int) or raw not in (1, -1):
            raise ValidationError("value must be 1 or -1")
        return cls(raw)


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"

    @property
    def resource(self) -> str:
        """Resource name used in client-facing messages."""
        return self.value.capitalize()


class VoteOutcome(str, Enum):
    """What a cast vote did to the voter's vote record."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


class Category(str, Enum):
    """Fixed post categories."""

    WORK = "work"
    RELATIONSHIPS = "relationships"
    TECHNOLOGY = "technology"
    HEALTH = "health"
    PARENTING = "parenting"
    FINANCE = "finance"
    DAILY_LIFE = "daily-life"
    SOCIAL = "social"
    OTHER = "other"


class AnonymousId(RootValueObject[str]):
    """Client-generated device token identifying an anonymous participant.

    Tokens handed out by the API are UUID v4 strings, but any opaque
    non-blank token up to 255 characters is accepted.
    """

    @field_validator("root")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Validate token is non-blank and within length limits."""
        if not v.strip() or len(v) > 255:
            raise ValueError("Anonymous ID must be 1-255 non-blank characters")
        return v


class Voter(ValueObject):
    """A voting identity: exactly one of a registered user or an anonymous token."""

    user_id: UserId | None = None
    anonymous_id: AnonymousId | None = None

    @model_validator(mode="after")
    def validate_single_identity(self) -> "Voter":
        """A voter is never both registered and anonymous, nor neither."""
        if (self.user_id is None) == (self.anonymous_id is None):
            raise ValueError("Voter must have exactly one of user_id or anonymous_id")
        return self

    @classmethod
    def registered(cls, user_id: UserId) -> "Voter":
        return cls(user_id=user_id)

    @classmethod
    def anonymous(cls, anonymous_id: AnonymousId | str) -> "Voter":
        if isinstance(anonymous_id, str):
            anonymous_id = AnonymousId(anonymous_id)
        return cls(anonymous_id=anonymous_id)

    def __str__(self) -> str:
        if self.anonymous_id is not None:
            return f"anonymous:{self.anonymous_id.root}"
        return f"user:{self.user_id}"


class VoteTarget(ValueObject):
    """The post or comment a vote applies to."""

    type: VotableType
    id: UUID

    @classmethod
    def post(cls, post_id: PostId) -> "VoteTarget":
        return cls(type=VotableType.POST, id=post_id)

    @classmethod
    def comment(cls, comment_id: CommentId) -> "VoteTarget":
        return cls(type=VotableType.COMMENT, id=comment_id)

    @property
    def post_id(self) -> PostId | None:
        return PostId(self.id) if self.type == VotableType.POST else None

    @property
    def comment_id(self) -> CommentId | None:
        return CommentId(self.id) if self.type == VotableType.COMMENT else None

    def __str__(self) -> str:
        return f"{self.type.value}:{self.id}"
