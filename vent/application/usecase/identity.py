"""Request identity helpers shared by use cases.

HTTP requests can carry a registered user (from the auth cookie) and an
anonymous device token (from the body). These helpers turn the raw values
into domain identities.
"""

from typing import Any
from uuid import UUID

from vent.domain.error import NotFoundError, ValidationError
from vent.domain.value import AnonymousId, UserId, Voter


def parse_target_id(raw: str, resource: str) -> UUID:
    """Parse a path ID; a malformed ID names a resource that cannot exist.

    Raises:
        NotFoundError: If raw is not a UUID
    """
    try:
        return UUID(raw)
    except (TypeError, ValueError):
        raise NotFoundError(resource, str(raw))


def _parse_anonymous_id(raw: Any) -> AnonymousId:
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError("anonymous_id must be a non-empty string")
    if len(raw) > 255:
        raise ValidationError("anonymous_id must be at most 255 characters")
    return AnonymousId(raw)


def _parse_user_id(raw: str) -> UserId:
    try:
        return UserId(UUID(raw))
    except ValueError:
        raise ValidationError("Invalid user id")


def resolve_identity(user_id: str | None, anonymous_id: Any) -> Voter | None:
    """Resolve who is acting, if anyone.

    An explicit anonymous ID wins over the signed-in user, so a single
    request never acts as both. A blank anonymous ID counts as absent.
    """
    if isinstance(anonymous_id, str) and not anonymous_id.strip():
        anonymous_id = None
    if anonymous_id is not None:
        return Voter(anonymous_id=_parse_anonymous_id(anonymous_id))
    if user_id is not None:
        return Voter(user_id=_parse_user_id(user_id))
    return None


def resolve_voter(user_id: str | None, anonymous_id: Any) -> Voter:
    """Resolve the voter of a request.

    Raises:
        ValidationError: If the request carries no usable identity
    """
    voter = resolve_identity(user_id, anonymous_id)
    if voter is None:
        raise ValidationError("Sign in or provide anonymous_id to vote")
    return voter
