"""Unit tests for request identity helpers."""

from uuid import uuid4

import pytest

from vent.application.usecase.identity import (
    parse_target_id,
    resolve_identity,
    resolve_voter,
)
from vent.domain.error import NotFoundError, ValidationError
from vent.domain.value import Voter


class TestParseTargetId:
    def test_uuid_string(self):
        raw = uuid4()
        assert parse_target_id(str(raw), "Post") == raw

    @pytest.mark.parametrize("raw", ["", "123", "not-a-uuid"])
    def test_malformed_id_is_not_found(self, raw):
        with pytest.raises(NotFoundError, match="^Comment not found$"):
            parse_target_id(raw, "Comment")


class TestResolveIdentity:
    def test_nobody(self):
        assert resolve_identity(None, None) is None

    def test_signed_in_user(self):
        user_id = uuid4()
        assert resolve_identity(str(user_id), None) == Voter.registered(user_id)

    def test_anonymous_wins(self):
        voter = resolve_identity(str(uuid4()), "device-1")
        assert voter == Voter.anonymous("device-1")

    def test_malformed_user_id(self):
        with pytest.raises(ValidationError, match="Invalid user id"):
            resolve_identity("abc", None)

    def test_resolve_voter_requires_identity(self):
        with pytest.raises(ValidationError, match="Sign in or provide anonymous_id"):
            resolve_voter(None, None)

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_anonymous_id_falls_back_to_signed_in_user(self, blank):
        user_id = uuid4()
        assert resolve_identity(str(user_id), blank) == Voter.registered(user_id)

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_anonymous_id_alone_is_nobody(self, blank):
        assert resolve_identity(None, blank) is None
