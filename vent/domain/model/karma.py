"""Karma read model."""

from pydantic import computed_field

from vent.domain.model.common import DomainModel
from vent.domain.value import UserId


class Karma(DomainModel):
    """A registered user's karma, derived from the scores of their content."""

    user_id: UserId
    post_karma: int = 0
    comment_karma: int = 0

    @computed_field
    @property
    def total_karma(self) -> int:
        return self.post_karma + self.comment_karma
