"""Anonymous identity routes."""

from uuid import uuid4

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["anonymous"])


class AnonymousIdResponse(BaseModel):
    """A fresh anonymous device token."""

    anonymous_id: str


@router.get("/anonymous-id", response_model=AnonymousIdResponse)
async def generate_anonymous_id() -> AnonymousIdResponse:
    """Issue a new anonymous ID for a device that has none yet.

    Clients store it and send it with votes, posts and comments.
    """
    return AnonymousIdResponse(anonymous_id=str(uuid4()))
