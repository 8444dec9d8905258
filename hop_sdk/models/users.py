"""Pydantic models for users and personal access tokens."""

from pydantic import BaseModel, Field

from hop_sdk.models.common import Id, Timestamp


class User(BaseModel):
    id: Id
    name: str
    username: str
    email: str | None = None
    email_verified: bool | None = None

    model_config = {"extra": "allow"}


class PersonalAccessToken(BaseModel):
    """A PAT. ``pat`` holds the secret and is only returned on creation."""

    id: Id
    name: str | None = None
    created_at: Timestamp
    pat: str | None = Field(default=None, repr=False)

    model_config = {"extra": "allow"}
