"""Pydantic models for projects and their members, tokens, webhooks and secrets."""

from typing import Literal

from pydantic import BaseModel, Field

from hop_sdk.models.common import Id, Timestamp

MemberRole = Literal["owner", "admin", "editor", "member"]


class ProjectMember(BaseModel):
    id: Id
    role: MemberRole | str
    joined_at: Timestamp | None = None
    mfa_enabled: bool | None = None
    user: dict | None = None

    model_config = {"extra": "allow"}


class ProjectToken(BaseModel):
    """A project token. ``token`` is only returned once, on creation."""

    id: Id
    project_id: Id | None = None
    flags: int
    created_at: Timestamp
    token: str | None = Field(default=None, repr=False)

    model_config = {"extra": "allow"}


class Webhook(BaseModel):
    """A webhook. ``secret`` is only returned on creation or regeneration."""

    id: Id
    project_id: Id
    webhook_url: str
    events: list[str]
    created_at: Timestamp
    type: str | None = None
    secret: str | None = Field(default=None, repr=False)

    model_config = {"extra": "allow"}


class Secret(BaseModel):
    """A project secret. The value itself is never returned."""

    id: Id
    name: str
    digest: str
    created_at: Timestamp
    in_use_by: dict | None = None

    model_config = {"extra": "allow"}
