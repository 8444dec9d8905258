"""Pydantic models for channels and channel tokens."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from hop_sdk.models.common import Id, Timestamp


class ChannelType(StrEnum):
    """Who may subscribe to a channel.

    Private channels need a subscribed token, public channels are readable
    by anyone and unprotected channels also accept client-side publishes.
    """

    PRIVATE = "private"
    PUBLIC = "public"
    UNPROTECTED = "unprotected"


class Channel(BaseModel):
    id: str
    project: dict | None = None
    state: dict[str, Any] = Field(default_factory=dict)
    created_at: Timestamp
    type: ChannelType

    model_config = {"extra": "allow"}


class ChannelToken(BaseModel):
    id: Id
    state: dict[str, Any] = Field(default_factory=dict)
    project_id: Id | None = None
    is_online: bool = False

    model_config = {"extra": "allow"}


class ChannelStats(BaseModel):
    online_count: int

    model_config = {"extra": "allow"}
