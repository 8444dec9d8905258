"""Pydantic models for Pipe live-streaming rooms."""

from typing import Literal

from pydantic import BaseModel, Field

from hop_sdk.models.common import Id, Timestamp

DeliveryProtocol = Literal["webrtc", "hls"]
IngestProtocol = Literal["rtmp", "rtp"]


class RoomOptions(BaseModel):
    """Options used to create a room."""

    ingest_protocol: IngestProtocol
    delivery_protocols: list[DeliveryProtocol]
    ephemeral: bool = False
    region: str = "us-east-1"
    llhls_config: dict | None = None


class Room(BaseModel):
    id: Id
    name: str
    created_at: Timestamp
    state: str | None = None
    join_token: str | None = Field(default=None, repr=False)
    ingest_protocol: IngestProtocol | None = None
    delivery_protocols: list[DeliveryProtocol] = Field(default_factory=list)
    ingest_endpoint: str | None = None

    model_config = {"extra": "allow"}
