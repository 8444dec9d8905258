"""Pydantic models for the container registry."""

from pydantic import BaseModel

from hop_sdk.models.common import Timestamp


class ManifestDigest(BaseModel):
    digest: str
    size: int
    uploaded: Timestamp | None = None


class Manifest(BaseModel):
    digest: ManifestDigest
    tag: str | None = None

    model_config = {"extra": "allow"}
