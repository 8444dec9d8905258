"""Response envelopes.

Each model describes the ``data`` object of one endpoint's response. The
field of interest is required, so a response without it fails to decode.
"""

from typing import Any

from pydantic import BaseModel

from hop_sdk.models.channels import Channel, ChannelStats, ChannelToken
from hop_sdk.models.ignite import (
    Container,
    ContainerLog,
    Deployment,
    DeploymentRollout,
    Domain,
    Gateway,
    Group,
    HealthCheck,
    StorageUsage,
)
from hop_sdk.models.pipe import Room
from hop_sdk.models.projects import ProjectMember, ProjectToken, Secret, Webhook
from hop_sdk.models.registry import Manifest
from hop_sdk.models.users import PersonalAccessToken, User

# =============================================================================
# Ignite
# =============================================================================


class DeploymentsEnvelope(BaseModel):
    deployments: list[Deployment]
    groups: list[Group] = []


class DeploymentEnvelope(BaseModel):
    deployment: Deployment


class ContainersEnvelope(BaseModel):
    containers: list[Container]


class ContainerEnvelope(BaseModel):
    container: Container


class OptionalContainerEnvelope(BaseModel):
    container: Container | None = None


class LogsEnvelope(BaseModel):
    logs: list[ContainerLog]


class RolloutEnvelope(BaseModel):
    rollout: DeploymentRollout


class HealthCheckEnvelope(BaseModel):
    health_check: HealthCheck


class StorageEnvelope(BaseModel):
    volume: StorageUsage | None
    build_cache: StorageUsage | None


class GatewaysEnvelope(BaseModel):
    gateways: list[Gateway]


class GatewayEnvelope(BaseModel):
    gateway: Gateway


class DomainEnvelope(BaseModel):
    domain: Domain


class GroupEnvelope(BaseModel):
    group: Group


# =============================================================================
# Projects
# =============================================================================


class MembersEnvelope(BaseModel):
    members: list[ProjectMember]


class MemberEnvelope(BaseModel):
    project_member: ProjectMember


class ProjectTokensEnvelope(BaseModel):
    project_tokens: list[ProjectToken]


class ProjectTokenEnvelope(BaseModel):
    project_token: ProjectToken


class WebhooksEnvelope(BaseModel):
    webhooks: list[Webhook]


class WebhookEnvelope(BaseModel):
    webhook: Webhook


class WebhookSecretEnvelope(BaseModel):
    secret: str


class SecretsEnvelope(BaseModel):
    secrets: list[Secret]


class SecretEnvelope(BaseModel):
    secret: Secret


# =============================================================================
# Registry
# =============================================================================


class ImagesEnvelope(BaseModel):
    images: list[str]


class ManifestsEnvelope(BaseModel):
    manifests: list[Manifest]


# =============================================================================
# Channels
# =============================================================================


class ChannelEnvelope(BaseModel):
    channel: Channel


class ChannelsEnvelope(BaseModel):
    channels: list[Channel]


class ChannelTokenEnvelope(BaseModel):
    token: ChannelToken


class ChannelTokensEnvelope(BaseModel):
    tokens: list[ChannelToken]


class ChannelStatsEnvelope(BaseModel):
    stats: ChannelStats


# =============================================================================
# Pipe
# =============================================================================


class RoomsEnvelope(BaseModel):
    rooms: list[Room]


class RoomEnvelope(BaseModel):
    room: Room


# =============================================================================
# Users
# =============================================================================


class MeEnvelope(BaseModel):
    user: User
    projects: list[dict[str, Any]] = []
    project_member_role_map: dict[str, str] = {}
    leap_token: str | None = None


class PatsEnvelope(BaseModel):
    pats: list[PersonalAccessToken]


class PatEnvelope(BaseModel):
    pat: PersonalAccessToken
