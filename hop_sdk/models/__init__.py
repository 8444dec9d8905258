"""Public pydantic models for Hop resources."""

from hop_sdk.models.channels import Channel, ChannelStats, ChannelToken, ChannelType
from hop_sdk.models.common import ByteSizeString, Id, Timestamp
from hop_sdk.models.ignite import (
    Build,
    Container,
    ContainerLog,
    ContainerState,
    Deployment,
    DeploymentConfig,
    DeploymentConfigUpdate,
    DeploymentMetadata,
    DeploymentRollout,
    Domain,
    Gateway,
    GatewayType,
    Group,
    HealthCheck,
    HealthCheckConfig,
    HealthCheckUpdate,
    Image,
    PresetForm,
    Resources,
    RestartPolicy,
    RuntimeType,
    VolumeDefinition,
)
from hop_sdk.models.pipe import Room, RoomOptions
from hop_sdk.models.projects import ProjectMember, ProjectToken, Secret, Webhook
from hop_sdk.models.registry import Manifest
from hop_sdk.models.users import PersonalAccessToken, User

__all__ = [
    "Build",
    "ByteSizeString",
    "Channel",
    "ChannelStats",
    "ChannelToken",
    "ChannelType",
    "Container",
    "ContainerLog",
    "ContainerState",
    "Deployment",
    "DeploymentConfig",
    "DeploymentConfigUpdate",
    "DeploymentMetadata",
    "DeploymentRollout",
    "Domain",
    "Gateway",
    "GatewayType",
    "Group",
    "HealthCheck",
    "HealthCheckConfig",
    "HealthCheckUpdate",
    "Id",
    "Image",
    "Manifest",
    "PersonalAccessToken",
    "PresetForm",
    "ProjectMember",
    "ProjectToken",
    "Resources",
    "RestartPolicy",
    "Room",
    "RoomOptions",
    "RuntimeType",
    "Secret",
    "Timestamp",
    "User",
    "VolumeDefinition",
    "Webhook",
]
