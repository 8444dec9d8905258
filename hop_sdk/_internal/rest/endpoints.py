"""Endpoint descriptors for the Hop API.

Every operation the SDK performs is one of these constants. A descriptor
pairs a method and path template with the envelope its response decodes
into (None for empty responses) and the shape of its request body.
"""

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel

from hop_sdk._internal.rest import envelopes as env
from hop_sdk.models.ignite import (
    DeploymentConfig,
    DeploymentConfigUpdate,
    DeploymentMetadata,
    HealthCheckConfig,
    HealthCheckUpdate,
)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

ResponseT = TypeVar("ResponseT", bound=BaseModel)


@dataclass(frozen=True)
class Endpoint(Generic[ResponseT]):
    """A static (method, path, response, body) association.

    ``body`` is a pydantic model or ``dict`` for JSON payloads, or ``str``
    for a raw ``text/plain`` payload.
    """

    method: HttpMethod
    path: str
    response: type[ResponseT] | None = None
    body: type[Any] | None = None

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


# =============================================================================
# Ignite
# =============================================================================

LIST_DEPLOYMENTS = Endpoint("GET", "/v1/ignite/deployments", env.DeploymentsEnvelope)
SEARCH_DEPLOYMENT = Endpoint("GET", "/v1/ignite/deployments/search", env.DeploymentEnvelope)
GET_DEPLOYMENT = Endpoint("GET", "/v1/ignite/deployments/:deployment_id", env.DeploymentEnvelope)
CREATE_DEPLOYMENT = Endpoint(
    "POST", "/v1/ignite/deployments", env.DeploymentEnvelope, DeploymentConfig
)
UPDATE_DEPLOYMENT = Endpoint(
    "PATCH", "/v1/ignite/deployments/:deployment_id", env.DeploymentEnvelope, DeploymentConfigUpdate
)
PATCH_DEPLOYMENT_METADATA = Endpoint(
    "PATCH",
    "/v1/ignite/deployments/:deployment_id/metadata",
    env.DeploymentEnvelope,
    DeploymentMetadata,
)
DELETE_DEPLOYMENT = Endpoint("DELETE", "/v1/ignite/deployments/:deployment_id")
CREATE_ROLLOUT = Endpoint(
    "POST", "/v1/ignite/deployments/:deployment_id/rollouts", env.RolloutEnvelope
)
GET_STORAGE = Endpoint("GET", "/v1/ignite/deployments/:deployment_id/storage", env.StorageEnvelope)
CREATE_HEALTH_CHECK = Endpoint(
    "POST",
    "/v1/ignite/deployments/:deployment_id/health-check",
    env.HealthCheckEnvelope,
    HealthCheckConfig,
)
UPDATE_HEALTH_CHECK = Endpoint(
    "PATCH",
    "/v1/ignite/deployments/:deployment_id/health-check",
    env.HealthCheckEnvelope,
    HealthCheckUpdate,
)

LIST_CONTAINERS = Endpoint(
    "GET", "/v1/ignite/deployments/:deployment_id/containers", env.ContainersEnvelope
)
CREATE_CONTAINER = Endpoint(
    "POST", "/v1/ignite/deployments/:deployment_id/containers", env.ContainerEnvelope
)
ADD_CONTAINER_TO_DEPLOYMENT = Endpoint(
    "POST", "/v1/ignite/deployments/:deployment_id/containers/:container_id", body=dict
)
DELETE_CONTAINER = Endpoint(
    "DELETE", "/v1/ignite/containers/:container_id", env.OptionalContainerEnvelope
)
GET_CONTAINER_LOGS = Endpoint("GET", "/v1/ignite/containers/:container_id/logs", env.LogsEnvelope)
SET_CONTAINER_STATE = Endpoint("PUT", "/v1/ignite/containers/:container_id/state", body=dict)

LIST_GATEWAYS = Endpoint(
    "GET", "/v1/ignite/deployments/:deployment_id/gateways", env.GatewaysEnvelope
)
CREATE_GATEWAY = Endpoint(
    "POST", "/v1/ignite/deployments/:deployment_id/gateways", env.GatewayEnvelope, dict
)
GET_GATEWAY = Endpoint("GET", "/v1/ignite/gateways/:gateway_id", env.GatewayEnvelope)
ADD_GATEWAY_DOMAIN = Endpoint("POST", "/v1/ignite/gateways/:gateway_id/domains", body=dict)

GET_DOMAIN = Endpoint("GET", "/v1/ignite/domains/:domain_id", env.DomainEnvelope)
DELETE_DOMAIN = Endpoint("DELETE", "/v1/ignite/domains/:domain_id")

CREATE_GROUP = Endpoint("POST", "/v1/ignite/groups", env.GroupEnvelope, dict)
EDIT_GROUP = Endpoint("PATCH", "/v1/ignite/groups/:group_id", env.GroupEnvelope, dict)
MOVE_DEPLOYMENT_TO_GROUP = Endpoint(
    "PUT", "/v1/ignite/groups/:group_id/deployments/:deployment_id", env.GroupEnvelope
)
REMOVE_DEPLOYMENT_FROM_GROUP = Endpoint("DELETE", "/v1/ignite/groups/:group_id/:deployment_id")
DELETE_GROUP = Endpoint("DELETE", "/v1/ignite/groups/:group_id")

# =============================================================================
# Projects
#
# :project_id is "@this" when a project token resolves the project.
# =============================================================================

LIST_MEMBERS = Endpoint("GET", "/v1/projects/:project_id/members", env.MembersEnvelope)
GET_CURRENT_MEMBER = Endpoint("GET", "/v1/projects/:project_id/members/@me", env.MemberEnvelope)

LIST_PROJECT_TOKENS = Endpoint(
    "GET", "/v1/projects/:project_id/tokens", env.ProjectTokensEnvelope
)
CREATE_PROJECT_TOKEN = Endpoint(
    "POST", "/v1/projects/:project_id/tokens", env.ProjectTokenEnvelope, dict
)
DELETE_PROJECT_TOKEN = Endpoint("DELETE", "/v1/projects/:project_id/tokens/:project_token_id")

LIST_WEBHOOKS = Endpoint("GET", "/v1/projects/:project_id/webhooks", env.WebhooksEnvelope)
CREATE_WEBHOOK = Endpoint("POST", "/v1/projects/:project_id/webhooks", env.WebhookEnvelope, dict)
EDIT_WEBHOOK = Endpoint(
    "PATCH", "/v1/projects/:project_id/webhooks/:webhook_id", env.WebhookEnvelope, dict
)
DELETE_WEBHOOK = Endpoint("DELETE", "/v1/projects/:project_id/webhooks/:webhook_id")
REGENERATE_WEBHOOK_SECRET = Endpoint(
    "POST",
    "/v1/projects/:project_id/webhooks/:webhook_id/regenerate",
    env.WebhookSecretEnvelope,
)

LIST_SECRETS = Endpoint("GET", "/v1/projects/:project_id/secrets", env.SecretsEnvelope)
# The server stores the body verbatim, so the value is sent unwrapped.
PUT_SECRET = Endpoint("PUT", "/v1/projects/@this/secrets/:name", env.SecretEnvelope, str)
DELETE_SECRET = Endpoint("DELETE", "/v1/projects/:project_id/secrets/:secret_id")

# =============================================================================
# Registry
# =============================================================================

LIST_IMAGES = Endpoint("GET", "/v1/registry/images", env.ImagesEnvelope)
LIST_IMAGE_MANIFESTS = Endpoint(
    "GET", "/v1/registry/images/:image/manifests", env.ManifestsEnvelope
)
DELETE_IMAGE = Endpoint("DELETE", "/v1/registry/images/:image")

# =============================================================================
# Channels
# =============================================================================

CREATE_CHANNEL = Endpoint("POST", "/v1/channels", env.ChannelEnvelope, dict)
CREATE_CHANNEL_WITH_ID = Endpoint("PUT", "/v1/channels/:channel_id", env.ChannelEnvelope, dict)
LIST_CHANNELS = Endpoint("GET", "/v1/channels", env.ChannelsEnvelope)
GET_CHANNEL = Endpoint("GET", "/v1/channels/:channel_id", env.ChannelEnvelope)
DELETE_CHANNEL = Endpoint("DELETE", "/v1/channels/:channel_id")
SUBSCRIBE_CHANNEL_TOKEN = Endpoint("PUT", "/v1/channels/:channel_id/subscribers/:token")
LIST_CHANNEL_TOKENS = Endpoint("GET", "/v1/channels/:channel_id/tokens", env.ChannelTokensEnvelope)
SET_CHANNEL_STATE = Endpoint("PUT", "/v1/channels/:channel_id/state", body=dict)
PATCH_CHANNEL_STATE = Endpoint("PATCH", "/v1/channels/:channel_id/state", body=dict)
PUBLISH_CHANNEL_MESSAGE = Endpoint("POST", "/v1/channels/:channel_id/messages", body=dict)
GET_CHANNEL_STATS = Endpoint("GET", "/v1/channels/:channel_id/stats", env.ChannelStatsEnvelope)

CREATE_CHANNEL_TOKEN = Endpoint("POST", "/v1/channels/tokens", env.ChannelTokenEnvelope, dict)
GET_CHANNEL_TOKEN = Endpoint("GET", "/v1/channels/tokens/:token", env.ChannelTokenEnvelope)
SET_CHANNEL_TOKEN_STATE = Endpoint(
    "PATCH", "/v1/channels/tokens/:token", env.ChannelTokenEnvelope, dict
)
DELETE_CHANNEL_TOKEN = Endpoint("DELETE", "/v1/channels/tokens/:token")
PUBLISH_DIRECT_MESSAGE = Endpoint("POST", "/v1/channels/tokens/:token/messages", body=dict)

# =============================================================================
# Pipe
# =============================================================================

LIST_ROOMS = Endpoint("GET", "/v1/pipe/rooms", env.RoomsEnvelope)
CREATE_ROOM = Endpoint("POST", "/v1/pipe/rooms", env.RoomEnvelope, dict)
DELETE_ROOM = Endpoint("DELETE", "/v1/pipe/rooms/:room_id")

# =============================================================================
# Users
# =============================================================================

GET_ME = Endpoint("GET", "/v1/users/@me", env.MeEnvelope)
LIST_PATS = Endpoint("GET", "/v1/users/@me/pats", env.PatsEnvelope)
CREATE_PAT = Endpoint("POST", "/v1/users/@me/pats", env.PatEnvelope, dict)
DELETE_PAT = Endpoint("DELETE", "/v1/users/@me/pats/:pat_id")
