"""Pydantic models for Ignite, Hop's container runtime."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field

from hop_sdk.models.common import ByteSizeString, Id, Timestamp

# =============================================================================
# Enums
# =============================================================================


class Regions(StrEnum):
    """All regions that Hop operates in."""

    US_EAST_1 = "us-east-1"


class RuntimeType(StrEnum):
    """Runtime type of a deployment or container.

    Ephemeral containers won't restart if they exit. Persistent containers
    restart on exit and can be started and stopped programmatically.
    Stateful deployments run one container at a time with a persistent
    volume attached.
    """

    EPHEMERAL = "ephemeral"
    PERSISTENT = "persistent"
    STATEFUL = "stateful"


class ContainerState(StrEnum):
    PENDING = "pending"
    RUNNING = "running"
    STOPPED = "stopped"
    FAILED = "failed"
    TERMINATING = "terminating"
    EXITED = "exited"


class RolloutState(StrEnum):
    PENDING = "pending"
    FINISHED = "finished"
    FAILED = "failed"


class RestartPolicy(StrEnum):
    NEVER = "never"
    ALWAYS = "always"
    ON_FAILURE = "on-failure"


class VgpuType(StrEnum):
    A400 = "a400"


class VolumeFormat(StrEnum):
    EXT4 = "ext4"
    XFS = "xfs"


class BuildMethod(StrEnum):
    GITHUB = "github"
    CLI = "cli"


class BuildState(StrEnum):
    VALIDATING = "validating"
    PENDING = "pending"
    FAILED = "failed"
    SUCCEEDED = "succeeded"
    CANCELLED = "cancelled"
    VALIDATION_FAILED = "validation_failed"


class BuildEnvironmentType(StrEnum):
    NIXPACKS = "nixpacks"
    DOCKERFILE = "dockerfile"


class GatewayType(StrEnum):
    """Internal gateways are reachable only from inside a project."""

    INTERNAL = "internal"
    EXTERNAL = "external"


class DomainState(StrEnum):
    PENDING = "pending"
    VALID_CNAME = "valid_cname"
    SSL_ACTIVE = "ssl_active"


class ContainerStrategy(StrEnum):
    MANUAL = "manual"


# =============================================================================
# Deployment configuration
# =============================================================================


class VolumeDefinition(BaseModel):
    """A volume attached to a stateful deployment."""

    fs: VolumeFormat
    size: ByteSizeString
    mount_path: str


class Vgpu(BaseModel):
    type: VgpuType
    count: int


class Resources(BaseModel):
    """Resources allocated to each container.

    ``ram`` is a byte size string such as ``"512mb"``.
    """

    vcpu: float
    ram: ByteSizeString
    vgpu: list[Vgpu] = Field(default_factory=list)


class ImageAuth(BaseModel):
    username: str
    password: str


class ImageGHRepo(BaseModel):
    repo_id: int
    full_name: str
    branch: str


class Image(BaseModel):
    """The image a deployment runs. Exactly one source is normally set."""

    name: str | None = None
    auth: ImageAuth | None = None
    gh_repo: ImageGHRepo | None = None


class DeploymentConfig(BaseModel):
    """Configuration used to create or update a deployment."""

    name: str
    type: RuntimeType
    image: Image
    resources: Resources
    container_strategy: ContainerStrategy = ContainerStrategy.MANUAL
    version: Literal["12-12-2022"] = "12-12-2022"
    env: dict[str, str] = Field(default_factory=dict)
    restart_policy: RestartPolicy = RestartPolicy.ON_FAILURE
    cmd: list[str] | None = None
    entrypoint: list[str] | None = None
    volume: VolumeDefinition | None = None


class DeploymentConfigUpdate(BaseModel):
    """Partial deployment configuration. Unset fields are left unchanged."""

    name: str | None = None
    type: RuntimeType | None = None
    image: Image | None = None
    resources: Resources | None = None
    container_strategy: ContainerStrategy | None = None
    env: dict[str, str] | None = None
    restart_policy: RestartPolicy | None = None
    cmd: list[str] | None = None
    entrypoint: list[str] | None = None
    volume: VolumeDefinition | None = None


class DeploymentMetadata(BaseModel):
    container_port_mappings: dict[Id, list[str]] | None = None
    ignored_boarding: bool | None = None
    created_from_preset: str | None = None
    created_first_gateway: bool | None = None

    model_config = {"extra": "allow"}


# =============================================================================
# Builds and rollouts
# =============================================================================


class BuildMetadata(BaseModel):
    account_type: Literal["user", "organization"] | None = None
    repo_id: int
    repo_name: str
    branch: str
    commit_sha: str
    commit_msg: str
    commit_url: str | None = None

    model_config = {"extra": "allow"}


class NixPlan(BaseModel):
    language: str | None = None
    pkgs: list[str] | None = None
    cmds: dict[str, str | None] = Field(default_factory=dict)


class BuildEnvironment(BaseModel):
    type: BuildEnvironmentType
    nix_plan: NixPlan | None = None


class ValidationFailure(BaseModel):
    reason: str
    help_link: str | None = None


class Build(BaseModel):
    id: Id
    deployment_id: Id
    method: BuildMethod
    state: BuildState
    metadata: BuildMetadata | None = None
    created_at: Timestamp | None = None
    started_at: Timestamp | None = None
    finished_at: Timestamp | None = None
    digest: str | None = None
    environment: BuildEnvironment | None = None
    validation_failure: ValidationFailure | None = None

    model_config = {"extra": "allow"}


class DeploymentRollout(BaseModel):
    id: Id
    deployment_id: Id
    count: int
    created_at: Timestamp
    state: RolloutState
    build: Build | None = None
    init_container_id: str | None = None
    health_check_failed: bool = False
    last_updated_at: Timestamp | None = None
    acknowledged: bool = False

    model_config = {"extra": "allow"}


class HealthCheckConfig(BaseModel):
    """Health check settings. Durations are in milliseconds."""

    protocol: Literal["http"] = "http"
    path: str = "/"
    port: int
    interval: int = 60000
    timeout: int = 50000
    initial_delay: int = 5000
    max_retries: int = 3


class HealthCheckUpdate(BaseModel):
    protocol: Literal["http"] | None = None
    path: str | None = None
    port: int | None = None
    interval: int | None = None
    timeout: int | None = None
    initial_delay: int | None = None
    max_retries: int | None = None


class HealthCheck(HealthCheckConfig):
    id: Id
    created_at: Timestamp

    model_config = {"extra": "allow"}


# =============================================================================
# Deployments and containers
# =============================================================================


class Group(BaseModel):
    id: Id
    name: str
    project_id: Id
    position: int
    created_at: Timestamp

    model_config = {"extra": "allow"}


class Deployment(BaseModel):
    id: Id
    name: str
    created_at: Timestamp
    container_count: int = 0
    running_container_count: int = 0
    target_container_count: int = 0
    config: dict = Field(default_factory=dict)
    active_rollout: DeploymentRollout | None = None
    latest_rollout: DeploymentRollout | None = None
    active_build: Build | None = None
    build_id: Id | None = None
    metadata: DeploymentMetadata | None = None
    build_cache_enabled: bool = False
    group_id: Id | None = None

    model_config = {"extra": "allow"}


class ContainerMetrics(BaseModel):
    cpu_usage_percent: float
    memory_usage_percent: float
    memory_usage_bytes: int


class Container(BaseModel):
    id: Id
    deployment_id: Id
    created_at: Timestamp
    state: ContainerState
    type: RuntimeType
    region: Regions | str
    internal_ip: str | None = None
    uptime: dict | None = None
    metrics: ContainerMetrics | None = None
    metadata: dict = Field(default_factory=dict)
    overrides: dict | None = None
    volume: VolumeDefinition | None = None

    model_config = {"extra": "allow"}


class ContainerLog(BaseModel):
    timestamp: Timestamp
    message: str
    nonce: str
    level: Literal["stdout", "stderr", "error", "info"]


class StorageUsage(BaseModel):
    provisioned_size: int
    used_size: int


# =============================================================================
# Gateways and domains
# =============================================================================


class DomainRedirect(BaseModel):
    url: str
    status_code: Literal[301, 302, 307, 308]


class Domain(BaseModel):
    id: Id
    domain: str
    state: DomainState
    created_at: Timestamp
    redirect: DomainRedirect | None = None

    model_config = {"extra": "allow"}


class Gateway(BaseModel):
    id: Id
    type: GatewayType
    name: str
    deployment_id: Id
    created_at: Timestamp
    protocol: Literal["http"] | None = None
    hopsh_domain: str | None = None
    hopsh_domain_enabled: bool = False
    internal_domain: str | None = None
    target_port: int | None = None
    domains: list[Domain] = Field(default_factory=list)

    model_config = {"extra": "allow"}


# =============================================================================
# Presets
# =============================================================================


class PresetInput(BaseModel):
    type: Literal["string"]
    default: str | None = None
    autogen: Literal["PROJECT_NAMESPACE", "SECURE_TOKEN"] | None = None


class PresetMapping(BaseModel):
    type: Literal["env"]
    key: str


class PresetField(BaseModel):
    input: PresetInput
    title: str
    required: bool = False
    map_to: list[PresetMapping]


class PresetForm(BaseModel):
    """Form describing the inputs a deployment preset asks for."""

    v: Literal[1]
    fields: list[PresetField]
