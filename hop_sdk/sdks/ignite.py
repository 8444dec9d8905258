"""Ignite SDK: deployments, containers, gateways, domains and groups."""

from typing import Literal

from hop_sdk._internal.rest import APIClient, endpoints
from hop_sdk._internal.rest.envelopes import StorageEnvelope
from hop_sdk.models.common import Id
from hop_sdk.models.ignite import (
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
)
from hop_sdk.sdks._base import Namespace


class Deployments(Namespace):
    """Deployment management.

    Listing, searching and creating deployments are project scoped; every
    other operation addresses a deployment by its globally unique ID.
    """

    async def get_all(self, project_id: Id | None = None) -> list[Deployment]:
        self._require_project(project_id, "list deployments")
        data = await self._client.dispatch(endpoints.LIST_DEPLOYMENTS, {"project": project_id})
        return data.deployments

    async def get(self, deployment_id: Id) -> Deployment:
        data = await self._client.dispatch(
            endpoints.GET_DEPLOYMENT, {"deployment_id": deployment_id}
        )
        return data.deployment

    async def get_by_name(self, name: str, project_id: Id | None = None) -> Deployment:
        """Find a deployment by its name within a project."""
        self._require_project(project_id, "search deployments")
        data = await self._client.dispatch(
            endpoints.SEARCH_DEPLOYMENT, {"name": name, "project": project_id}
        )
        return data.deployment

    async def create(
        self,
        config: DeploymentConfig,
        project_id: Id | None = None,
    ) -> Deployment:
        """Create a deployment.

        Args:
            config: The deployment's configuration.
            project_id: The project to create the deployment in.

        Returns:
            The new deployment.
        """
        self._require_project(project_id, "create a deployment")
        data = await self._client.dispatch(
            endpoints.CREATE_DEPLOYMENT, {"project": project_id}, config
        )
        return data.deployment

    async def update(self, deployment_id: Id, config: DeploymentConfigUpdate) -> Deployment:
        """Update a deployment's config. Unset fields are left unchanged."""
        data = await self._client.dispatch(
            endpoints.UPDATE_DEPLOYMENT, {"deployment_id": deployment_id}, config
        )
        return data.deployment

    async def patch_metadata(
        self,
        deployment_id: Id,
        metadata: DeploymentMetadata,
    ) -> Deployment:
        data = await self._client.dispatch(
            endpoints.PATCH_DEPLOYMENT_METADATA, {"deployment_id": deployment_id}, metadata
        )
        return data.deployment

    async def delete(self, deployment_id: Id) -> None:
        await self._client.dispatch(
            endpoints.DELETE_DEPLOYMENT, {"deployment_id": deployment_id}
        )

    async def rollout(self, deployment_id: Id) -> DeploymentRollout:
        """Roll out a deployment, recreating its containers with the latest config."""
        data = await self._client.dispatch(
            endpoints.CREATE_ROLLOUT, {"deployment_id": deployment_id}
        )
        return data.rollout

    async def get_storage(self, deployment_id: Id) -> StorageEnvelope:
        """Get volume and build cache usage for a deployment, in bytes."""
        return await self._client.dispatch(
            endpoints.GET_STORAGE, {"deployment_id": deployment_id}
        )

    async def get_containers(self, deployment_id: Id) -> list[Container]:
        data = await self._client.dispatch(
            endpoints.LIST_CONTAINERS, {"deployment_id": deployment_id}
        )
        return data.containers

    async def create_container(self, deployment_id: Id) -> Container:
        data = await self._client.dispatch(
            endpoints.CREATE_CONTAINER, {"deployment_id": deployment_id}
        )
        return data.container

    async def add_container(self, deployment_id: Id, container_id: Id) -> None:
        """Attach an existing container to a deployment."""
        ids = {"deployment_id": deployment_id, "container_id": container_id}
        await self._client.dispatch(endpoints.ADD_CONTAINER_TO_DEPLOYMENT, ids, ids)

    async def create_health_check(
        self,
        deployment_id: Id,
        config: HealthCheckConfig,
    ) -> HealthCheck:
        data = await self._client.dispatch(
            endpoints.CREATE_HEALTH_CHECK, {"deployment_id": deployment_id}, config
        )
        return data.health_check

    async def update_health_check(
        self,
        deployment_id: Id,
        config: HealthCheckUpdate,
    ) -> HealthCheck:
        data = await self._client.dispatch(
            endpoints.UPDATE_HEALTH_CHECK, {"deployment_id": deployment_id}, config
        )
        return data.health_check


class Containers(Namespace):
    """Container operations."""

    async def get_logs(
        self,
        container_id: Id,
        *,
        limit: int | None = None,
        offset: int | None = None,
        order_by: Literal["timestamp"] | None = None,
        sort_order: Literal["asc", "desc"] | None = None,
    ) -> list[ContainerLog]:
        """Get a page of logs for a container."""
        data = await self._client.dispatch(
            endpoints.GET_CONTAINER_LOGS,
            {
                "container_id": container_id,
                "limit": limit,
                "offset": offset,
                "orderBy": order_by,
                "sortOrder": sort_order,
            },
        )
        return data.logs

    async def delete(self, container_id: Id, *, recreate: bool = False) -> Container | None:
        """Delete a container.

        Args:
            container_id: The container to delete.
            recreate: Replace the container with a fresh one.

        Returns:
            The replacement container when ``recreate`` is set, else None.
        """
        data = await self._client.dispatch(
            endpoints.DELETE_CONTAINER,
            {"container_id": container_id, "recreate": True if recreate else None},
        )
        return data.container

    async def start(self, container_id: Id) -> None:
        await self._set_state(container_id, ContainerState.RUNNING)

    async def stop(self, container_id: Id) -> None:
        await self._set_state(container_id, ContainerState.STOPPED)

    async def _set_state(self, container_id: Id, state: ContainerState) -> None:
        await self._client.dispatch(
            endpoints.SET_CONTAINER_STATE,
            {"container_id": container_id},
            {"preferred_state": state.value},
        )


class Gateways(Namespace):
    """Gateways route traffic to a deployment's containers."""

    async def get_all(self, deployment_id: Id) -> list[Gateway]:
        data = await self._client.dispatch(
            endpoints.LIST_GATEWAYS, {"deployment_id": deployment_id}
        )
        return data.gateways

    async def create(
        self,
        deployment_id: Id,
        *,
        type: GatewayType,
        name: str,
        target_port: int,
        protocol: Literal["http"] | None = "http",
    ) -> Gateway:
        """Create a gateway.

        Internal gateways take no protocol; pass ``protocol=None`` for them.
        """
        data = await self._client.dispatch(
            endpoints.CREATE_GATEWAY,
            {"deployment_id": deployment_id},
            {
                "type": GatewayType(type).value,
                "name": name,
                "target_port": target_port,
                "protocol": protocol,
            },
        )
        return data.gateway

    async def get(self, gateway_id: Id) -> Gateway:
        data = await self._client.dispatch(endpoints.GET_GATEWAY, {"gateway_id": gateway_id})
        return data.gateway

    async def add_domain(self, gateway_id: Id, domain: str) -> None:
        """Attach a custom domain to a gateway."""
        await self._client.dispatch(
            endpoints.ADD_GATEWAY_DOMAIN, {"gateway_id": gateway_id}, {"domain": domain}
        )


class Domains(Namespace):
    async def get(self, domain_id: Id) -> Domain:
        data = await self._client.dispatch(endpoints.GET_DOMAIN, {"domain_id": domain_id})
        return data.domain

    async def delete(self, domain_id: Id) -> None:
        await self._client.dispatch(endpoints.DELETE_DOMAIN, {"domain_id": domain_id})


class Groups(Namespace):
    """Deployment groups, used to organise deployments in the console."""

    async def create(
        self,
        name: str,
        deployment_ids: list[Id] | None = None,
        project_id: Id | None = None,
    ) -> Group:
        self._require_project(project_id, "create a group")
        data = await self._client.dispatch(
            endpoints.CREATE_GROUP,
            {"project": project_id},
            {"name": name, "deployment_ids": deployment_ids or []},
        )
        return data.group

    async def edit(
        self,
        group_id: Id,
        *,
        name: str | None = None,
        position: int | None = None,
    ) -> Group:
        body = {
            key: value
            for key, value in {"name": name, "position": position}.items()
            if value is not None
        }
        data = await self._client.dispatch(endpoints.EDIT_GROUP, {"group_id": group_id}, body)
        return data.group

    async def move_deployment(self, group_id: Id, deployment_id: Id) -> Group:
        data = await self._client.dispatch(
            endpoints.MOVE_DEPLOYMENT_TO_GROUP,
            {"group_id": group_id, "deployment_id": deployment_id},
        )
        return data.group

    async def remove_deployment(self, group_id: Id, deployment_id: Id) -> None:
        await self._client.dispatch(
            endpoints.REMOVE_DEPLOYMENT_FROM_GROUP,
            {"group_id": group_id, "deployment_id": deployment_id},
        )

    async def delete(self, group_id: Id) -> None:
        await self._client.dispatch(endpoints.DELETE_GROUP, {"group_id": group_id})


class Ignite(Namespace):
    """Ignite SDK."""

    def __init__(self, client: APIClient) -> None:
        super().__init__(client)
        self.deployments = Deployments(client)
        self.containers = Containers(client)
        self.gateways = Gateways(client)
        self.domains = Domains(client)
        self.groups = Groups(client)
