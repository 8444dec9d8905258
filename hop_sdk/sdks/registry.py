"""Registry SDK."""

from hop_sdk._internal.rest import APIClient, endpoints
from hop_sdk.models.common import Id
from hop_sdk.models.registry import Manifest
from hop_sdk.sdks._base import Namespace


class Images(Namespace):
    """Images stored in a project's registry.

    The project is sent as a ``project`` query parameter, and omitted
    entirely for project tokens.
    """

    async def get_all(self, project_id: Id | None = None) -> list[str]:
        """Get the names of all images in a project's registry."""
        self._require_project(project_id, "list registry images")
        data = await self._client.dispatch(endpoints.LIST_IMAGES, {"project": project_id})
        return data.images

    async def get_manifest(self, image: str, project_id: Id | None = None) -> list[Manifest]:
        self._require_project(project_id, "fetch an image manifest")
        data = await self._client.dispatch(
            endpoints.LIST_IMAGE_MANIFESTS, {"image": image, "project": project_id}
        )
        return data.manifests

    async def delete(self, image: str, project_id: Id | None = None) -> None:
        self._require_project(project_id, "delete an image")
        await self._client.dispatch(
            endpoints.DELETE_IMAGE, {"image": image, "project": project_id}
        )


class Registry(Namespace):
    """Registry SDK."""

    def __init__(self, client: APIClient) -> None:
        super().__init__(client)
        self.images = Images(client)
