"""Pipe SDK: live-streaming rooms."""

from hop_sdk._internal.rest import APIClient, endpoints
from hop_sdk.models.common import Id
from hop_sdk.models.pipe import Room, RoomOptions
from hop_sdk.sdks._base import Namespace


class Rooms(Namespace):
    async def get_all(self, project_id: Id | None = None) -> list[Room]:
        self._require_project(project_id, "list rooms")
        data = await self._client.dispatch(endpoints.LIST_ROOMS, {"project": project_id})
        return data.rooms

    async def create(
        self,
        name: str,
        options: RoomOptions,
        project_id: Id | None = None,
    ) -> Room:
        """Create a room.

        Args:
            name: The room's name.
            options: Ingest and delivery settings.
            project_id: The project to create the room in.
        """
        self._require_project(project_id, "create a room")
        body = {"name": name, **options.model_dump(mode="json", exclude_none=True)}
        data = await self._client.dispatch(endpoints.CREATE_ROOM, {"project": project_id}, body)
        return data.room

    async def delete(self, room_id: Id, project_id: Id | None = None) -> None:
        await self._client.dispatch(
            endpoints.DELETE_ROOM, {"room_id": room_id, "project": project_id}
        )


class Pipe(Namespace):
    """Pipe SDK."""

    def __init__(self, client: APIClient) -> None:
        super().__init__(client)
        self.rooms = Rooms(client)
