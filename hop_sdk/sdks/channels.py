"""Channels SDK: realtime channels, their state and channel tokens."""

import asyncio
from collections.abc import Iterable
from typing import Any

from hop_sdk._internal.rest import APIClient, endpoints
from hop_sdk.models.channels import Channel, ChannelStats, ChannelToken, ChannelType
from hop_sdk.models.common import Id
from hop_sdk.sdks._base import Namespace

AnyState = dict[str, Any]


class ChannelTokens(Namespace):
    """Tokens that clients connect to channels with."""

    async def create(
        self,
        state: AnyState | None = None,
        project_id: Id | None = None,
    ) -> ChannelToken:
        """Create a channel token.

        Args:
            state: Initial state attached to the token.
            project_id: The project to create the token in.
        """
        self._require_project(project_id, "create a channel token")
        data = await self._client.dispatch(
            endpoints.CREATE_CHANNEL_TOKEN, {"project": project_id}, {"state": state or {}}
        )
        return data.token

    async def get(self, token: Id, project_id: Id | None = None) -> ChannelToken:
        data = await self._client.dispatch(
            endpoints.GET_CHANNEL_TOKEN, {"token": token, "project": project_id}
        )
        return data.token

    async def delete(self, token: Id, project_id: Id | None = None) -> None:
        await self._client.dispatch(
            endpoints.DELETE_CHANNEL_TOKEN, {"token": token, "project": project_id}
        )

    async def set_state(
        self,
        token: Id,
        state: AnyState,
        project_id: Id | None = None,
    ) -> ChannelToken:
        data = await self._client.dispatch(
            endpoints.SET_CHANNEL_TOKEN_STATE,
            {"token": token, "project": project_id},
            {"state": state},
        )
        return data.token

    async def is_online(self, token: Id, project_id: Id | None = None) -> bool:
        """Check whether a client is currently connected with a token."""
        channel_token = await self.get(token, project_id)
        return channel_token.is_online

    async def publish_direct_message(
        self,
        token: Id,
        event: str,
        data: Any,
        project_id: Id | None = None,
    ) -> None:
        """Send an event directly to the client connected with a token."""
        await self._client.dispatch(
            endpoints.PUBLISH_DIRECT_MESSAGE,
            {"token": token, "project": project_id},
            {"e": event, "d": data},
        )


class Channels(Namespace):
    """Channels SDK."""

    def __init__(self, client: APIClient) -> None:
        super().__init__(client)
        self.tokens = ChannelTokens(client)

    async def create(
        self,
        type: ChannelType,
        channel_id: str | None = None,
        state: AnyState | None = None,
        project_id: Id | None = None,
    ) -> Channel:
        """Create a channel.

        Args:
            type: Who may subscribe to the channel.
            channel_id: A custom ID. The server generates one when omitted.
            state: Initial channel state.
            project_id: The project to create the channel in.
        """
        self._require_project(project_id, "create a channel")
        body = {"type": ChannelType(type).value, "state": state or {}}
        if channel_id is not None:
            data = await self._client.dispatch(
                endpoints.CREATE_CHANNEL_WITH_ID,
                {"channel_id": channel_id, "project": project_id},
                body,
            )
        else:
            data = await self._client.dispatch(
                endpoints.CREATE_CHANNEL, {"project": project_id}, body
            )
        return data.channel

    async def get(self, channel_id: str, project_id: Id | None = None) -> Channel:
        data = await self._client.dispatch(
            endpoints.GET_CHANNEL, {"channel_id": channel_id, "project": project_id}
        )
        return data.channel

    async def get_all(self, project_id: Id | None = None) -> list[Channel]:
        self._require_project(project_id, "list channels")
        data = await self._client.dispatch(endpoints.LIST_CHANNELS, {"project": project_id})
        return data.channels

    async def delete(self, channel_id: str, project_id: Id | None = None) -> None:
        await self._client.dispatch(
            endpoints.DELETE_CHANNEL, {"channel_id": channel_id, "project": project_id}
        )

    async def subscribe_token(
        self,
        channel_id: str,
        token: Id,
        project_id: Id | None = None,
    ) -> None:
        """Subscribe a channel token to a channel."""
        await self._client.dispatch(
            endpoints.SUBSCRIBE_CHANNEL_TOKEN,
            {"channel_id": channel_id, "token": token, "project": project_id},
        )

    async def subscribe_tokens(
        self,
        channel_id: str,
        tokens: Iterable[Id],
        project_id: Id | None = None,
    ) -> None:
        """Subscribe several tokens, one request each, issued concurrently.

        If any request fails the others are cancelled.

        Raises:
            ExceptionGroup: Holding the error of every request that failed.
        """
        async with asyncio.TaskGroup() as group:
            for token in tokens:
                group.create_task(self.subscribe_token(channel_id, token, project_id))

    async def get_all_tokens(
        self,
        channel_id: str,
        project_id: Id | None = None,
    ) -> list[ChannelToken]:
        data = await self._client.dispatch(
            endpoints.LIST_CHANNEL_TOKENS, {"channel_id": channel_id, "project": project_id}
        )
        return data.tokens

    async def set_state(
        self,
        channel_id: str,
        state: AnyState,
        project_id: Id | None = None,
    ) -> None:
        """Replace a channel's state."""
        await self._client.dispatch(
            endpoints.SET_CHANNEL_STATE, {"channel_id": channel_id, "project": project_id}, state
        )

    async def patch_state(
        self,
        channel_id: str,
        state: AnyState,
        project_id: Id | None = None,
    ) -> None:
        """Merge keys into a channel's state."""
        await self._client.dispatch(
            endpoints.PATCH_CHANNEL_STATE,
            {"channel_id": channel_id, "project": project_id},
            state,
        )

    async def publish_message(
        self,
        channel_id: str,
        event: str,
        data: Any,
        project_id: Id | None = None,
    ) -> None:
        """Publish an event to every subscriber of a channel."""
        await self._client.dispatch(
            endpoints.PUBLISH_CHANNEL_MESSAGE,
            {"channel_id": channel_id, "project": project_id},
            {"e": event, "d": data},
        )

    async def get_stats(self, channel_id: str, project_id: Id | None = None) -> ChannelStats:
        data = await self._client.dispatch(
            endpoints.GET_CHANNEL_STATS, {"channel_id": channel_id, "project": project_id}
        )
        return data.stats
