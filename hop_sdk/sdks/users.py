"""Users SDK.

Every operation here acts on the authenticated user, so none of them can
be called with a project token.
"""

from hop_sdk._internal.rest import APIClient, endpoints
from hop_sdk._internal.rest.envelopes import MeEnvelope
from hop_sdk.models.common import Id
from hop_sdk.models.users import PersonalAccessToken
from hop_sdk.sdks._base import Namespace


class PersonalAccessTokens(Namespace):
    async def get_all(self) -> list[PersonalAccessToken]:
        self._require_user("list personal access tokens")
        data = await self._client.dispatch(endpoints.LIST_PATS)
        return data.pats

    async def create(self, name: str) -> PersonalAccessToken:
        """Create a PAT. The secret is only returned by this call."""
        self._require_user("create a personal access token")
        data = await self._client.dispatch(endpoints.CREATE_PAT, body={"name": name})
        return data.pat

    async def delete(self, pat_id: Id) -> None:
        self._require_user("delete a personal access token")
        await self._client.dispatch(endpoints.DELETE_PAT, {"pat_id": pat_id})


class Users(Namespace):
    """Users SDK."""

    def __init__(self, client: APIClient) -> None:
        super().__init__(client)
        self.pats = PersonalAccessTokens(client)

    async def me(self) -> MeEnvelope:
        """Get the current user with their projects and roles."""
        self._require_user("fetch the current user")
        return await self._client.dispatch(endpoints.GET_ME)
