"""Projects SDK: members, project tokens, webhooks and secrets.

Every operation here is scoped to a project. The project ID may be
omitted only when the client authenticates with a project token.
"""

from hop_sdk._internal.rest import APIClient, endpoints
from hop_sdk.models.common import Id
from hop_sdk.models.projects import ProjectMember, ProjectToken, Secret, Webhook
from hop_sdk.sdks._base import Namespace


class ProjectTokens(Namespace):
    """Project token management."""

    async def get(self, project_id: Id | None = None) -> list[ProjectToken]:
        """Get all project tokens for a project."""
        project = self._project_scope(project_id, "fetch project tokens")
        data = await self._client.dispatch(
            endpoints.LIST_PROJECT_TOKENS, {"project_id": project}
        )
        return data.project_tokens

    async def create(self, flags: int, project_id: Id | None = None) -> ProjectToken:
        """Create a new project token.

        Args:
            flags: Permission bit flags for the token.
            project_id: The project to create the token in.

        Returns:
            The new token, including its secret.
        """
        project = self._project_scope(project_id, "create a project token")
        data = await self._client.dispatch(
            endpoints.CREATE_PROJECT_TOKEN, {"project_id": project}, {"flags": flags}
        )
        return data.project_token

    async def delete(self, project_token_id: Id, project_id: Id | None = None) -> None:
        """Delete a project token by its ID."""
        project = self._project_scope(project_id, "delete a project token")
        await self._client.dispatch(
            endpoints.DELETE_PROJECT_TOKEN,
            {"project_id": project, "project_token_id": project_token_id},
        )


class Webhooks(Namespace):
    """Project webhook management."""

    async def get_all(self, project_id: Id | None = None) -> list[Webhook]:
        project = self._project_scope(project_id, "fetch webhooks")
        data = await self._client.dispatch(endpoints.LIST_WEBHOOKS, {"project_id": project})
        return data.webhooks

    async def create(
        self,
        webhook_url: str,
        events: list[str],
        project_id: Id | None = None,
    ) -> Webhook:
        """Create a webhook.

        Args:
            webhook_url: URL the events are delivered to.
            events: Event IDs to subscribe to, e.g. ``"ignite.deployment.created"``.
            project_id: The project to create the webhook in.
        """
        project = self._project_scope(project_id, "create a webhook")
        data = await self._client.dispatch(
            endpoints.CREATE_WEBHOOK,
            {"project_id": project},
            {"webhook_url": webhook_url, "events": events},
        )
        return data.webhook

    async def edit(
        self,
        webhook_id: Id,
        *,
        webhook_url: str | None = None,
        events: list[str] | None = None,
        project_id: Id | None = None,
    ) -> Webhook:
        """Edit a webhook. Fields left as None are unchanged."""
        project = self._project_scope(project_id, "edit a webhook")
        body = {
            key: value
            for key, value in {"webhook_url": webhook_url, "events": events}.items()
            if value is not None
        }
        data = await self._client.dispatch(
            endpoints.EDIT_WEBHOOK,
            {"project_id": project, "webhook_id": webhook_id},
            body,
        )
        return data.webhook

    async def delete(self, webhook_id: Id, project_id: Id | None = None) -> None:
        project = self._project_scope(project_id, "delete a webhook")
        await self._client.dispatch(
            endpoints.DELETE_WEBHOOK, {"project_id": project, "webhook_id": webhook_id}
        )

    async def regenerate_secret(self, webhook_id: Id, project_id: Id | None = None) -> str:
        """Regenerate a webhook's signing secret and return the new one."""
        project = self._project_scope(project_id, "regenerate a webhook secret")
        data = await self._client.dispatch(
            endpoints.REGENERATE_WEBHOOK_SECRET,
            {"project_id": project, "webhook_id": webhook_id},
        )
        return data.secret


class Secrets(Namespace):
    """Project secret management."""

    async def get_all(self, project_id: Id | None = None) -> list[Secret]:
        """Get all secrets in a project. Values are never returned."""
        project = self._project_scope(project_id, "fetch all secrets")
        data = await self._client.dispatch(endpoints.LIST_SECRETS, {"project_id": project})
        return data.secrets

    async def create(self, name: str, value: str, project_id: Id | None = None) -> Secret:
        """Create or overwrite a project secret.

        The value is sent as a raw text/plain body, not JSON. The route is
        always addressed through ``@this``; an explicit project travels in
        the ``project`` query parameter.

        Args:
            name: The name of the secret.
            value: The value of the secret.
            project_id: The project to create the secret in.
        """
        self._require_project(project_id, "create a secret")
        data = await self._client.dispatch(
            endpoints.PUT_SECRET, {"name": name, "project": project_id}, value
        )
        return data.secret

    async def delete(self, secret_id: Id | str, project_id: Id | None = None) -> None:
        """Delete a secret by its ID or name."""
        project = self._project_scope(project_id, "delete a secret")
        await self._client.dispatch(
            endpoints.DELETE_SECRET, {"project_id": project, "secret_id": secret_id}
        )


class Projects(Namespace):
    """Projects SDK."""

    def __init__(self, client: APIClient) -> None:
        super().__init__(client)
        self.tokens = ProjectTokens(client)
        self.webhooks = Webhooks(client)
        self.secrets = Secrets(client)

    @property
    def project_tokens(self) -> ProjectTokens:
        """Deprecated alias of `tokens`."""
        return self.tokens

    async def get_all_members(self, project_id: Id | None = None) -> list[ProjectMember]:
        project = self._project_scope(project_id, "fetch all project members")
        data = await self._client.dispatch(endpoints.LIST_MEMBERS, {"project_id": project})
        return data.members

    async def get_current_member(self, project_id: Id) -> ProjectMember:
        """Fetch the member the SDK is authorized as.

        Project tokens have no user attached, so this always fails for them.
        """
        self._require_user("resolve a project member")
        data = await self._client.dispatch(
            endpoints.GET_CURRENT_MEMBER, {"project_id": project_id}
        )
        return data.project_member
