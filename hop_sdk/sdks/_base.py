"""Base class for SDK namespaces."""

from hop_sdk._internal.requirements import check_requirement, forbid_project_token, project_scope
from hop_sdk._internal.rest import APIClient


class Namespace:
    """A group of operations sharing one APIClient.

    Namespaces hold a reference to the client; they never own or close it.
    """

    def __init__(self, client: APIClient) -> None:
        self._client = client

    def _require_project(self, project_id: str | None, action: str) -> None:
        check_requirement(self._client.auth_type, project_id, action)

    def _project_scope(self, project_id: str | None, action: str) -> str:
        return project_scope(self._client.auth_type, project_id, action)

    def _require_user(self, action: str) -> None:
        forbid_project_token(self._client.auth_type, action)
