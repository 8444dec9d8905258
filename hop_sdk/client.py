"""User-facing Hop client.

Example usage:
    from hop_sdk import Hop

    async with Hop("ptk_...") as hop:
        images = await hop.registry.images.get_all()
        await hop.projects.secrets.create("DATABASE_URL", "postgres://...")
"""

import os

from hop_sdk._internal.http import DEFAULT_TIMEOUT
from hop_sdk._internal.rest import DEFAULT_BASE_URL, APIClient
from hop_sdk.auth import AuthKind, classify
from hop_sdk.sdks import Channels, Ignite, Pipe, Projects, Registry, Users


class Hop:
    """Client for the Hop API and all of its SDKs.

    The authentication secret is classified once, on construction, as a
    project token, personal access token or user bearer token. That kind
    decides which operations may omit a project ID and which are refused
    outright.

    Use `Hop.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        authentication: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            authentication: A project token, user bearer or personal access token.
            base_url: Base URL of the Hop API.
            timeout: Request timeout in seconds.
            debug: Enable debug logging to stderr.

        Raises:
            InvalidCredentialError: If the token is missing or unrecognised.
        """
        self.client = APIClient(
            classify(authentication),
            base_url=base_url,
            timeout=timeout,
            debug=debug,
        )

        self.ignite = Ignite(self.client)
        self.users = Users(self.client)
        self.projects = Projects(self.client)
        self.pipe = Pipe(self.client)
        self.registry = Registry(self.client)
        self.channels = Channels(self.client)

    @classmethod
    def from_env(cls) -> "Hop":
        """Create a client from environment variables.

        Required environment variables:
            HOP_TOKEN: The authentication token.

        Optional environment variables:
            HOP_BASE_URL: Base URL of the Hop API.
            HOP_TIMEOUT_MS: Request timeout in milliseconds.
            HOP_DEBUG: Set to "1" to enable debug logging.

        Raises:
            InvalidCredentialError: If HOP_TOKEN is missing or unrecognised.
            ValueError: If HOP_TIMEOUT_MS is not an integer.
        """
        authentication = os.environ.get("HOP_TOKEN", "")
        base_url = os.environ.get("HOP_BASE_URL") or DEFAULT_BASE_URL
        timeout_ms = int(os.environ.get("HOP_TIMEOUT_MS", str(int(DEFAULT_TIMEOUT * 1000))))
        debug = os.environ.get("HOP_DEBUG", "") == "1"

        return cls(authentication, base_url, timeout=timeout_ms / 1000, debug=debug)

    @property
    def auth_kind(self) -> AuthKind:
        return self.client.auth_type

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "Hop":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
