"""Transport settings for requests to the Hop API."""

import httpx

from hop_sdk._version import __version__

DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"hop-sdk/{__version__}"


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.AsyncClient:
    """Create the async client every APIClient sends through.

    ``timeout`` bounds each phase of a request (connect, read, write and
    waiting for a pooled connection) separately, in seconds. Every request
    identifies the SDK and asks for JSON.
    """
    return httpx.AsyncClient(
        base_url=base_url or "",
        timeout=httpx.Timeout(timeout),
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
    )
