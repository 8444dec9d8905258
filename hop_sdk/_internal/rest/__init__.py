"""REST layer: endpoint descriptors, path templating and the dispatcher."""

from hop_sdk._internal.rest.client import DEFAULT_BASE_URL, APIClient
from hop_sdk._internal.rest.endpoints import Endpoint
from hop_sdk._internal.rest.paths import placeholders, render_path, split_params

__all__ = [
    "APIClient",
    "DEFAULT_BASE_URL",
    "Endpoint",
    "placeholders",
    "render_path",
    "split_params",
]
