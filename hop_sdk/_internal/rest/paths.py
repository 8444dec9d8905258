"""Path template rendering.

Templates name their parameters with a leading colon, e.g.
``/v1/projects/:project_id/tokens/:project_token_id``. Values are encoded
as single path segments, in the order the placeholders appear.
"""

import re
from typing import Any
from urllib.parse import quote

from hop_sdk.exceptions import MissingPathParameterError

PLACEHOLDER_RE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")

Params = dict[str, Any]


def placeholders(template: str) -> list[str]:
    """Return the placeholder names of a template in order of appearance."""
    return PLACEHOLDER_RE.findall(template)


def _encode(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_path(template: str, params: Params | None = None) -> str:
    """Substitute every placeholder in a template.

    Raises:
        MissingPathParameterError: If a placeholder has no value, or its
            value is None or empty.
    """
    params = params or {}

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if params.get(name) in (None, ""):
            raise MissingPathParameterError(template, name)
        return quote(_encode(params[name]), safe="@")

    return PLACEHOLDER_RE.sub(substitute, template)


def query_params(template: str, params: Params | None = None) -> dict[str, str]:
    """Return the params that are not placeholders, dropping None values."""
    names = set(placeholders(template))
    return {
        key: _encode(value)
        for key, value in (params or {}).items()
        if key not in names and value is not None
    }


def split_params(template: str, params: Params | None = None) -> tuple[str, dict[str, str]]:
    """Render a template and collect its query parameters.

    Returns:
        A (path, query) tuple.
    """
    return render_path(template, params), query_params(template, params)
