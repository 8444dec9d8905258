"""Credential classification and authentication header schemes.

A Hop secret carries its kind in its prefix:

    ptk_...     project token, bound to exactly one project
    pat_...     personal access token, acts as a user
    bearer_...  user bearer token, acts as a user
"""

import re
from enum import StrEnum

from pydantic import BaseModel, Field

from hop_sdk.exceptions import InvalidCredentialError


class AuthKind(StrEnum):
    """Kinds of credential the Hop API accepts."""

    PROJECT_TOKEN = "project_token"
    PERSONAL_ACCESS_TOKEN = "personal_access_token"
    USER_BEARER = "user_bearer"


PREFIXES: dict[str, AuthKind] = {
    "ptk": AuthKind.PROJECT_TOKEN,
    "pat": AuthKind.PERSONAL_ACCESS_TOKEN,
    "bearer": AuthKind.USER_BEARER,
}

# (header name, value format) per kind
AUTH_SCHEMES: dict[AuthKind, tuple[str, str]] = {
    AuthKind.PROJECT_TOKEN: ("Authorization", "{secret}"),
    AuthKind.PERSONAL_ACCESS_TOKEN: ("Authorization", "Token {secret}"),
    AuthKind.USER_BEARER: ("Authorization", "Bearer {secret}"),
}

_SECRET_RE = re.compile(r"^(?P<prefix>[a-z]+)_\S+$")


class Credential(BaseModel):
    """A classified secret. Immutable for the lifetime of a client."""

    secret: str = Field(repr=False)
    kind: AuthKind

    model_config = {"frozen": True}


def classify(secret: str) -> Credential:
    """Classify a secret by its prefix.

    Args:
        secret: A project token, personal access token or user bearer token.

    Returns:
        The classified Credential.

    Raises:
        InvalidCredentialError: If the secret is empty or unrecognised.
    """
    if not secret:
        raise InvalidCredentialError(
            "Missing authentication token. Provide a valid project token, "
            "user bearer or personal access token"
        )

    match = _SECRET_RE.match(secret)
    kind = PREFIXES.get(match.group("prefix")) if match else None
    if kind is None:
        raise InvalidCredentialError(
            "Unrecognised authentication token. Expected a token starting with "
            "ptk_, pat_ or bearer_"
        )

    return Credential(secret=secret, kind=kind)


def auth_header(credential: Credential) -> tuple[str, str]:
    """Return the (name, value) of the header that authenticates a credential."""
    name, value_format = AUTH_SCHEMES[credential.kind]
    return name, value_format.format(secret=credential.secret)
