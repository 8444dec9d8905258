"""Credential-kind requirements checked before an operation is dispatched.

Project tokens are bound to a single project, so the server can resolve
the project from the token alone (the ``@this`` path segment). Personal
access tokens and bearer tokens act as a user who may belong to many
projects, so they must name the project explicitly. Conversely, project
tokens have no user attached and cannot call user-scoped operations.
"""

from hop_sdk.auth import AuthKind
from hop_sdk.exceptions import AuthRequirementError

THIS_PROJECT = "@this"


def check_requirement(kind: AuthKind, project_id: str | None, action: str) -> None:
    """Require a project ID unless authenticating with a project token.

    Args:
        kind: The client's credential kind.
        project_id: The project ID supplied by the caller, if any.
        action: What the caller was doing, used in the error message.

    Raises:
        AuthRequirementError: If the project ID is missing for a user credential.
    """
    if kind != AuthKind.PROJECT_TOKEN and not project_id:
        raise AuthRequirementError(
            f"Project ID is required for bearer or PAT authentication to {action}"
        )


def forbid_project_token(kind: AuthKind, action: str) -> None:
    """Reject operations that need a user identity.

    Raises:
        AuthRequirementError: If authenticating with a project token.
    """
    if kind == AuthKind.PROJECT_TOKEN:
        raise AuthRequirementError(
            f"You cannot {action} with a project token. Use a bearer token or PAT"
        )


def project_scope(kind: AuthKind, project_id: str | None, action: str) -> str:
    """Check the project requirement and return the project path segment.

    Returns:
        ``project_id`` when given, otherwise ``"@this"`` for a project token.
    """
    check_requirement(kind, project_id, action)
    return project_id or THIS_PROJECT
