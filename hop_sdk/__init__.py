"""Hop SDK for Python.

Async client for the Hop container-hosting API.

Public API:
    Hop - Client exposing the ignite, projects, registry, channels, pipe
          and users SDKs
    classify / AuthKind - Credential classification
    typed_channels - Channels with validated state and events
"""

from hop_sdk._version import __version__
from hop_sdk.auth import AuthKind, Credential, classify
from hop_sdk.client import Hop
from hop_sdk.exceptions import (
    APIError,
    AuthRequirementError,
    DecodeError,
    HopError,
    InvalidCredentialError,
    MissingPathParameterError,
    NetworkError,
    PayloadValidationError,
)

__all__ = [
    "__version__",
    "APIError",
    "AuthKind",
    "AuthRequirementError",
    "Credential",
    "DecodeError",
    "Hop",
    "HopError",
    "InvalidCredentialError",
    "MissingPathParameterError",
    "NetworkError",
    "PayloadValidationError",
    "classify",
]
