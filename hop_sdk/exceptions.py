"""Public exceptions for the Hop SDK."""

from typing import Any


class HopError(Exception):
    """Base exception for all Hop SDK errors."""


class InvalidCredentialError(HopError):
    """The authentication secret is empty or not a recognised token form."""


class AuthRequirementError(HopError):
    """The credential kind is not allowed to call an operation as invoked.

    Raised locally, before any request is sent.
    """


class MissingPathParameterError(HopError, ValueError):
    """A path template placeholder has no value."""

    def __init__(self, template: str, name: str) -> None:
        super().__init__(f"Missing value for path parameter ':{name}' in {template}")
        self.template = template
        self.name = name


class NetworkError(HopError):
    """Transport failure (DNS, refused connection, timeout)."""


class APIError(HopError):
    """Error response from the Hop API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        code: str | None = None,
        detail: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.detail = detail


class DecodeError(HopError):
    """Response body did not match the expected shape."""


class PayloadValidationError(HopError):
    """A channel payload failed its validator."""
