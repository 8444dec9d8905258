"""Request dispatcher shared by every SDK namespace."""

import sys
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from hop_sdk._internal.http import DEFAULT_TIMEOUT, create_http_client
from hop_sdk._internal.redaction import redact_payload
from hop_sdk._internal.rest.endpoints import Endpoint
from hop_sdk._internal.rest.paths import Params, split_params
from hop_sdk.auth import AuthKind, Credential, auth_header
from hop_sdk.exceptions import APIError, DecodeError, NetworkError

DEFAULT_BASE_URL = "https://api.hop.io"


class APIClient:
    """Low-level client for the Hop API.

    Each call to `dispatch` performs exactly one HTTP round trip: it renders
    the endpoint's path template, attaches the credential's auth header,
    encodes the body, and decodes the ``{"success": ..., "data": ...}``
    envelope into the endpoint's response model.

    Nothing is retried. Errors propagate to the caller as `NetworkError`,
    `APIError` or `DecodeError`. The client keeps no per-call state, so
    concurrent dispatches are independent.
    """

    def __init__(
        self,
        credential: Credential,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the API client.

        Args:
            credential: The classified credential used for every request.
            base_url: Base URL of the Hop API.
            timeout: Request timeout in seconds.
            debug: Enable debug logging to stderr.
        """
        self._credential = credential
        self._base_url = base_url.rstrip("/")
        self._debug = debug
        self._http = create_http_client(timeout=timeout, base_url=self._base_url)

    @property
    def auth_type(self) -> AuthKind:
        """The kind of credential this client authenticates with."""
        return self._credential.kind

    @property
    def base_url(self) -> str:
        return self._base_url

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[hop-sdk] {message}", file=sys.stderr)

    async def aclose(self) -> None:
        """Close the underlying HTTP connections."""
        await self._http.aclose()

    def url(self, template: str, params: Params | None = None) -> str:
        """Build an absolute URL from a path template and parameters.

        Placeholders are substituted from ``params``; remaining entries with
        a value become query parameters.

        Raises:
            MissingPathParameterError: If a placeholder has no value.
        """
        path, query = split_params(template, params)
        url = httpx.URL(self._base_url + path)
        return str(url.copy_merge_params(query)) if query else str(url)

    def _encode_body(self, endpoint: Endpoint[Any], body: Any) -> tuple[dict[str, Any], Any]:
        """Return request kwargs and a loggable form of the body."""
        if body is None:
            return {}, None

        if endpoint.body is str:
            if not isinstance(body, str):
                raise TypeError(f"{endpoint} takes a text body, got {type(body).__name__}")
            return {
                "content": body.encode("utf-8"),
                "headers": {"Content-Type": "text/plain"},
            }, f"<{len(body)} chars of text>"

        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", exclude_none=True)
        return {"json": body}, redact_payload(body)

    async def dispatch(
        self,
        endpoint: Endpoint[Any],
        params: Params | None = None,
        body: Any = None,
    ) -> Any:
        """Send one request to an endpoint and decode its response.

        Args:
            endpoint: The endpoint descriptor.
            params: Path placeholder values plus query parameters. Query
                parameters whose value is None are omitted.
            body: Request body. A pydantic model or dict is sent as JSON; for
                text endpoints a str is sent verbatim as text/plain.

        Returns:
            The decoded response envelope, or None when the endpoint
            declares no response.

        Raises:
            MissingPathParameterError: A placeholder has no value. Nothing is sent.
            NetworkError: The request could not be completed.
            APIError: The API answered with an error.
            DecodeError: The response did not match the expected shape.
        """
        path, query = split_params(endpoint.path, params)
        request_kwargs, loggable = self._encode_body(endpoint, body)

        header_name, header_value = auth_header(self._credential)
        headers = {header_name: header_value, **request_kwargs.pop("headers", {})}

        self._log_debug(f"{endpoint.method} {path} query={query} body={loggable}")

        try:
            response = await self._http.request(
                endpoint.method,
                path,
                params=query or None,
                headers=headers,
                **request_kwargs,
            )
        except httpx.DecodingError as e:
            self._log_debug(f"{endpoint} body could not be decoded: {e!r}")
            raise DecodeError(f"{endpoint} returned a body that could not be decoded: {e}") from e
        except httpx.TransportError as e:
            self._log_debug(f"{endpoint} failed: {e!r}")
            raise NetworkError(f"Request to {endpoint} failed: {e}") from e

        self._log_debug(f"{endpoint} -> {response.status_code}")
        return self._decode(endpoint, response)

    def _decode(self, endpoint: Endpoint[Any], response: httpx.Response) -> Any:
        """Check the status and unwrap the response envelope."""
        if not response.is_success:
            raise self._api_error(endpoint, response.status_code, self._error_payload(response))

        if endpoint.response is None:
            return None

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"{endpoint} returned a body that is not JSON") from e

        if not isinstance(payload, dict):
            raise DecodeError(f"{endpoint} returned a non-object body")
        if payload.get("success") is False:
            raise self._api_error(endpoint, response.status_code, payload)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise DecodeError(f"{endpoint} response is missing its data object")

        try:
            return endpoint.response.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"{endpoint} response did not match the expected shape: {e}") from e

    @staticmethod
    def _error_payload(response: httpx.Response) -> Any:
        """Return the JSON error body, or the raw text if it isn't JSON."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def _api_error(self, endpoint: Endpoint[Any], status_code: int, payload: Any) -> APIError:
        """Build an APIError from an error envelope, if the server sent one."""
        code = None
        message = f"{endpoint} failed with status {status_code}"
        error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(error, dict):
            code = error.get("code")
            message = error.get("message") or message
        return APIError(message, status_code=status_code, code=code, detail=payload)
