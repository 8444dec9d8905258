"""Tests for the Hop client."""

import os
from unittest.mock import patch

import httpx
import pytest
import respx

from hop_sdk import AuthKind, Hop, InvalidCredentialError
from hop_sdk.sdks import Channels, Ignite, Pipe, Projects, Registry, Users


class TestHop:
    """Tests for Hop construction."""

    def test_classifies_token(self):
        """The token kind should be exposed on the client."""
        assert Hop("ptk_abc").auth_kind == AuthKind.PROJECT_TOKEN
        assert Hop("pat_abc").auth_kind == AuthKind.PERSONAL_ACCESS_TOKEN
        assert Hop("bearer_abc").auth_kind == AuthKind.USER_BEARER

    @pytest.mark.parametrize("token", ["", "abc", "xyz_abc"])
    def test_rejects_bad_token(self, token):
        """Unrecognised tokens should fail at construction."""
        with pytest.raises(InvalidCredentialError):
            Hop(token)

    def test_exposes_namespaces(self):
        """Every SDK namespace should be available."""
        hop = Hop("ptk_abc")
        assert isinstance(hop.ignite, Ignite)
        assert isinstance(hop.users, Users)
        assert isinstance(hop.projects, Projects)
        assert isinstance(hop.pipe, Pipe)
        assert isinstance(hop.registry, Registry)
        assert isinstance(hop.channels, Channels)

    def test_custom_base_url(self):
        """A custom base URL should be used for requests."""
        hop = Hop("ptk_abc", "https://api.example.com/")
        assert hop.client.base_url == "https://api.example.com"

    @respx.mock
    async def test_context_manager_closes_client(self):
        """Leaving the context should close the HTTP client."""
        respx.get("https://api.hop.io/v1/registry/images").mock(
            return_value=httpx.Response(200, json={"success": True, "data": {"images": []}})
        )

        async with Hop("ptk_abc") as hop:
            assert await hop.registry.images.get_all() == []

        assert hop.client._http.is_closed


class TestFromEnv:
    """Tests for Hop.from_env."""

    def test_reads_token(self):
        """Should read the token from HOP_TOKEN."""
        with patch.dict(os.environ, {"HOP_TOKEN": "pat_abc"}, clear=True):
            hop = Hop.from_env()

        assert hop.auth_kind == AuthKind.PERSONAL_ACCESS_TOKEN
        assert hop.client.base_url == "https://api.hop.io"

    def test_reads_optional_settings(self):
        """Should read base URL, timeout and debug flag."""
        env = {
            "HOP_TOKEN": "ptk_abc",
            "HOP_BASE_URL": "https://api.example.com",
            "HOP_TIMEOUT_MS": "2500",
            "HOP_DEBUG": "1",
        }
        with patch.dict(os.environ, env, clear=True):
            hop = Hop.from_env()

        assert hop.client.base_url == "https://api.example.com"
        assert hop.client._http.timeout.read == 2.5
        assert hop.client._debug is True

    def test_missing_token(self):
        """A missing HOP_TOKEN should raise InvalidCredentialError."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(InvalidCredentialError):
                Hop.from_env()

    def test_malformed_timeout(self):
        """A non-integer HOP_TIMEOUT_MS should raise ValueError."""
        env = {"HOP_TOKEN": "ptk_abc", "HOP_TIMEOUT_MS": "soon"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError):
                Hop.from_env()
