"""Tests for credential classification."""

import pytest
from pydantic import ValidationError

from hop_sdk.auth import AUTH_SCHEMES, AuthKind, auth_header, classify
from hop_sdk.exceptions import InvalidCredentialError


class TestClassify:
    """Tests for classify()."""

    def test_project_token(self):
        """ptk_ prefix should classify as a project token."""
        credential = classify("ptk_abc123")
        assert credential.kind == AuthKind.PROJECT_TOKEN
        assert credential.secret == "ptk_abc123"

    def test_personal_access_token(self):
        """pat_ prefix should classify as a personal access token."""
        assert classify("pat_abc123").kind == AuthKind.PERSONAL_ACCESS_TOKEN

    def test_user_bearer(self):
        """bearer_ prefix should classify as a user bearer token."""
        assert classify("bearer_xyz").kind == AuthKind.USER_BEARER

    def test_is_deterministic(self):
        """Same input should always yield the same credential."""
        assert classify("pat_abc") == classify("pat_abc")

    @pytest.mark.parametrize(
        "secret",
        ["", "ptk_", "abc123", "token_abc", "PTK_abc", "ptk_abc def", "_abc"],
    )
    def test_rejects_unrecognised_secrets(self, secret):
        """Empty or unrecognised secrets should raise InvalidCredentialError."""
        with pytest.raises(InvalidCredentialError):
            classify(secret)

    def test_credential_is_immutable(self):
        """Credential should be frozen after classification."""
        credential = classify("ptk_abc123")
        with pytest.raises(ValidationError):
            credential.kind = AuthKind.USER_BEARER

    def test_repr_hides_secret(self):
        """The secret should not appear in the credential's repr."""
        assert "ptk_abc123" not in repr(classify("ptk_abc123"))


class TestAuthHeader:
    """Tests for auth_header()."""

    def test_every_kind_has_a_scheme(self):
        """Every AuthKind should map to exactly one scheme."""
        assert set(AUTH_SCHEMES) == set(AuthKind)

    def test_schemes_are_distinct(self):
        """Each kind should use a distinct header scheme."""
        assert len(set(AUTH_SCHEMES.values())) == len(AuthKind)

    def test_project_token_header(self):
        """Project tokens should be sent as-is."""
        assert auth_header(classify("ptk_abc")) == ("Authorization", "ptk_abc")

    def test_personal_access_token_header(self):
        """PATs should use the Token scheme."""
        assert auth_header(classify("pat_abc")) == ("Authorization", "Token pat_abc")

    def test_user_bearer_header(self):
        """Bearer tokens should use the Bearer scheme."""
        assert auth_header(classify("bearer_abc")) == ("Authorization", "Bearer bearer_abc")
