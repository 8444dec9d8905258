"""Tests for the projects SDK."""

import json

import httpx
import pytest
import respx

from hop_sdk import AuthRequirementError, Hop

BASE_URL = "https://api.hop.io"

TOKEN = {"id": "ptkid_1", "flags": 7, "created_at": "2023-01-01T00:00:00Z"}
WEBHOOK = {
    "id": "webhook_1",
    "project_id": "project_1",
    "webhook_url": "https://example.com/hook",
    "events": ["ignite.deployment.created"],
    "created_at": "2023-01-01T00:00:00Z",
}
SECRET = {
    "id": "secret_1",
    "name": "DATABASE_URL",
    "digest": "sha256:abc",
    "created_at": "2023-01-01T00:00:00Z",
}
MEMBER = {"id": "pm_1", "role": "owner", "joined_at": "2023-01-01T00:00:00Z"}


def ok(**data):
    return httpx.Response(200, json={"success": True, "data": data})


class TestProjectTokens:
    """Tests for projects.tokens."""

    @respx.mock
    async def test_get_with_project_token_uses_this(self):
        """Project tokens should resolve the project via @this."""
        route = respx.get(f"{BASE_URL}/v1/projects/@this/tokens").mock(
            return_value=ok(project_tokens=[TOKEN])
        )

        tokens = await Hop("ptk_abc123").projects.tokens.get()

        assert route.called
        assert [token.id for token in tokens] == ["ptkid_1"]

    @respx.mock
    async def test_get_with_explicit_project(self):
        """An explicit project ID should be placed in the path."""
        route = respx.get(f"{BASE_URL}/v1/projects/project_1/tokens").mock(
            return_value=ok(project_tokens=[])
        )

        assert await Hop("bearer_xyz").projects.tokens.get("project_1") == []
        assert route.called

    async def test_get_with_bearer_and_no_project_fails_locally(self):
        """A bearer without a project ID should fail before any HTTP call."""
        hop = Hop("bearer_xyz")
        with respx.mock(assert_all_called=False) as router:
            route = router.get(path__startswith="/v1/projects/").mock(
                return_value=ok(project_tokens=[])
            )
            with pytest.raises(AuthRequirementError):
                await hop.projects.tokens.get()

            assert route.call_count == 0
            assert router.calls.call_count == 0

    @respx.mock
    async def test_create_sends_flags(self):
        """Should POST the permission flags."""
        route = respx.post(f"{BASE_URL}/v1/projects/project_1/tokens").mock(
            return_value=ok(project_token={**TOKEN, "token": "ptk_new"})
        )

        token = await Hop("pat_abc").projects.tokens.create(7, "project_1")

        assert json.loads(route.calls.last.request.content) == {"flags": 7}
        assert token.token == "ptk_new"

    @respx.mock
    async def test_delete(self):
        """Should DELETE the token by ID."""
        route = respx.delete(f"{BASE_URL}/v1/projects/@this/tokens/ptkid_1").mock(
            return_value=httpx.Response(204)
        )

        assert await Hop("ptk_abc").projects.tokens.delete("ptkid_1") is None
        assert route.called

    async def test_delete_with_pat_requires_project(self):
        """PATs must name the project to delete a token."""
        with respx.mock:
            with pytest.raises(AuthRequirementError):
                await Hop("pat_abc").projects.tokens.delete("ptkid_1")
            assert respx.calls.call_count == 0

    def test_project_tokens_is_alias(self):
        """project_tokens should be the same object as tokens."""
        projects = Hop("ptk_abc").projects
        assert projects.project_tokens is projects.tokens


class TestMembers:
    """Tests for project member operations."""

    @respx.mock
    async def test_get_all_members(self):
        """Should list members of the project."""
        respx.get(f"{BASE_URL}/v1/projects/project_1/members").mock(
            return_value=ok(members=[MEMBER])
        )

        members = await Hop("bearer_xyz").projects.get_all_members("project_1")

        assert members[0].role == "owner"

    @respx.mock
    async def test_get_current_member(self):
        """Users should be able to resolve themselves."""
        route = respx.get(f"{BASE_URL}/v1/projects/project_1/members/@me").mock(
            return_value=ok(project_member=MEMBER)
        )

        member = await Hop("pat_abc").projects.get_current_member("project_1")

        assert route.called
        assert member.id == "pm_1"

    @pytest.mark.parametrize("project_id", [None, "project_1"])
    async def test_get_current_member_forbidden_for_project_token(self, project_id):
        """Project tokens should always be refused, even with a project ID."""
        with respx.mock:
            with pytest.raises(AuthRequirementError):
                await Hop("ptk_abc").projects.get_current_member(project_id)
            assert respx.calls.call_count == 0


class TestWebhooks:
    """Tests for projects.webhooks."""

    @respx.mock
    async def test_create(self):
        """Should POST the URL and events."""
        route = respx.post(f"{BASE_URL}/v1/projects/@this/webhooks").mock(
            return_value=ok(webhook=WEBHOOK)
        )

        webhook = await Hop("ptk_abc").projects.webhooks.create(
            "https://example.com/hook", ["ignite.deployment.created"]
        )

        assert json.loads(route.calls.last.request.content) == {
            "webhook_url": "https://example.com/hook",
            "events": ["ignite.deployment.created"],
        }
        assert webhook.id == "webhook_1"

    @respx.mock
    async def test_edit_omits_unset_fields(self):
        """Fields left as None should not be sent."""
        route = respx.patch(f"{BASE_URL}/v1/projects/project_1/webhooks/webhook_1").mock(
            return_value=ok(webhook=WEBHOOK)
        )

        await Hop("pat_abc").projects.webhooks.edit(
            "webhook_1", events=["ignite.deployment.created"], project_id="project_1"
        )

        assert json.loads(route.calls.last.request.content) == {
            "events": ["ignite.deployment.created"]
        }

    @respx.mock
    async def test_get_all(self):
        """Should list webhooks."""
        respx.get(f"{BASE_URL}/v1/projects/@this/webhooks").mock(
            return_value=ok(webhooks=[WEBHOOK])
        )

        webhooks = await Hop("ptk_abc").projects.webhooks.get_all()

        assert webhooks[0].webhook_url == "https://example.com/hook"

    @respx.mock
    async def test_regenerate_secret(self):
        """Should return the new signing secret."""
        respx.post(f"{BASE_URL}/v1/projects/@this/webhooks/webhook_1/regenerate").mock(
            return_value=ok(secret="whsec_new")
        )

        assert await Hop("ptk_abc").projects.webhooks.regenerate_secret("webhook_1") == "whsec_new"

    @respx.mock
    async def test_delete(self):
        """Should DELETE the webhook."""
        route = respx.delete(f"{BASE_URL}/v1/projects/project_1/webhooks/webhook_1").mock(
            return_value=httpx.Response(204)
        )

        await Hop("bearer_xyz").projects.webhooks.delete("webhook_1", "project_1")

        assert route.called


class TestSecrets:
    """Tests for projects.secrets."""

    @respx.mock
    async def test_create_sends_raw_text(self):
        """Secret values should be sent unencoded as text/plain, not JSON."""
        route = respx.put(f"{BASE_URL}/v1/projects/@this/secrets/DATABASE_URL").mock(
            return_value=ok(secret=SECRET)
        )

        secret = await Hop("ptk_abc").projects.secrets.create(
            "DATABASE_URL", "postgres://user:pass@db:5432/app"
        )

        request = route.calls.last.request
        assert request.method == "PUT"
        assert request.headers["content-type"] == "text/plain"
        assert request.content == b"postgres://user:pass@db:5432/app"
        assert secret.name == "DATABASE_URL"
        assert "project" not in request.url.params

    @respx.mock
    async def test_create_with_explicit_project(self):
        """An explicit project should travel as a query parameter on @this."""
        route = respx.put(path="/v1/projects/@this/secrets/API_KEY").mock(
            return_value=ok(secret={**SECRET, "name": "API_KEY"})
        )

        await Hop("bearer_xyz").projects.secrets.create("API_KEY", "{\"a\": 1}", "project_1")

        request = route.calls.last.request
        assert request.url.params["project"] == "project_1"
        assert request.content == b'{"a": 1}'

    async def test_create_with_bearer_requires_project(self):
        """Bearers must name the project to create a secret."""
        with respx.mock:
            with pytest.raises(AuthRequirementError):
                await Hop("bearer_xyz").projects.secrets.create("A", "b")
            assert respx.calls.call_count == 0

    @respx.mock
    async def test_get_all(self):
        """Should list secrets without values."""
        respx.get(f"{BASE_URL}/v1/projects/@this/secrets").mock(
            return_value=ok(secrets=[SECRET])
        )

        secrets = await Hop("ptk_abc").projects.secrets.get_all()

        assert secrets[0].digest == "sha256:abc"

    @respx.mock
    async def test_delete_by_name(self):
        """Should accept a secret name in place of its ID."""
        route = respx.delete(f"{BASE_URL}/v1/projects/@this/secrets/DATABASE_URL").mock(
            return_value=httpx.Response(204)
        )

        await Hop("ptk_abc").projects.secrets.delete("DATABASE_URL")

        assert route.called
