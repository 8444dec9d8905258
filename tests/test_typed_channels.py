"""Tests for typed channels."""

import json

import httpx
import pytest
import respx
from pydantic import BaseModel, Field, field_validator

from hop_sdk import Hop, PayloadValidationError, typed_channels

BASE_URL = "https://api.hop.io"


class Score(BaseModel):
    points: int
    leader: str | None = None


class Goal(BaseModel):
    player: str


@pytest.fixture
def room():
    client = typed_channels.create(
        Hop("ptk_abc"),
        state=typed_channels.state(Score),
        events=typed_channels.events(goal=Goal),
    )
    return client.select_channel("match_1")


class TestTypedChannel:
    """Tests for validated channel operations."""

    @respx.mock
    async def test_set_state_validates(self, room):
        """Valid state should be sent in its normalised form."""
        route = respx.put(f"{BASE_URL}/v1/channels/match_1/state").mock(
            return_value=httpx.Response(204)
        )

        await room.set_state({"points": "3"})

        assert json.loads(route.calls.last.request.content) == {"points": 3, "leader": None}

    async def test_set_state_rejects_invalid(self, room):
        """Invalid state should fail without sending anything."""
        with respx.mock:
            with pytest.raises(PayloadValidationError):
                await room.set_state({"points": "many"})
            assert respx.calls.call_count == 0

    @respx.mock
    async def test_patch_state_validates_partially(self, room):
        """Patches may omit required fields."""
        route = respx.patch(f"{BASE_URL}/v1/channels/match_1/state").mock(
            return_value=httpx.Response(204)
        )

        await room.patch_state({"leader": "ana"})

        assert json.loads(route.calls.last.request.content) == {"leader": "ana"}

    async def test_patch_state_rejects_unknown_keys(self, room):
        """Patches should not introduce fields the state does not define."""
        with respx.mock:
            with pytest.raises(PayloadValidationError):
                await room.patch_state({"color": "red"})
            assert respx.calls.call_count == 0

    @respx.mock
    async def test_publish_validated_event(self, room):
        """Known events should be validated before publishing."""
        route = respx.post(f"{BASE_URL}/v1/channels/match_1/messages").mock(
            return_value=httpx.Response(204)
        )

        await room.publish("goal", {"player": "ana"})

        assert json.loads(route.calls.last.request.content) == {
            "e": "goal",
            "d": {"player": "ana"},
        }

    async def test_publish_rejects_invalid_event(self, room):
        """Invalid event payloads should fail without sending anything."""
        with respx.mock:
            with pytest.raises(PayloadValidationError):
                await room.publish("goal", {"score": 1})
            assert respx.calls.call_count == 0

    @respx.mock
    async def test_publish_unknown_event_unvalidated(self, room):
        """Events without a validator should be sent as is."""
        route = respx.post(f"{BASE_URL}/v1/channels/match_1/messages").mock(
            return_value=httpx.Response(204)
        )

        await room.publish("chat", "hello")

        assert json.loads(route.calls.last.request.content) == {"e": "chat", "d": "hello"}

    @respx.mock
    async def test_delete(self, room):
        """Should delete the underlying channel."""
        route = respx.delete(f"{BASE_URL}/v1/channels/match_1").mock(
            return_value=httpx.Response(204)
        )

        await room.delete()

        assert route.called


class TestDefinitions:
    """Tests for state and event definitions."""

    @respx.mock
    async def test_no_validator_sends_as_is(self):
        """Without definitions payloads pass straight through."""
        route = respx.put(f"{BASE_URL}/v1/channels/lobby/state").mock(
            return_value=httpx.Response(204)
        )
        channel = typed_channels.create(Hop("ptk_abc")).select_channel("lobby")

        await channel.set_state({"anything": ["goes"]})

        assert json.loads(route.calls.last.request.content) == {"anything": ["goes"]}

    def test_callable_event_validator(self):
        """Plain callables should be accepted as validators."""
        definition = typed_channels.events(ping=lambda data: int(data))
        assert definition.validators["ping"]("4") == 4

    def test_partial_validator_requires_mapping(self):
        """Partial validators should reject non-mapping patches."""
        validate = typed_channels.partial_model_validator(Score)
        with pytest.raises(ValueError):
            validate(["points"])


class Bounded(BaseModel):
    points: int = Field(ge=0)
    nickname: str = Field(default="", max_length=8)

    @field_validator("nickname")
    @classmethod
    def lowercase(cls, value: str) -> str:
        return value.lower()


class TestPartialConstraints:
    """Tests that patches obey the same field rules as full state."""

    @pytest.fixture
    def bounded(self):
        client = typed_channels.create(Hop("ptk_abc"), state=typed_channels.state(Bounded))
        return client.select_channel("match_2")

    async def test_patch_rejects_constraint_violation(self, bounded):
        """A patch breaking a field constraint should fail without sending."""
        with respx.mock:
            with pytest.raises(PayloadValidationError):
                await bounded.patch_state({"points": -1})
            with pytest.raises(PayloadValidationError):
                await bounded.patch_state({"nickname": "far-too-long"})
            assert respx.calls.call_count == 0

    @respx.mock
    async def test_patch_runs_field_validators(self, bounded):
        """Field validators should normalise patched values."""
        route = respx.patch(f"{BASE_URL}/v1/channels/match_2/state").mock(
            return_value=httpx.Response(204)
        )

        await bounded.patch_state({"nickname": "ANA"})

        assert json.loads(route.calls.last.request.content) == {"nickname": "ana"}
