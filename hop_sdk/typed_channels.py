"""Channels with validated state and events.

A typed channels client wraps `Hop.channels` and runs an optional
validator over every payload before it is sent. Without a validator the
payload is sent as is.

Example:
    class Score(BaseModel):
        points: int

    client = typed_channels.create(
        hop,
        state=typed_channels.state(Score),
        events=typed_channels.events(goal=Goal),
    )
    room = client.select_channel("match_123")
    await room.set_state({"points": 3})
    await room.publish("goal", {"player": "ana"})
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import BaseModel, Field, ValidationError, create_model

from hop_sdk.exceptions import PayloadValidationError
from hop_sdk.models.common import Id

if TYPE_CHECKING:
    from hop_sdk.client import Hop

# Takes a payload and returns the (possibly normalised) payload to send.
# Raises on invalid input.
Validator = Callable[[Any], Any]


@dataclass(frozen=True)
class StateDefinition:
    validate: Validator | None = None
    validate_partial: Validator | None = None


@dataclass(frozen=True)
class EventsDefinition:
    validators: Mapping[str, Validator] = field(default_factory=dict)


def model_validator(model: type[BaseModel]) -> Validator:
    """Build a validator that checks a payload against a pydantic model."""

    def validate(data: Any) -> Any:
        return model.model_validate(data).model_dump(mode="json")

    return validate


def partial_model_validator(model: type[BaseModel]) -> Validator:
    """Build a validator that checks only the keys a payload provides.

    Fields keep their constraints, validators and aliases. Every field
    becomes optional and only the keys that were supplied are returned.
    """
    fields: dict[str, Any] = {}
    for name, info in model.model_fields.items():
        annotation = Annotated[info.annotation, *info.metadata] if info.metadata else info.annotation
        fields[name] = (annotation, Field(None, alias=info.alias))
    partial = create_model(f"Partial{model.__name__}", __base__=model, **fields)
    known = set(model.model_fields) | {
        info.alias for info in model.model_fields.values() if info.alias
    }

    def validate(data: Any) -> Any:
        if not isinstance(data, Mapping):
            raise ValueError(f"{model.__name__} patch must be a mapping")
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown {model.__name__} fields: {', '.join(sorted(unknown))}")
        return partial.model_validate(data).model_dump(mode="json", exclude_unset=True)

    return validate


def state(model: type[BaseModel] | None = None) -> StateDefinition:
    """Define a channel's state, optionally validated by a pydantic model."""
    if model is None:
        return StateDefinition()
    return StateDefinition(model_validator(model), partial_model_validator(model))


def events(**models: type[BaseModel] | Validator) -> EventsDefinition:
    """Define validated events by name.

    Each value is a pydantic model or any validator callable.
    """
    return EventsDefinition(
        {
            name: model_validator(value)
            if isinstance(value, type) and issubclass(value, BaseModel)
            else value
            for name, value in models.items()
        }
    )


def _run(validator: Validator | None, data: Any, what: str) -> Any:
    if validator is None:
        return data
    try:
        return validator(data)
    except (ValidationError, ValueError, TypeError) as e:
        raise PayloadValidationError(f"Invalid {what}: {e}") from e


class TypedChannel:
    """A single channel bound to its state and event definitions."""

    def __init__(
        self,
        hop: "Hop",
        channel_id: str,
        state_definition: StateDefinition,
        events_definition: EventsDefinition,
    ) -> None:
        self._hop = hop
        self.channel_id = channel_id
        self._state = state_definition
        self._events = events_definition

    async def publish(self, event: str, data: Any) -> None:
        validator = self._events.validators.get(event)
        payload = _run(validator, data, f"payload for event {event!r}")
        await self._hop.channels.publish_message(self.channel_id, event, payload)

    async def delete(self) -> None:
        await self._hop.channels.delete(self.channel_id)

    async def subscribe_tokens(self, tokens: Iterable[Id]) -> None:
        await self._hop.channels.subscribe_tokens(self.channel_id, tokens)

    async def set_state(self, new_state: dict[str, Any]) -> None:
        payload = _run(self._state.validate, new_state, "channel state")
        await self._hop.channels.set_state(self.channel_id, payload)

    async def patch_state(self, patch: dict[str, Any]) -> None:
        payload = _run(self._state.validate_partial, patch, "channel state patch")
        await self._hop.channels.patch_state(self.channel_id, payload)


class TypedChannelsClient:
    def __init__(
        self,
        hop: "Hop",
        state_definition: StateDefinition,
        events_definition: EventsDefinition,
    ) -> None:
        self._hop = hop
        self._state = state_definition
        self._events = events_definition

    def select_channel(self, channel_id: str) -> TypedChannel:
        return TypedChannel(self._hop, channel_id, self._state, self._events)


def create(
    hop: "Hop",
    state: StateDefinition | None = None,
    events: EventsDefinition | None = None,
) -> TypedChannelsClient:
    """Create a typed channels client on top of a Hop client."""
    return TypedChannelsClient(hop, state or StateDefinition(), events or EventsDefinition())
