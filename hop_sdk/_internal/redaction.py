"""Redaction of sensitive values in debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "auth",
    "authorization",
    "env",
    "password",
    "secret",
    "token",
    "value",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from a request body.

    Creates a copy - the original payload is never mutated.

    Args:
        payload: The JSON-serializable body to redact.

    Returns:
        A copy with sensitive values replaced by "[REDACTED]".
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload
