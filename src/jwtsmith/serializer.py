"""JSON serialization of token headers and claims."""

from __future__ import annotations

import json

from pydantic import BaseModel, JsonValue

from .exceptions import InvalidEncodingError

__all__ = ["deserialize", "serialize"]


def _reject_constant(name: str) -> None:
    raise ValueError(f"Invalid JSON constant {name}")


def serialize(value: BaseModel | JsonValue) -> str:
    """Serialize a header or claim set to compact JSON.

    Keys are kept in insertion order rather than sorted, and no whitespace is
    added, so the same value always produces the same text. Non-ASCII
    characters are escaped, so the result is always ASCII.

    Parameters
    ----------
    value
        A Pydantic model (such as a token header) or any JSON-compatible
        value.

    Returns
    -------
    str
        The JSON encoding.

    Raises
    ------
    InvalidEncodingError
        Raised if the value cannot be represented as JSON.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    try:
        return json.dumps(value, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise InvalidEncodingError(f"Cannot serialize to JSON: {e!s}") from e


def deserialize(data: str | bytes) -> JsonValue:
    """Parse JSON text.

    Any JSON value is accepted, not only objects. Checking the shape of the
    result is the responsibility of the caller.

    Parameters
    ----------
    data
        JSON text, or its UTF-8 encoding.

    Returns
    -------
    JsonValue
        The parsed value.

    Raises
    ------
    InvalidEncodingError
        Raised if the data is not valid UTF-8 JSON.
    """
    try:
        return json.loads(data, parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as e:
        raise InvalidEncodingError(f"Invalid JSON: {e!s}") from e
