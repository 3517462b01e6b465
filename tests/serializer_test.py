"""Tests for the jwtsmith.serializer package."""

from __future__ import annotations

import pytest

from jwtsmith.exceptions import InvalidEncodingError
from jwtsmith.models.token import Algorithm, TokenHeader
from jwtsmith.serializer import deserialize, serialize


def test_serialize() -> None:
    header = TokenHeader(alg=Algorithm.HS256)
    assert serialize(header) == '{"typ":"JWT","alg":"HS256"}'
    assert serialize({"sub": "42", "name": "Ann"}) == (
        '{"sub":"42","name":"Ann"}'
    )

    # Keys are not sorted and non-ASCII characters are escaped.
    assert serialize({"b": 1, "a": [True, None]}) == '{"b":1,"a":[true,null]}'
    assert serialize({"name": "Zoë"}) == '{"name":"Zo\\u00eb"}'
    assert serialize({"x": "\ud800"}) == '{"x":"\\ud800"}'
    assert serialize({"x": "\ud800"}).isascii()

    # Not a JSON object, but still valid JSON.
    assert serialize(42) == "42"


def test_serialize_invalid() -> None:
    with pytest.raises(InvalidEncodingError):
        serialize({"value": float("nan")})
    with pytest.raises(InvalidEncodingError):
        serialize({"value": object()})  # type: ignore[dict-item]
    with pytest.raises(InvalidEncodingError):
        serialize({"value": b"bytes"})  # type: ignore[dict-item]


def test_deserialize() -> None:
    assert deserialize('{"sub":"42","name":"Ann"}') == {
        "sub": "42",
        "name": "Ann",
    }
    assert deserialize(b'{"a":[1,null,true,1.5]}') == {
        "a": [1, None, True, 1.5]
    }
    assert deserialize('{"name":"Zoë"}'.encode()) == {"name": "Zoë"}
    assert deserialize("42") == 42
    assert deserialize("null") is None


@pytest.mark.parametrize(
    "data", ["", "{", "not json", "NaN", '{"a": Infinity}', b"\x80\x81"]
)
def test_deserialize_invalid(data: str | bytes) -> None:
    with pytest.raises(InvalidEncodingError):
        deserialize(data)
