"""Tests for the module-level token functions."""

from __future__ import annotations

import jwt
import pytest

from jwtsmith import (
    Algorithm,
    Config,
    InvalidSignatureError,
    UnsupportedAlgorithmError,
    decode,
    generate,
    get_unverified_header,
)

from .support.constants import TEST_KEYPAIR, TEST_SECRET


def test_generate_decode() -> None:
    claims = {"sub": "42", "name": "Ann"}
    token = generate(claims, "secret", "HS256")
    assert len(token.split(".")) == 3

    assert decode(token, "secret") == claims
    assert decode(token, "secret", verify=True) == claims
    with pytest.raises(InvalidSignatureError):
        decode(token, "wrong")
    assert decode(token, "wrong", verify=False) == claims


def test_default_algorithm(monkeypatch: pytest.MonkeyPatch) -> None:
    token = generate({"sub": "42"}, TEST_SECRET)
    assert get_unverified_header(token) == {"typ": "JWT", "alg": "HS256"}

    config = Config.model_validate({"defaultAlgorithm": "HS512"})
    token = generate({"sub": "42"}, TEST_SECRET, config=config)
    assert get_unverified_header(token) == {"typ": "JWT", "alg": "HS512"}

    # The environment only applies to an explicitly constructed Config.
    monkeypatch.setenv("JWTSMITH_DEFAULT_ALGORITHM", "RS256")
    token = generate({"sub": "42"}, TEST_SECRET)
    assert get_unverified_header(token) == {"typ": "JWT", "alg": "HS256"}
    token = generate({"sub": "42"}, TEST_KEYPAIR, config=Config())
    assert get_unverified_header(token) == {"typ": "JWT", "alg": "RS256"}


def test_environment_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWTSMITH_DEFAULT_ALGORITHM", "XX999")
    monkeypatch.setenv("JWTSMITH_ALLOWED_ALGORITHMS", '["RS256"]')
    claims = {"sub": "42"}

    token = generate(claims, TEST_SECRET, "HS256")
    assert decode(token, TEST_SECRET) == claims
    assert get_unverified_header(token) == {"typ": "JWT", "alg": "HS256"}
    token = generate(claims, TEST_SECRET)
    assert decode(token, TEST_SECRET) == claims


def test_non_ascii_round_trip() -> None:
    claims = {"name": "Zoë", "broken": "\ud800"}
    token = generate(claims, TEST_SECRET)
    decoded = decode(token, TEST_SECRET)
    assert decoded == claims

    # Decoded claims can be signed again.
    assert isinstance(decoded, dict)
    assert decode(generate(decoded, TEST_SECRET), TEST_SECRET) == claims


def test_algorithm_guard() -> None:
    with pytest.raises(UnsupportedAlgorithmError):
        generate({"sub": "42"}, TEST_SECRET, "XX999")

    token = generate({"sub": "42"}, TEST_SECRET, Algorithm.HS256)
    with pytest.raises(UnsupportedAlgorithmError):
        decode(token, TEST_SECRET, algorithms=["RS256"])
    with pytest.raises(UnsupportedAlgorithmError):
        decode(token, TEST_SECRET, algorithms="RS256")
    assert decode(token, TEST_SECRET, algorithms="HS256") == {"sub": "42"}

    config = Config.model_validate({"allowedAlgorithms": ["RS256"]})
    with pytest.raises(UnsupportedAlgorithmError):
        decode(token, TEST_SECRET, config=config)


@pytest.mark.parametrize("algorithm", ["HS256", "HS384", "HS512"])
def test_pyjwt_hmac(algorithm: str) -> None:
    claims = {"sub": "42", "name": "Ann", "roles": ["a", "b"]}

    token = generate(claims, TEST_SECRET, algorithm)
    assert jwt.decode(token, TEST_SECRET, algorithms=[algorithm]) == claims

    token = jwt.encode(claims, TEST_SECRET, algorithm=algorithm)
    assert decode(token, TEST_SECRET) == claims


@pytest.mark.parametrize("algorithm", ["RS256", "RS384", "RS512"])
def test_pyjwt_rsa(algorithm: str) -> None:
    claims = {"sub": "42", "name": "Ann"}
    private_pem = TEST_KEYPAIR.private_key_as_pem()
    public_pem = TEST_KEYPAIR.public_key_as_pem()

    token = generate(claims, private_pem, algorithm)
    assert jwt.decode(token, public_pem, algorithms=[algorithm]) == claims

    token = jwt.encode(claims, private_pem, algorithm=algorithm)
    assert decode(token, public_pem) == claims
