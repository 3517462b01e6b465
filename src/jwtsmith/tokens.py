"""Functions for issuing and decoding tokens.

These are thin wrappers around `~jwtsmith.issuer.TokenIssuer` and
`~jwtsmith.verify.TokenVerifier` for callers that don't want to manage those
objects. If no configuration is given, the built-in defaults are used and the
environment is not consulted.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import JsonValue

from .config import Config
from .factory import Factory
from .models.token import Algorithm, ClaimSet
from .signature import SigningKey

__all__ = ["decode", "generate", "get_unverified_header"]

_DEFAULT_CONFIG = Config.model_construct()
"""Configuration with every setting at its default, ignoring environment."""


def generate(
    claims: ClaimSet,
    key: SigningKey,
    alg: Algorithm | str | None = None,
    *,
    config: Config | None = None,
) -> str:
    """Generate a signed token.

    Parameters
    ----------
    claims
        Claims to assert in the token.
    key
        Shared secret for HMAC algorithms or RSA private key for RSA
        algorithms.
    alg
        Signing algorithm, defaulting to the configured default algorithm.
    config
        Configuration to use instead of the built-in defaults.

    Returns
    -------
    str
        The encoded token.
    """
    factory = Factory(config or _DEFAULT_CONFIG)
    issuer = factory.create_token_issuer()
    return issuer.issue_token(claims, key, alg)


def decode(
    token: str | bytes,
    key: SigningKey | None = None,
    verify: bool = True,
    *,
    algorithms: Iterable[Algorithm | str] | str | None = None,
    config: Config | None = None,
) -> JsonValue:
    """Decode a token and return its claims.

    Parameters
    ----------
    token
        The encoded token.
    key
        Shared secret for HMAC algorithms or RSA public key for RSA
        algorithms.
    verify
        Whether to verify the signature. Only disable verification for
        introspection, never for authorization decisions.
    algorithms
        If given, the token header algorithm must be one of these. A single
        name may be given as a string.
    config
        Configuration to use instead of the built-in defaults.

    Returns
    -------
    JsonValue
        The claims of the token.
    """
    factory = Factory(config or _DEFAULT_CONFIG)
    verifier = factory.create_token_verifier()
    return verifier.decode(token, key, verify=verify, algorithms=algorithms)


def get_unverified_header(
    token: str | bytes, *, config: Config | None = None
) -> JsonValue:
    """Return the header of a token without verifying it.

    Parameters
    ----------
    token
        The encoded token.
    config
        Configuration to use instead of the built-in defaults.

    Returns
    -------
    JsonValue
        The decoded header.
    """
    factory = Factory(config or _DEFAULT_CONFIG)
    verifier = factory.create_token_verifier()
    return verifier.get_unverified_header(token)
