"""Exceptions for jwtsmith."""

from __future__ import annotations

from typing import ClassVar

__all__ = [
    "InvalidEncodingError",
    "InvalidKeyError",
    "InvalidSignatureError",
    "MalformedTokenError",
    "MissingAlgorithmError",
    "SigningFailedError",
    "TokenError",
    "UnsupportedAlgorithmError",
]


class TokenError(Exception):
    """Base class for all failures to issue or verify a token.

    Every failure is terminal. Callers should treat any of these exceptions
    as a reason to reject the token; there is no notion of a partially
    trusted token.
    """

    error: ClassVar[str] = "invalid_token"
    """Machine-readable code identifying the kind of failure."""


class MalformedTokenError(TokenError):
    """The token does not consist of exactly three non-empty segments."""

    error = "malformed_token"


class InvalidEncodingError(TokenError):
    """A segment could not be decoded as base64url or as JSON.

    Parameters
    ----------
    message
        Description of the failure.
    segment
        Which segment of the token failed to decode (``header``,
        ``payload``, or ``signature``), if known.
    """

    error = "invalid_encoding"

    def __init__(self, message: str, segment: str | None = None) -> None:
        if segment:
            message = f"Invalid {segment} encoding: {message}"
        super().__init__(message)
        self.segment = segment


class MissingAlgorithmError(TokenError):
    """The token header does not name a signing algorithm."""

    error = "missing_algorithm"


class UnsupportedAlgorithmError(TokenError):
    """The signing algorithm is not recognized or not allowed."""

    error = "unsupported_algorithm"


class InvalidSignatureError(TokenError):
    """The token signature does not validate."""

    error = "invalid_signature"


class SigningFailedError(TokenError):
    """The cryptographic signing operation rejected the key or input."""

    error = "signing_failed"


class InvalidKeyError(SigningFailedError):
    """The key cannot be used with the requested algorithm.

    Raised, for example, when asymmetric key material is passed as an HMAC
    secret, which would otherwise allow an attacker who knows the RSA public
    key to forge tokens by switching the header algorithm to an HMAC one.
    """

    error = "invalid_key"
