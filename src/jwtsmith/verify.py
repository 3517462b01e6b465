"""Verify a token."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import JsonValue
from structlog.stdlib import BoundLogger

from .config import Config
from .constants import SEGMENT_COUNT, SEPARATOR
from .exceptions import (
    InvalidEncodingError,
    InvalidSignatureError,
    MalformedTokenError,
    MissingAlgorithmError,
    SigningFailedError,
    TokenError,
    UnsupportedAlgorithmError,
)
from .models.token import Algorithm
from .serializer import deserialize
from .signature import SigningKey, verify_signature
from .util import base64url_decode

__all__ = ["TokenVerifier"]


class TokenVerifier:
    """Verifies the validity of a token and returns its claims.

    Decoding is a single pass through a fixed sequence of checks, each of
    which may reject the token: split into segments, decode the header,
    decode the payload, check the header algorithm, decode the signature,
    and verify the signature. The algorithm used for verification is always
    the one named in the header of the token being verified.

    Parameters
    ----------
    config
        jwtsmith configuration, which may restrict the allowed algorithms.
    logger
        Logger to use to report status information.
    """

    def __init__(self, config: Config, logger: BoundLogger) -> None:
        self._config = config
        self._logger = logger

    def decode(
        self,
        token: str | bytes,
        key: SigningKey | None = None,
        *,
        verify: bool = True,
        algorithms: Iterable[Algorithm | str] | str | None = None,
    ) -> JsonValue:
        """Decode a token, verifying its signature by default.

        Parameters
        ----------
        token
            The encoded token.
        key
            Shared secret for HMAC algorithms or RSA public key for RSA
            algorithms. May be omitted only if ``verify`` is false.
        verify
            Whether to verify the signature. If false, the payload is
            returned without any check of its origin. This is intended only
            for introspection and must never be used for authorization
            decisions.
        algorithms
            If given, the algorithm named in the token header must be one of
            these. A single name may be passed as a string. Overrides the
            ``allowed_algorithms`` configuration setting.

        Returns
        -------
        JsonValue
            The claims of the token, normally a `dict`.

        Raises
        ------
        InvalidEncodingError
            Raised if the header or payload cannot be decoded.
        InvalidSignatureError
            Raised if the signature does not validate.
        MalformedTokenError
            Raised if the token does not have three non-empty segments.
        MissingAlgorithmError
            Raised if the header does not name an algorithm.
        UnsupportedAlgorithmError
            Raised if the header algorithm is not recognized or not allowed.
        """
        try:
            claims = self._decode(token, key, verify, algorithms)
        except TokenError as e:
            self._logger.debug(
                "Token rejected", error=e.error, verify=verify, reason=str(e)
            )
            raise
        if not verify:
            self._logger.debug("Decoded token without verification")
        return claims

    def get_unverified_header(self, token: str | bytes) -> JsonValue:
        """Decode the header of a token without verifying anything else.

        Parameters
        ----------
        token
            The encoded token.

        Returns
        -------
        JsonValue
            The decoded header, normally a `dict`.

        Raises
        ------
        InvalidEncodingError
            Raised if the header cannot be decoded.
        MalformedTokenError
            Raised if the token does not have three non-empty segments.
        """
        encoded_header, _, _ = self._split(token)
        return self._decode_segment(encoded_header, "header")

    def _decode(
        self,
        token: str | bytes,
        key: SigningKey | None,
        verify: bool,
        algorithms: Iterable[Algorithm | str] | str | None,
    ) -> JsonValue:
        encoded_header, encoded_payload, encoded_signature = self._split(token)
        header = self._decode_segment(encoded_header, "header")
        payload = self._decode_segment(encoded_payload, "payload")
        if not verify:
            return payload

        algorithm = self._get_algorithm(header, algorithms)
        try:
            signature = base64url_decode(encoded_signature)
        except InvalidEncodingError as e:
            msg = "Invalid signature encoding"
            raise InvalidSignatureError(msg) from e
        if key is None:
            raise InvalidSignatureError("No key provided for verification")
        source = SEPARATOR.join((encoded_header, encoded_payload)).encode()
        try:
            valid = verify_signature(source, key, algorithm, signature)
        except SigningFailedError as e:
            msg = f"Signature validation failed: {e!s}"
            raise InvalidSignatureError(msg) from e
        if not valid:
            raise InvalidSignatureError("Signature validation failed")
        return payload

    def _get_algorithm(
        self,
        header: JsonValue,
        algorithms: Iterable[Algorithm | str] | str | None,
    ) -> Algorithm:
        """Determine the verification algorithm from the token header."""
        if not isinstance(header, dict) or not header.get("alg"):
            raise MissingAlgorithmError("Token header has no algorithm")
        try:
            algorithm = Algorithm(header["alg"])
        except (TypeError, ValueError):
            msg = f"Unsupported or invalid signing algorithm {header['alg']}"
            raise UnsupportedAlgorithmError(msg) from None

        if isinstance(algorithms, str):
            algorithms = [algorithms]
        if algorithms is not None:
            allowed = {Algorithm.from_name(a) for a in algorithms}
        elif self._config.allowed_algorithms is not None:
            allowed = set(self._config.allowed_algorithms)
        else:
            return algorithm
        if algorithm not in allowed:
            msg = f"Algorithm {algorithm.value} not allowed"
            raise UnsupportedAlgorithmError(msg)
        return algorithm

    @staticmethod
    def _decode_segment(encoded: str, segment: str) -> JsonValue:
        """Decode a header or payload segment."""
        try:
            return deserialize(base64url_decode(encoded))
        except InvalidEncodingError as e:
            raise InvalidEncodingError(str(e), segment) from e

    @staticmethod
    def _split(token: str | bytes) -> tuple[str, str, str]:
        """Split a token into its three segments."""
        if isinstance(token, bytes):
            try:
                token = token.decode("ascii")
            except UnicodeDecodeError as e:
                raise MalformedTokenError("Token is not ASCII") from e
        if not isinstance(token, str):
            msg = f"Token must be a string, not {type(token).__name__}"
            raise MalformedTokenError(msg)
        segments = token.split(SEPARATOR)
        if len(segments) != SEGMENT_COUNT:
            raise MalformedTokenError("Wrong number of segments")
        if not all(segments):
            raise MalformedTokenError("Token has an empty segment")
        encoded_header, encoded_payload, encoded_signature = segments
        return encoded_header, encoded_payload, encoded_signature
