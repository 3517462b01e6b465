"""Base64url encoding of token segments."""

from __future__ import annotations

import base64
import binascii
import re

from .exceptions import InvalidEncodingError

_BASE64URL_REGEX = re.compile(r"[A-Za-z0-9_-]*")
"""Characters allowed in a base64url-encoded segment after cleanup."""

__all__ = [
    "add_padding",
    "base64url_decode",
    "base64url_encode",
]


def add_padding(encoded: str) -> str:
    """Add padding to base64 encoded bytes.

    Parameters
    ----------
    encoded
        A base64-encoded string, possibly with the padding removed.

    Returns
    -------
    str
        A correctly-padded version of the encoded string.
    """
    underflow = len(encoded) % 4
    if underflow:
        return encoded + ("=" * (4 - underflow))
    else:
        return encoded


def base64url_encode(data: bytes) -> str:
    """Encode bytes using the URL-safe base64 alphabet without padding.

    Parameters
    ----------
    data
        Raw bytes to encode.

    Returns
    -------
    str
        Encoded form using ``-`` and ``_`` in place of ``+`` and ``/``, with
        all ``=`` padding removed and no line breaks.
    """
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def base64url_decode(encoded: str | bytes) -> bytes:
    """Decode URL-safe base64, with or without padding.

    Carriage returns, line feeds, and trailing padding are tolerated and
    stripped before decoding.

    Parameters
    ----------
    encoded
        The encoded data.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    InvalidEncodingError
        Raised if the input contains characters outside the URL-safe base64
        alphabet or has a length that no encoding could produce.
    """
    if isinstance(encoded, bytes):
        try:
            encoded = encoded.decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError("Non-ASCII base64url data") from e
    cleaned = encoded.replace("\r", "").replace("\n", "").rstrip("=")
    if not _BASE64URL_REGEX.fullmatch(cleaned):
        raise InvalidEncodingError("Invalid characters in base64url data")
    if len(cleaned) % 4 == 1:
        raise InvalidEncodingError("Invalid length of base64url data")
    standard = cleaned.replace("-", "+").replace("_", "/")
    try:
        return base64.b64decode(add_padding(standard), validate=True)
    except binascii.Error as e:
        raise InvalidEncodingError(f"Invalid base64url data: {e!s}") from e
