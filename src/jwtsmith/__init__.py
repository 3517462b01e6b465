"""Issue and verify compact signed tokens."""

from __future__ import annotations

from .config import Config
from .exceptions import (
    InvalidEncodingError,
    InvalidKeyError,
    InvalidSignatureError,
    MalformedTokenError,
    MissingAlgorithmError,
    SigningFailedError,
    TokenError,
    UnsupportedAlgorithmError,
)
from .factory import Factory
from .issuer import TokenIssuer
from .keypair import RSAKeyPair
from .models.token import Algorithm, ClaimSet, TokenHeader
from .tokens import decode, generate, get_unverified_header
from .verify import TokenVerifier

__all__ = [
    "Algorithm",
    "ClaimSet",
    "Config",
    "Factory",
    "InvalidEncodingError",
    "InvalidKeyError",
    "InvalidSignatureError",
    "MalformedTokenError",
    "MissingAlgorithmError",
    "RSAKeyPair",
    "SigningFailedError",
    "TokenError",
    "TokenHeader",
    "TokenIssuer",
    "TokenVerifier",
    "UnsupportedAlgorithmError",
    "decode",
    "generate",
    "get_unverified_header",
]
