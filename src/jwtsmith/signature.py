"""Computing and verifying token signatures."""

from __future__ import annotations

import hmac

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .exceptions import InvalidKeyError, SigningFailedError
from .keypair import RSAKeyPair, load_rsa_private_key, load_rsa_public_key
from .models.token import Algorithm, AlgorithmFamily

__all__ = [
    "SigningKey",
    "compute_signature",
    "verify_signature",
]

type SigningKey = (
    bytes | str | RSAKeyPair | rsa.RSAPrivateKey | rsa.RSAPublicKey
)
"""Key material accepted for signing or verification.

HMAC algorithms use a `bytes` or `str` shared secret. RSA algorithms accept
PEM-encoded key material or loaded keys.
"""

_ASYMMETRIC_KEY_PREFIXES = (
    b"-----BEGIN ",
    b"ssh-rsa",
    b"ssh-ed25519",
    b"ssh-dss",
    b"ecdsa-sha2-",
)
"""Prefixes of asymmetric key material that must not be an HMAC secret."""


def compute_signature(
    source: bytes, key: SigningKey, algorithm: Algorithm | str
) -> bytes:
    """Compute the signature of some data.

    Parameters
    ----------
    source
        Exact bytes to sign. For a token, this is the ASCII encoding of the
        header and payload segments joined by a period.
    key
        Shared secret for HMAC algorithms or private key for RSA algorithms.
    algorithm
        Signing algorithm.

    Returns
    -------
    bytes
        The raw signature.

    Raises
    ------
    InvalidKeyError
        Raised if the key cannot be used with this algorithm.
    SigningFailedError
        Raised if the RSA signing operation failed.
    UnsupportedAlgorithmError
        Raised if the algorithm is not recognized.
    """
    algorithm = Algorithm.from_name(algorithm)
    match algorithm.family:
        case AlgorithmFamily.hmac:
            return _hmac_digest(source, key, algorithm)
        case AlgorithmFamily.rsa:
            private_key = load_rsa_private_key(key)  # type: ignore[arg-type]
            try:
                return private_key.sign(
                    source, padding.PKCS1v15(), algorithm.hash_algorithm
                )
            except ValueError as e:
                msg = f"Cannot generate RSA signature: {e!s}"
                raise SigningFailedError(msg) from e


def verify_signature(
    source: bytes,
    key: SigningKey,
    algorithm: Algorithm | str,
    signature: bytes,
) -> bool:
    """Check whether a signature is valid for some data.

    Parameters
    ----------
    source
        Exact bytes that were signed.
    key
        Shared secret for HMAC algorithms or public key for RSA algorithms.
    algorithm
        Signing algorithm.
    signature
        Candidate signature.

    Returns
    -------
    bool
        Whether the signature is valid.

    Raises
    ------
    InvalidKeyError
        Raised if the key cannot be used with this algorithm.
    UnsupportedAlgorithmError
        Raised if the algorithm is not recognized. No verification is
        attempted in this case.
    """
    algorithm = Algorithm.from_name(algorithm)
    match algorithm.family:
        case AlgorithmFamily.hmac:
            expected = _hmac_digest(source, key, algorithm)
            return hmac.compare_digest(expected, signature)
        case AlgorithmFamily.rsa:
            public_key = load_rsa_public_key(key)
            try:
                public_key.verify(
                    signature,
                    source,
                    padding.PKCS1v15(),
                    algorithm.hash_algorithm,
                )
            except InvalidSignature:
                return False
            return True


def _hmac_digest(
    source: bytes, key: SigningKey, algorithm: Algorithm
) -> bytes:
    """Compute an HMAC digest, refusing asymmetric key material."""
    if isinstance(key, str):
        key = key.encode()
    if not isinstance(key, bytes):
        msg = f"Cannot use {type(key).__name__} as an HMAC secret"
        raise InvalidKeyError(msg)
    if key.lstrip().startswith(_ASYMMETRIC_KEY_PREFIXES):
        msg = (
            "The specified key is asymmetric key material and must not be"
            " used as an HMAC secret"
        )
        raise InvalidKeyError(msg)
    return hmac.new(key, source, algorithm.hash_algorithm.name).digest()
