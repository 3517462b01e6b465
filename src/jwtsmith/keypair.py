"""RSA key pair handling."""

from __future__ import annotations

from typing import Self

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
    load_pem_private_key,
    load_pem_public_key,
    load_ssh_public_key,
)

from .constants import RSA_KEY_SIZE
from .exceptions import InvalidKeyError

__all__ = [
    "RSAKeyPair",
    "load_rsa_private_key",
    "load_rsa_public_key",
]


class RSAKeyPair:
    """An RSA key pair with some simple helper functions.

    Notes
    -----
    Created by calling :py:meth:`~RSAKeyPair.generate` or
    :py:meth:`~RSAKeyPair.from_pem` rather than the constructor.
    """

    @classmethod
    def from_pem(cls, pem: bytes | str) -> Self:
        """Import an RSA key pair from a PEM-encoded private key.

        Parameters
        ----------
        pem
            The PEM-encoded key (must not be password-protected).

        Returns
        -------
        RSAKeyPair
            The corresponding key pair.

        Raises
        ------
        InvalidKeyError
            Raised if the provided key is not an RSA private key.
        """
        return cls(load_rsa_private_key(pem))

    @classmethod
    def generate(cls, key_size: int = RSA_KEY_SIZE) -> Self:
        """Generate a new RSA key pair.

        Parameters
        ----------
        key_size
            Size of the modulus in bits.

        Returns
        -------
        RSAKeyPair
            Newly-generated key pair.
        """
        private_key = rsa.generate_private_key(
            public_exponent=65537, key_size=key_size
        )
        return cls(private_key)

    def __init__(self, private_key: rsa.RSAPrivateKey) -> None:
        self.private_key = private_key
        self._private_key_as_pem: bytes | None = None
        self._public_key_as_pem: bytes | None = None

    def private_key_as_pem(self) -> bytes:
        """Return the serialized private key.

        Returns
        -------
        bytes
            Private key encoded using PKCS#8 with no encryption.
        """
        if not self._private_key_as_pem:
            self._private_key_as_pem = self.private_key.private_bytes(
                Encoding.PEM, PrivateFormat.PKCS8, NoEncryption()
            )
        return self._private_key_as_pem

    def public_key(self) -> rsa.RSAPublicKey:
        """Return the public half of the key pair."""
        return self.private_key.public_key()

    def public_key_as_pem(self) -> bytes:
        """Return the PEM-encoded public key.

        Returns
        -------
        bytes
            The public key in PEM encoding and SubjectPublicKeyInfo format.
        """
        if not self._public_key_as_pem:
            self._public_key_as_pem = self.public_key().public_bytes(
                Encoding.PEM, PublicFormat.SubjectPublicKeyInfo
            )
        return self._public_key_as_pem

    def public_numbers(self) -> rsa.RSAPublicNumbers:
        """Return the public numbers for the key pair.

        Returns
        -------
        cryptography.hazmat.primitives.asymmetric.rsa.RSAPublicNumbers
            The public numbers.
        """
        return self.public_key().public_numbers()


def load_rsa_private_key(
    key: bytes | str | RSAKeyPair | rsa.RSAPrivateKey,
) -> rsa.RSAPrivateKey:
    """Load an RSA private key.

    Parameters
    ----------
    key
        PEM-encoded unencrypted private key in PKCS#1 or PKCS#8 format, or an
        already-loaded key.

    Returns
    -------
    cryptography.hazmat.primitives.asymmetric.rsa.RSAPrivateKey
        The loaded private key.

    Raises
    ------
    InvalidKeyError
        Raised if the key cannot be parsed or is not an RSA private key.
    """
    if isinstance(key, RSAKeyPair):
        return key.private_key
    if isinstance(key, rsa.RSAPrivateKey):
        return key
    if isinstance(key, str):
        key = key.encode()
    if not isinstance(key, bytes):
        msg = f"Cannot use {type(key).__name__} as an RSA private key"
        raise InvalidKeyError(msg)
    try:
        private_key = load_pem_private_key(key, password=None)
    except (TypeError, ValueError, UnsupportedAlgorithm) as e:
        raise InvalidKeyError(f"Cannot load RSA private key: {e!s}") from e
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise InvalidKeyError("Key is not an RSA private key")
    return private_key


def load_rsa_public_key(
    key: bytes | str | RSAKeyPair | rsa.RSAPrivateKey | rsa.RSAPublicKey,
) -> rsa.RSAPublicKey:
    """Load an RSA public key.

    Parameters
    ----------
    key
        PEM-encoded public key (SubjectPublicKeyInfo or PKCS#1), PEM-encoded
        X.509 certificate, OpenSSH public key, PEM-encoded private key from
        which the public key is derived, or an already-loaded key.

    Returns
    -------
    cryptography.hazmat.primitives.asymmetric.rsa.RSAPublicKey
        The loaded public key.

    Raises
    ------
    InvalidKeyError
        Raised if the key cannot be parsed or is not an RSA key.
    """
    if isinstance(key, RSAKeyPair):
        return key.public_key()
    if isinstance(key, rsa.RSAPublicKey):
        return key
    if isinstance(key, rsa.RSAPrivateKey):
        return key.public_key()
    if isinstance(key, str):
        key = key.encode()
    if not isinstance(key, bytes):
        msg = f"Cannot use {type(key).__name__} as an RSA public key"
        raise InvalidKeyError(msg)

    key = key.strip()
    try:
        if key.startswith(b"-----BEGIN CERTIFICATE-----"):
            cert = x509.load_pem_x509_certificate(key)
            public_key = cert.public_key()
        elif key.startswith(b"ssh-"):
            public_key = load_ssh_public_key(key)
        elif b"PRIVATE KEY-----" in key:
            return load_rsa_private_key(key).public_key()
        else:
            public_key = load_pem_public_key(key)
    except (TypeError, ValueError, UnsupportedAlgorithm) as e:
        raise InvalidKeyError(f"Cannot load RSA public key: {e!s}") from e
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise InvalidKeyError("Key is not an RSA public key")
    return public_key
