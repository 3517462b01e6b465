"""Models for token headers and signing algorithms."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Literal, Self

from cryptography.hazmat.primitives import hashes
from pydantic import BaseModel, ConfigDict, Field, JsonValue

from ..constants import TOKEN_TYPE
from ..exceptions import UnsupportedAlgorithmError

__all__ = [
    "Algorithm",
    "AlgorithmFamily",
    "ClaimSet",
    "TokenHeader",
]

type ClaimSet = Mapping[str, JsonValue]
"""Claims to assert in a token, mapping claim names to any JSON value."""


class AlgorithmFamily(StrEnum):
    """Family of a signing algorithm."""

    hmac = "hmac"
    """Symmetric HMAC signature with a shared secret."""

    rsa = "rsa"
    """Asymmetric RSA signature with PKCS#1 v1.5 padding."""


class Algorithm(StrEnum):
    """A recognized token signing algorithm."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"

    @classmethod
    def from_name(cls, name: object) -> Self:
        """Look up an algorithm by name.

        Parameters
        ----------
        name
            Name of the algorithm. Strings are upper-cased first, so ``hs256``
            is accepted for `HS256`.

        Returns
        -------
        Algorithm
            The corresponding algorithm.

        Raises
        ------
        UnsupportedAlgorithmError
            Raised if the name is not a string or not a recognized algorithm.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            msg = f"Algorithm must be a string, not {type(name).__name__}"
            raise UnsupportedAlgorithmError(msg)
        try:
            return cls(name.upper())
        except ValueError:
            msg = f"Unsupported or invalid signing algorithm {name}"
            raise UnsupportedAlgorithmError(msg) from None

    @property
    def family(self) -> AlgorithmFamily:
        """Family of this algorithm."""
        if self.value.startswith("HS"):
            return AlgorithmFamily.hmac
        else:
            return AlgorithmFamily.rsa

    @property
    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Hash algorithm used by this signing algorithm."""
        match self.value[2:]:
            case "256":
                return hashes.SHA256()
            case "384":
                return hashes.SHA384()
            case "512":
                return hashes.SHA512()
            case _:
                raise AssertionError(f"No hash for {self.value}")


class TokenHeader(BaseModel):
    """Header of a token.

    Field order matters, since it determines the serialized form of the
    header and therefore the signature input.
    """

    model_config = ConfigDict(frozen=True)

    typ: Literal["JWT"] = Field(
        TOKEN_TYPE, title="Token type", description="Always ``JWT``"
    )

    alg: Algorithm = Field(
        ...,
        title="Signing algorithm",
        description="Algorithm used to sign the token",
    )
