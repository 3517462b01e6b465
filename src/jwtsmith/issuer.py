"""Token issuer."""

from __future__ import annotations

from structlog.stdlib import BoundLogger

from .config import Config
from .constants import SEPARATOR
from .models.token import Algorithm, ClaimSet, TokenHeader
from .serializer import serialize
from .signature import SigningKey, compute_signature
from .util import base64url_encode

__all__ = ["TokenIssuer"]


class TokenIssuer:
    """Issuing new signed tokens.

    The issuer holds no key material. Keys are passed with each call and
    are never stored or logged, so a single issuer may be shared freely.

    Parameters
    ----------
    config
        jwtsmith configuration, which supplies the default algorithm.
    logger
        Logger to use to report status information.
    """

    def __init__(self, config: Config, logger: BoundLogger) -> None:
        self._config = config
        self._logger = logger

    def issue_token(
        self,
        claims: ClaimSet,
        key: SigningKey,
        algorithm: Algorithm | str | None = None,
    ) -> str:
        """Issue a signed token.

        Parameters
        ----------
        claims
            Claims to assert in the token. Must be serializable as JSON.
        key
            Shared secret for HMAC algorithms or RSA private key for RSA
            algorithms.
        algorithm
            Signing algorithm. Names are case-insensitive. If not given, the
            configured default algorithm is used.

        Returns
        -------
        str
            The encoded token.

        Raises
        ------
        InvalidEncodingError
            Raised if the claims cannot be serialized as JSON.
        InvalidKeyError
            Raised if the key cannot be used with this algorithm.
        SigningFailedError
            Raised if the RSA signing operation failed.
        UnsupportedAlgorithmError
            Raised if the algorithm is not recognized.
        """
        if algorithm is None:
            algorithm = self._config.default_algorithm
        else:
            algorithm = Algorithm.from_name(algorithm)
        header = TokenHeader(alg=algorithm)

        encoded_header = base64url_encode(serialize(header).encode())
        encoded_claims = base64url_encode(serialize(dict(claims)).encode())
        source = SEPARATOR.join((encoded_header, encoded_claims))
        signature = compute_signature(source.encode(), key, algorithm)
        encoded_signature = base64url_encode(signature)

        self._logger.debug("Issued token", algorithm=algorithm.value)
        segments = (encoded_header, encoded_claims, encoded_signature)
        return SEPARATOR.join(segments)
