"""Create jwtsmith components."""

from __future__ import annotations

import structlog
from structlog.stdlib import BoundLogger

from .config import Config
from .issuer import TokenIssuer
from .verify import TokenVerifier

__all__ = ["Factory"]


class Factory:
    """Build jwtsmith components.

    Uses the configuration to construct the issuer and verifier, sharing one
    logger between them.

    Parameters
    ----------
    config
        jwtsmith configuration.
    logger
        Logger to use for all components. If not given, the ``jwtsmith``
        logger is used.
    """

    def __init__(
        self, config: Config, logger: BoundLogger | None = None
    ) -> None:
        self._config = config
        self._logger = logger or structlog.get_logger("jwtsmith")

    @property
    def config(self) -> Config:
        """Configuration used by this factory."""
        return self._config

    def create_token_issuer(self) -> TokenIssuer:
        """Create a new token issuer.

        Returns
        -------
        TokenIssuer
            Newly-created token issuer.
        """
        return TokenIssuer(self._config, self._logger)

    def create_token_verifier(self) -> TokenVerifier:
        """Create a new token verifier.

        Returns
        -------
        TokenVerifier
            Newly-created token verifier.
        """
        return TokenVerifier(self._config, self._logger)
