"""Test fixtures."""

from __future__ import annotations

import os

import pytest

from jwtsmith.config import Config
from jwtsmith.factory import Factory
from jwtsmith.issuer import TokenIssuer
from jwtsmith.verify import TokenVerifier


@pytest.fixture(autouse=True)
def environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any jwtsmith settings from the environment."""
    for variable in list(os.environ):
        if variable.startswith("JWTSMITH_"):
            monkeypatch.delenv(variable)


@pytest.fixture
def config() -> Config:
    """Return the default configuration."""
    return Config()


@pytest.fixture
def factory(config: Config) -> Factory:
    """Return a component factory using the default configuration."""
    return Factory(config)


@pytest.fixture
def issuer(factory: Factory) -> TokenIssuer:
    return factory.create_token_issuer()


@pytest.fixture
def verifier(factory: Factory) -> TokenVerifier:
    return factory.create_token_verifier()
