"""Configuration for jwtsmith.

jwtsmith may be configured with a YAML file, with environment variables, or
by constructing `Config` directly. Environment variables take precedence over
settings from the configuration file. Only the settings with explicit
``validation_alias`` settings support configuration via environment variable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self, override

import yaml
from pydantic import AliasChoices, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from safir.logging import LogLevel, Profile, configure_logging

from .constants import DEFAULT_ALGORITHM
from .models.token import Algorithm

__all__ = [
    "CamelCaseSettings",
    "Config",
    "EnvFirstSettings",
]


class CamelCaseSettings(BaseSettings):
    """Base class for Pydantic settings supporting camel-case.

    This base class also forbids all extra attributes.
    """

    model_config = SettingsConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True
    )


class EnvFirstSettings(CamelCaseSettings):
    """Base class for Pydantic settings with environment overrides.

    Classes that inherit from this base class will prioritize environment
    variables over arguments to the class constructor.
    """

    @override
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Override the sources of settings.

        Deactivate :file:`.env` and secret file support. Allow environment
        variables to override init parameters, since init parameters usually
        come from the YAML configuration file and we want environment
        variables to take precedent.
        """
        return (env_settings, init_settings)


class Config(EnvFirstSettings):
    """Configuration for jwtsmith."""

    default_algorithm: Algorithm = Field(
        Algorithm(DEFAULT_ALGORITHM),
        title="Default signing algorithm",
        description=(
            "Algorithm used to sign tokens when the caller does not specify"
            " one"
        ),
        validation_alias=AliasChoices(
            "JWTSMITH_DEFAULT_ALGORITHM", "defaultAlgorithm"
        ),
    )

    allowed_algorithms: list[Algorithm] | None = Field(
        None,
        title="Allowed verification algorithms",
        description=(
            "If set, tokens whose header names any other algorithm are"
            " rejected during verification. This protects against an"
            " attacker choosing the algorithm used to check a key. When set"
            " from the environment, the value must be a JSON list."
        ),
        validation_alias=AliasChoices(
            "JWTSMITH_ALLOWED_ALGORITHMS", "allowedAlgorithms"
        ),
    )

    log_level: LogLevel = Field(
        LogLevel.INFO,
        title="Logging level",
        description="Python logging level",
        validation_alias=AliasChoices("JWTSMITH_LOG_LEVEL", "logLevel"),
    )

    log_profile: Profile = Field(
        Profile.development,
        title="Logging profile",
        description=(
            "Logging profile: ``production`` for JSON logs or"
            " ``development`` for human-readable logs"
        ),
        validation_alias=AliasChoices("JWTSMITH_LOG_PROFILE", "logProfile"),
    )

    @field_validator("default_algorithm", mode="before")
    @classmethod
    def _normalize_algorithm(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("allowed_algorithms", mode="before")
    @classmethod
    def _normalize_algorithms(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = [v]
        if isinstance(v, list):
            return [a.upper() if isinstance(a, str) else a for a in v]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Construct a Config object from a configuration file.

        Parameters
        ----------
        path
            Path to the configuration file in YAML.

        Returns
        -------
        Config
            The corresponding `Config` object.
        """
        with path.open("r") as f:
            return cls.model_validate(yaml.safe_load(f) or {})

    def configure_logging(self) -> None:
        """Configure logging based on the jwtsmith configuration."""
        configure_logging(
            name="jwtsmith",
            profile=self.log_profile,
            log_level=self.log_level,
        )
