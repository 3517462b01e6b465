"""Build test configuration for jwtsmith."""

from __future__ import annotations

from pathlib import Path

from jwtsmith.config import Config

__all__ = ["config_path", "configure"]


def config_path(filename: str) -> Path:
    """Return the path to a test configuration file.

    Parameters
    ----------
    filename
        The base name of a test configuration file, without ``.yaml``.

    Returns
    -------
    pathlib.Path
        The path to that file.
    """
    base_path = Path(__file__).parent.parent / "data" / "config"
    return base_path / f"{filename}.yaml"


def configure(filename: str) -> Config:
    """Load one of the test configuration files."""
    return Config.from_file(config_path(filename))
