"""Command-line interface for issuing and inspecting tokens."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click
from safir.click import display_help

from .config import Config
from .constants import CONFIG_PATH, HMAC_SECRET_BYTES
from .exceptions import TokenError
from .factory import Factory
from .keypair import RSAKeyPair
from .serializer import deserialize
from .util import base64url_encode

__all__ = [
    "decode",
    "encode",
    "generate_key",
    "generate_secret",
    "header",
    "help",
    "main",
]

_config_path_option = click.option(
    "--config-path",
    envvar="JWTSMITH_CONFIG_PATH",
    type=click.Path(path_type=Path),
    default=None,
    help="Application configuration file.",
)


def _load_config(config_path: Path | None) -> Config:
    """Load the configuration and set up logging.

    If no path is given, the default configuration path is used if it
    exists, and otherwise the configuration comes only from the environment.
    """
    if not config_path and Path(CONFIG_PATH).exists():
        config_path = Path(CONFIG_PATH)
    config = Config.from_file(config_path) if config_path else Config()
    config.configure_logging()
    return config


def _read_key(key_file: Path) -> bytes:
    """Read key material, dropping surrounding whitespace."""
    return key_file.read_bytes().strip()


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s")
def main() -> None:
    """Command-line interface for jwtsmith."""


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None) -> None:
    """Show help for any command."""
    display_help(main, ctx, topic)


@main.command()
def generate_key() -> None:
    """Generate a new RSA key pair.

    The output will be the private key of the newly-generated key pair, from
    which the public key can be recovered.
    """
    keypair = RSAKeyPair.generate()
    sys.stdout.write(keypair.private_key_as_pem().decode())


@main.command()
def generate_secret() -> None:
    """Generate a new random shared secret for HMAC algorithms."""
    secret = base64url_encode(os.urandom(HMAC_SECRET_BYTES))
    sys.stdout.write(secret + "\n")


@main.command()
@click.argument("claims", default=None, required=False)
@click.option(
    "--key-file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File containing the shared secret or RSA private key.",
)
@click.option(
    "--algorithm",
    "-a",
    default=None,
    help="Signing algorithm (default from configuration).",
)
@_config_path_option
def encode(
    *,
    claims: str | None,
    key_file: Path,
    algorithm: str | None,
    config_path: Path | None,
) -> None:
    """Issue a signed token.

    CLAIMS is a JSON object. If it is not given, it is read from standard
    input.
    """
    config = _load_config(config_path)
    if claims is None:
        claims = sys.stdin.read()
    try:
        parsed = deserialize(claims)
    except TokenError as e:
        raise click.UsageError(f"Claims are not valid JSON: {e!s}") from e
    if not isinstance(parsed, dict):
        raise click.UsageError("Claims must be a JSON object")

    issuer = Factory(config).create_token_issuer()
    try:
        token = issuer.issue_token(parsed, _read_key(key_file), algorithm)
    except TokenError as e:
        raise click.ClickException(str(e)) from e
    sys.stdout.write(token + "\n")


@main.command()
@click.argument("token")
@click.option(
    "--key-file",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File containing the shared secret or RSA public key.",
)
@click.option(
    "--verify/--no-verify",
    default=True,
    help="Whether to verify the signature (default true).",
)
@click.option(
    "--algorithm",
    "-a",
    "algorithms",
    multiple=True,
    help="Allowed algorithm (may be repeated).",
)
@_config_path_option
def decode(
    *,
    token: str,
    key_file: Path | None,
    verify: bool,
    algorithms: tuple[str, ...],
    config_path: Path | None,
) -> None:
    """Decode a token and print its claims.

    With --no-verify, the claims are printed without checking the signature
    and no key is needed.
    """
    config = _load_config(config_path)
    if verify and not key_file:
        raise click.UsageError("--key-file is required to verify a token")
    key = _read_key(key_file) if key_file else None

    verifier = Factory(config).create_token_verifier()
    try:
        claims = verifier.decode(
            token, key, verify=verify, algorithms=algorithms or None
        )
    except TokenError as e:
        raise click.ClickException(str(e)) from e
    sys.stdout.write(json.dumps(claims, indent=2) + "\n")


@main.command()
@click.argument("token")
@_config_path_option
def header(*, token: str, config_path: Path | None) -> None:
    """Print the header of a token without verifying it."""
    config = _load_config(config_path)
    verifier = Factory(config).create_token_verifier()
    try:
        token_header = verifier.get_unverified_header(token)
    except TokenError as e:
        raise click.ClickException(str(e)) from e
    sys.stdout.write(json.dumps(token_header, indent=2) + "\n")
