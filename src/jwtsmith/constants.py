"""Constants for jwtsmith."""

__all__ = [
    "CONFIG_PATH",
    "DEFAULT_ALGORITHM",
    "HMAC_SECRET_BYTES",
    "RSA_KEY_SIZE",
    "SEGMENT_COUNT",
    "SEPARATOR",
    "TOKEN_TYPE",
]

CONFIG_PATH = "/etc/jwtsmith/jwtsmith.yaml"
"""Default configuration path."""

DEFAULT_ALGORITHM = "HS256"
"""Signing algorithm used when neither the caller nor the config picks one."""

HMAC_SECRET_BYTES = 32
"""Length in bytes of secrets created by ``jwtsmith generate-secret``."""

RSA_KEY_SIZE = 2048
"""Size in bits of newly-generated RSA keys."""

SEGMENT_COUNT = 3
"""Number of segments in a well-formed token."""

SEPARATOR = "."
"""Separator between token segments."""

TOKEN_TYPE = "JWT"
"""Value of the ``typ`` header field of every issued token."""
