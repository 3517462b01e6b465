"""Models for token headers, claims, and algorithms."""

from __future__ import annotations

from .token import Algorithm, AlgorithmFamily, ClaimSet, TokenHeader

__all__ = [
    "Algorithm",
    "AlgorithmFamily",
    "ClaimSet",
    "TokenHeader",
]
