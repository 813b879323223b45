"""piHash hashing engine."""

from __future__ import annotations

from pihash.hashing.pihash import hash32, hash64, hash128, hash256
from pihash.hashing.registry import VARIANTS, VariantInfo, get_variant, hexdigest

__all__ = [
    "hash32",
    "hash64",
    "hash128",
    "hash256",
    "VARIANTS",
    "VariantInfo",
    "get_variant",
    "hexdigest",
]
