"""piHash - a family of fast, non-cryptographic hash functions.

This package provides 32, 64, 128 and 256-bit fixed-seed fingerprints for
hash-table keys, content fingerprints and deduplication checks. It is not
suitable where an adversary chooses the input.

Key modules:
- hashing: The hash engine and variant registry
- analysis: Avalanche and dictionary collision checks
- commands: CLI command implementations
- core: Shared functionality (config, types, utilities)
"""

__version__ = "0.1.0"
__author__ = "piHash Team"

# Re-export the hash entry points
from pihash.core.types import HashDigest, Variant
from pihash.hashing import hash32, hash64, hash128, hash256, hexdigest

__all__ = [
    "__version__",
    "__author__",
    "hash32",
    "hash64",
    "hash128",
    "hash256",
    "hexdigest",
    "HashDigest",
    "Variant",
]
