"""Core functionality for pihash.

This module provides shared functionality used across the entire package:
- Configuration management
- Type definitions
- Utility functions
"""

from pihash.core.types import (
    AvalancheReport,
    AvalancheResult,
    Collision,
    CollisionReport,
    HashDigest,
    Variant,
)
from pihash.core.utils import hamming_distance, read_words, strip_newline

__all__ = [
    # Types
    "Variant",
    "HashDigest",
    "Collision",
    "CollisionReport",
    "AvalancheResult",
    "AvalancheReport",
    # Utils
    "hamming_distance",
    "strip_newline",
    "read_words",
]
