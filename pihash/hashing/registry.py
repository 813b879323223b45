"""Lookup table of piHash variants by name."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from pihash.core.types import HashDigest, Variant
from pihash.hashing.pihash import (
    CHUNK32,
    CHUNK64,
    CHUNK128,
    CHUNK256,
    hash32,
    hash64,
    hash128,
    hash256,
)


@dataclass(frozen=True)
class VariantInfo:
    """Shape of one hash variant."""

    variant: Variant
    bits: int  # total output width
    word_bits: int  # width of each output word
    chunk_size: int
    function: Callable[..., int | tuple[int, ...]]

    @property
    def words(self) -> int:
        """Number of output words."""
        return self.bits // self.word_bits

    def digest(self, data: bytes | bytearray | memoryview, length: int | None = None) -> HashDigest:
        """Hash data and wrap the result as a :class:`HashDigest`."""
        result = self.function(data, length)
        words = [result] if isinstance(result, int) else list(result)
        return HashDigest(variant=self.variant, words=words, word_bits=self.word_bits)


VARIANTS: dict[Variant, VariantInfo] = {
    Variant.HASH32: VariantInfo(Variant.HASH32, 32, 32, CHUNK32, hash32),
    Variant.HASH64: VariantInfo(Variant.HASH64, 64, 64, CHUNK64, hash64),
    Variant.HASH128: VariantInfo(Variant.HASH128, 128, 32, CHUNK128, hash128),
    Variant.HASH256: VariantInfo(Variant.HASH256, 256, 64, CHUNK256, hash256),
}


def get_variant(name: str | Variant) -> VariantInfo:
    """Resolve a variant by name.

    Args:
        name: Variant name such as ``"hash128"``

    Returns:
        Variant description

    Raises:
        ValueError: If the name is not a known variant
    """
    try:
        return VARIANTS[Variant(name)]
    except ValueError:
        valid = ", ".join(v.value for v in Variant)
        raise ValueError(f"Unknown variant: {name}. Valid variants: {valid}") from None


def hexdigest(
    variant: str | Variant,
    data: bytes | bytearray | memoryview,
    length: int | None = None,
) -> str:
    """Hash data and render the result as fixed-width lowercase hex.

    Example:
        >>> hexdigest("hash32", b"hello")
        'aa787c32'
    """
    return get_variant(variant).digest(data, length).hex()
