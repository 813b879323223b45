"""Tests for the variant registry and hexdigest()."""

from __future__ import annotations

import pytest

from pihash.core.types import HashDigest, Variant
from pihash.hashing import VARIANTS, get_variant, hash64, hash128, hexdigest


class TestVariantInfo:
    """Tests for VariantInfo records."""

    @pytest.mark.parametrize(
        ("variant", "bits", "word_bits", "words", "chunk"),
        [
            (Variant.HASH32, 32, 32, 1, 4),
            (Variant.HASH64, 64, 64, 1, 8),
            (Variant.HASH128, 128, 32, 4, 16),
            (Variant.HASH256, 256, 64, 4, 32),
        ],
    )
    def test_shapes(self, variant: Variant, bits: int, word_bits: int, words: int, chunk: int) -> None:
        info = VARIANTS[variant]
        assert info.bits == bits
        assert info.word_bits == word_bits
        assert info.words == words
        assert info.chunk_size == chunk

    def test_every_variant_registered(self) -> None:
        assert set(VARIANTS) == set(Variant)

    def test_digest_wraps_fold_output(self) -> None:
        result = VARIANTS[Variant.HASH64].digest(b"hello")
        assert isinstance(result, HashDigest)
        assert result.words == [hash64(b"hello")]

    def test_digest_wraps_spread_output(self) -> None:
        result = VARIANTS[Variant.HASH128].digest(b"hello")
        assert result.words == list(hash128(b"hello"))

    @pytest.mark.parametrize("variant", list(Variant))
    def test_hex_length(self, variant: Variant) -> None:
        info = VARIANTS[variant]
        assert len(info.digest(b"abc").hex()) == info.bits // 4


class TestGetVariant:
    """Tests for variant lookup."""

    def test_by_name(self) -> None:
        assert get_variant("hash128").variant is Variant.HASH128

    def test_by_enum(self) -> None:
        assert get_variant(Variant.HASH32).bits == 32

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown variant"):
            get_variant("hash512")


class TestHexdigest:
    """Tests for hexdigest()."""

    def test_hash32_hello(self) -> None:
        assert hexdigest("hash32", b"hello") == "aa787c32"

    def test_hash128_hello(self) -> None:
        assert hexdigest(Variant.HASH128, b"hello") == "b68761fd75c297805af9e7fb0d8fc47f"

    def test_leading_zero_words_are_padded(self) -> None:
        # Every word keeps its full width even when small
        digest = HashDigest(variant=Variant.HASH128, words=[0, 1, 0xABC, 0xFFFFFFFF], word_bits=32)
        assert digest.hex() == "0000000000000001" + "00000abc" + "ffffffff"

    def test_with_length(self) -> None:
        assert hexdigest("hash64", b"hello world", 5) == hexdigest("hash64", b"hello")
