"""Core type definitions for pihash."""

from enum import StrEnum

from pydantic import BaseModel, Field


class Variant(StrEnum):
    """piHash output widths."""
    HASH32 = "hash32"
    HASH64 = "hash64"
    HASH128 = "hash128"
    HASH256 = "hash256"


class HashDigest(BaseModel):
    """Hash output as an ordered list of words."""
    variant: Variant = Field(..., description="Variant that produced the digest")
    words: list[int] = Field(..., description="Output words, most-significant first")
    word_bits: int = Field(..., description="Width of each word in bits")

    def hex(self) -> str:
        """Render each word as fixed-width lowercase hex, concatenated."""
        digits = self.word_bits // 4
        return "".join(f"{word:0{digits}x}" for word in self.words)

    def __int__(self) -> int:
        value = 0
        for word in self.words:
            value = (value << self.word_bits) | word
        return value


class Collision(BaseModel):
    """Two distinct inputs with the same digest."""
    variant: Variant = Field(..., description="Variant that collided")
    first: str = Field(..., description="First colliding word")
    second: str = Field(..., description="Second colliding word")
    digest: str = Field(..., description="Shared digest as hex")


class CollisionReport(BaseModel):
    """Result of hashing a word list and comparing every pair."""
    source: str | None = Field(None, description="Word list path")
    words_checked: int = Field(..., description="Number of distinct words hashed")
    variants: list[Variant] = Field(..., description="Variants checked")
    collisions: list[Collision] = Field(default_factory=list, description="Colliding pairs")

    @property
    def ok(self) -> bool:
        """True when no collisions were found."""
        return not self.collisions

    def count(self, variant: Variant) -> int:
        """Number of colliding pairs for one variant."""
        return sum(1 for c in self.collisions if c.variant == variant)


class AvalancheResult(BaseModel):
    """Avalanche statistics for one mixer."""
    mixer: str = Field(..., description="Mixer name")
    bits: int = Field(..., description="Register width in bits")
    runs: int = Field(..., description="Number of trials")
    mean: float = Field(..., description="Mean fractional Hamming distance")
    good: int = Field(..., description="Trials within 0.1 of 0.5")

    @property
    def delta(self) -> float:
        """Distance of the mean from the ideal 0.5."""
        return abs(self.mean - 0.5)

    def passed(self, tolerance: float) -> bool:
        """Whether the mean lies strictly within tolerance of 0.5."""
        return self.delta < tolerance


class AvalancheReport(BaseModel):
    """Avalanche statistics for every mixer under test."""
    tolerance: float = Field(..., description="Allowed distance from 0.5")
    seed: int | None = Field(None, description="Random seed, if fixed")
    results: list[AvalancheResult] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every mixer passed."""
        return all(r.passed(self.tolerance) for r in self.results)
