"""Dictionary collision check.

Every distinct word is hashed with each requested variant and every pair
of words sharing an output is reported. Pairs are found by bucketing on the
output value, which gives the same set of pairs as comparing all of them.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import combinations
from pathlib import Path

import structlog

from pihash.core.types import Collision, CollisionReport, Variant
from pihash.core.utils import read_words
from pihash.hashing.registry import get_variant

logger = structlog.get_logger()

DEFAULT_VARIANTS = (Variant.HASH64, Variant.HASH128)


class CollisionError(Exception):
    """Raised when a collision check finds equal digests.

    Attributes:
        collisions: The colliding pairs
    """

    def __init__(self, message: str, *, collisions: list[Collision]):
        self.collisions = collisions
        super().__init__(message)


def _decode(word: bytes) -> str:
    return word.decode("utf-8", errors="backslashreplace")


def find_collisions(
    words: Iterable[bytes],
    variants: Sequence[Variant | str] = DEFAULT_VARIANTS,
    source: str | None = None,
) -> CollisionReport:
    """Hash words and report every colliding pair.

    Duplicate words are hashed once; identical inputs are not collisions.

    Args:
        words: Words to hash (no line terminators)
        variants: Variants to check
        source: Optional label for the word list

    Returns:
        Collision report
    """
    infos = [get_variant(v) for v in variants]
    unique = list(dict.fromkeys(words))

    collisions: list[Collision] = []
    for info in infos:
        buckets: dict[str, list[bytes]] = defaultdict(list)
        for word in unique:
            buckets[info.digest(word).hex()].append(word)

        for digest, bucket in buckets.items():
            for first, second in combinations(bucket, 2):
                collision = Collision(
                    variant=info.variant,
                    first=_decode(first),
                    second=_decode(second),
                    digest=digest,
                )
                logger.warning(
                    "collision_found",
                    variant=info.variant.value,
                    first=collision.first,
                    second=collision.second,
                    digest=digest,
                )
                collisions.append(collision)

    report = CollisionReport(
        source=source,
        words_checked=len(unique),
        variants=[info.variant for info in infos],
        collisions=collisions,
    )
    logger.info(
        "collision_check_finished",
        source=source,
        words=report.words_checked,
        collisions=len(collisions),
    )
    return report


def check_word_list(
    path: Path,
    variants: Sequence[Variant | str] = DEFAULT_VARIANTS,
) -> CollisionReport:
    """Run :func:`find_collisions` over a word list file.

    Raises:
        OSError: If the file cannot be read
    """
    return find_collisions(read_words(path), variants, source=str(path))


def assert_no_collisions(report: CollisionReport) -> None:
    """Raise :class:`CollisionError` if the report contains any collision."""
    if not report.ok:
        raise CollisionError(
            f"Collision detected: {len(report.collisions)} colliding pair(s) "
            f"among {report.words_checked} words",
            collisions=report.collisions,
        )
