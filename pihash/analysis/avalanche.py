"""Statistical avalanche check for the register mixers.

For each trial a random register value ``r`` is drawn and the fraction of
output bits that differ between ``mix(r)`` and ``mix(r + 1)`` is recorded.
A good mixer averages close to 0.5.
"""

from __future__ import annotations

import random
from collections.abc import Callable

import structlog

from pihash.core.types import AvalancheReport, AvalancheResult
from pihash.core.utils import hamming_distance
from pihash.hashing.mix import mix32, mix64

logger = structlog.get_logger()

DEFAULT_RUNS = 10_000
DEFAULT_TOLERANCE = 0.075

# Per-trial window used for the "good scores" count
GOOD_WINDOW = 0.1

MIXERS: dict[str, tuple[Callable[[int], int], int]] = {
    "mix32": (mix32, 32),
    "mix64": (mix64, 64),
}


class AvalancheError(Exception):
    """Raised when a mixer's mean Hamming score falls outside tolerance.

    Attributes:
        mixer: Name of the failing mixer
        mean: Observed mean score
        tolerance: Allowed distance from 0.5
    """

    def __init__(self, message: str, *, mixer: str, mean: float, tolerance: float):
        self.mixer = mixer
        self.mean = mean
        self.tolerance = tolerance
        super().__init__(message)


def hamming_score(a: int, b: int, bits: int) -> float:
    """Fraction of the ``bits`` low bit positions in which a and b differ."""
    mask = (1 << bits) - 1
    return hamming_distance(a & mask, b & mask) / bits


def measure_mixer(
    mixer: Callable[[int], int],
    bits: int,
    runs: int = DEFAULT_RUNS,
    rng: random.Random | None = None,
    name: str | None = None,
) -> AvalancheResult:
    """Measure the avalanche behaviour of one mixer.

    Args:
        mixer: Function mapping a ``bits``-wide register to another
        bits: Register width
        runs: Number of trials
        rng: Random source, a fresh unseeded one if None
        name: Label for the result, defaults to the function name

    Returns:
        Mean score and count of individually good trials

    Raises:
        ValueError: If runs is not positive
    """
    if runs <= 0:
        raise ValueError("runs must be positive")

    rng = rng or random.Random()
    mask = (1 << bits) - 1
    total = 0.0
    good = 0

    for _ in range(runs):
        r = rng.getrandbits(bits)
        score = hamming_score(mixer(r), mixer((r + 1) & mask), bits)
        total += score
        if abs(score - 0.5) < GOOD_WINDOW:
            good += 1

    result = AvalancheResult(
        mixer=name or mixer.__name__,
        bits=bits,
        runs=runs,
        mean=total / runs,
        good=good,
    )
    logger.debug("avalanche_measured", mixer=result.mixer, mean=result.mean, good=good)
    return result


def run_avalanche(
    runs: int = DEFAULT_RUNS,
    tolerance: float = DEFAULT_TOLERANCE,
    seed: int | None = None,
) -> AvalancheReport:
    """Measure every registered mixer.

    Args:
        runs: Trials per mixer
        tolerance: Allowed distance of each mean from 0.5
        seed: Seed for a reproducible run, random if None

    Returns:
        Report with one result per mixer
    """
    rng = random.Random(seed)
    results = [
        measure_mixer(mixer, bits, runs, rng, name=name)
        for name, (mixer, bits) in MIXERS.items()
    ]
    report = AvalancheReport(tolerance=tolerance, seed=seed, results=results)
    logger.info("avalanche_finished", runs=runs, ok=report.ok)
    return report


def assert_avalanche(report: AvalancheReport) -> None:
    """Raise :class:`AvalancheError` for the first mixer outside tolerance."""
    for result in report.results:
        if not result.passed(report.tolerance):
            raise AvalancheError(
                f"Hamming test for {result.mixer} failed: mean {result.mean:.4f} "
                f"(±{result.delta:.4f}), tolerance {report.tolerance}",
                mixer=result.mixer,
                mean=result.mean,
                tolerance=report.tolerance,
            )
