"""Quality checks for the piHash family: avalanche and dictionary collisions."""

from pihash.analysis.avalanche import (
    AvalancheError,
    assert_avalanche,
    measure_mixer,
    run_avalanche,
)
from pihash.analysis.collisions import (
    CollisionError,
    assert_no_collisions,
    check_word_list,
    find_collisions,
)

__all__ = [
    "AvalancheError",
    "assert_avalanche",
    "measure_mixer",
    "run_avalanche",
    "CollisionError",
    "assert_no_collisions",
    "check_word_list",
    "find_collisions",
]
