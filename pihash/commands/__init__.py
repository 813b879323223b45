"""CLI command implementations for pihash.

This module contains all command-line interface implementations:
- digest: Hash a file through a memory map
- repl: Hash lines read from standard input
- collisions: Check a word list for equal digests
- avalanche: Statistical avalanche test of the mixers
"""

from pihash.commands.avalanche import avalanche
from pihash.commands.collisions import collisions
from pihash.commands.digest import digest
from pihash.commands.repl import repl

__all__ = ["avalanche", "collisions", "digest", "repl"]
