"""Shared utilities for pihash."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path


def hamming_distance(a: int, b: int) -> int:
    """Count the bit positions in which two integers differ.

    Example:
        >>> hamming_distance(0b1011, 0b0001)
        2
    """
    return (a ^ b).bit_count()


def strip_newline(line: bytes) -> bytes:
    """Remove a single trailing line terminator (``\\n`` or ``\\r\\n``).

    Example:
        >>> strip_newline(b"word\\r\\n")
        b'word'
        >>> strip_newline(b"word")
        b'word'
    """
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


def read_words(path: Path) -> Iterator[bytes]:
    """Yield each non-empty line of a word list without its line terminator.

    Args:
        path: Word list file, one word per line

    Yields:
        Raw word bytes

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(path, "rb") as f:
        for line in f:
            word = strip_newline(line)
            if word:
                yield word

