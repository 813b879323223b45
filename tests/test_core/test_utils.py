"""Tests for shared utilities."""

from pathlib import Path

import pytest

from pihash.core.utils import hamming_distance, read_words, strip_newline


class TestHammingDistance:
    """Test hamming_distance function."""

    def test_equal(self):
        assert hamming_distance(0xFF, 0xFF) == 0

    def test_single_bit(self):
        assert hamming_distance(0b1000, 0) == 1

    def test_all_bits(self):
        assert hamming_distance(0, 0xFFFFFFFFFFFFFFFF) == 64


class TestStripNewline:
    """Test strip_newline function."""

    def test_lf(self):
        assert strip_newline(b"word\n") == b"word"

    def test_crlf(self):
        assert strip_newline(b"word\r\n") == b"word"

    def test_no_terminator(self):
        assert strip_newline(b"word") == b"word"

    def test_only_one_terminator_removed(self):
        assert strip_newline(b"word\n\n") == b"word\n"

    def test_bare_cr_kept(self):
        assert strip_newline(b"word\r") == b"word\r"


class TestReadWords:
    """Test read_words function."""

    def test_reads_lines(self, word_list_file: Path):
        assert list(read_words(word_list_file)) == [
            b"apple", b"banana", b"cherry", b"apple", b"date"
        ]

    def test_last_line_without_newline(self, temp_dir: Path):
        path = temp_dir / "words.txt"
        path.write_bytes(b"one\ntwo")
        assert list(read_words(path)) == [b"one", b"two"]

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(OSError):
            list(read_words(temp_dir / "missing.txt"))



class TestCoreExports:
    """Test the public surface of pihash.core."""

    def test_all(self):
        import pihash.core

        assert sorted(pihash.core.__all__) == sorted([
            "Variant",
            "HashDigest",
            "Collision",
            "CollisionReport",
            "AvalancheResult",
            "AvalancheReport",
            "hamming_distance",
            "strip_newline",
            "read_words",
        ])

    def test_every_export_resolves(self):
        import pihash.core

        for name in pihash.core.__all__:
            assert hasattr(pihash.core, name)
