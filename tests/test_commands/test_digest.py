"""Tests for the digest command."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from pihash.__main__ import main
from pihash.commands.digest import digest, digest_file
from pihash.core.types import Variant

HELLO_128 = "b68761fd75c297805af9e7fb0d8fc47f"


class TestDigestFile:
    """Tests for digest_file()."""

    def test_hello(self, sample_file: Path) -> None:
        size, result = digest_file(sample_file)
        assert size == 5
        assert result is not None
        assert result.hex() == HELLO_128

    def test_variant(self, sample_file: Path) -> None:
        _, result = digest_file(sample_file, Variant.HASH32)
        assert result is not None
        assert result.hex() == "aa787c32"

    def test_empty_file(self, temp_dir: Path) -> None:
        path = temp_dir / "empty"
        path.write_bytes(b"")
        assert digest_file(path) == (0, None)

    def test_missing_file(self, temp_dir: Path) -> None:
        with pytest.raises(OSError):
            digest_file(temp_dir / "missing")

    def test_large_file_matches_in_memory_hash(self, temp_dir: Path) -> None:
        from pihash.hashing import hash128

        data = bytes(range(256)) * 64
        path = temp_dir / "large.bin"
        path.write_bytes(data)
        _, result = digest_file(path)
        assert result is not None
        assert result.words == list(hash128(data))


class TestDigestCommand:
    """Tests for `pihash digest`."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        """Create CLI test runner."""
        return CliRunner()

    def test_prints_128_bit_hex(self, runner: CliRunner, sample_file: Path) -> None:
        result = runner.invoke(main, ["digest", str(sample_file)])
        assert result.exit_code == 0
        assert result.stdout == f"{HELLO_128}\n"
        assert len(result.stdout.strip()) == 32

    def test_variant_option(self, runner: CliRunner, sample_file: Path) -> None:
        result = runner.invoke(main, ["digest", "--variant", "hash64", str(sample_file)])
        assert result.exit_code == 0
        assert result.stdout.strip() == "712949898262696b"

    def test_empty_file_prints_nothing(self, runner: CliRunner, temp_dir: Path) -> None:
        path = temp_dir / "empty"
        path.write_bytes(b"")
        result = runner.invoke(main, ["digest", str(path)])
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_missing_file_fails(self, runner: CliRunner, temp_dir: Path) -> None:
        result = runner.invoke(main, ["digest", str(temp_dir / "missing")])
        assert result.exit_code != 0
        assert "Cannot hash file" in result.output

    def test_map_failure(self, runner: CliRunner, sample_file: Path) -> None:
        with patch("pihash.commands.digest.mmap.mmap", side_effect=OSError("no map")):
            result = runner.invoke(main, ["digest", str(sample_file)])
        assert result.exit_code == 1
        assert "no map" in result.output

    def test_json_output(self, runner: CliRunner, sample_file: Path) -> None:
        result = runner.invoke(main, ["--output", "json", "digest", str(sample_file)])
        assert result.exit_code == 0
        info = json.loads(result.stdout)
        assert info["digest"] == HELLO_128
        assert info["variant"] == "hash128"
        assert info["size"] == 5

    def test_standalone_command(self, runner: CliRunner, sample_file: Path) -> None:
        """Command works outside the main group with default config."""
        result = runner.invoke(digest, [str(sample_file)])
        assert result.exit_code == 0
        assert result.stdout.strip() == HELLO_128
