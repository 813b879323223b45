"""Pytest configuration and shared fixtures for pihash tests."""

import itertools
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from pihash.core.config import AppConfig

SYLLABLES = [
    "ka", "lo", "mi", "ne", "ru", "sa", "ti", "vo", "ze", "po", "an", "el", "is",
    "or", "un", "ba", "de", "fi", "go", "hu", "ja", "ke", "li", "mo", "nu",
]


def make_words() -> list[bytes]:
    """Build 16,275 distinct words of one to three syllables."""
    words: list[bytes] = []
    for count in (1, 2, 3):
        for parts in itertools.product(SYLLABLES, repeat=count):
            words.append("".join(parts).encode())
    return words


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture(scope="session")
def dictionary_words() -> list[bytes]:
    """Large list of distinct short words."""
    return make_words()


@pytest.fixture
def word_list_file(temp_dir: Path) -> Path:
    """Small newline-terminated word list on disk."""
    path = temp_dir / "words.txt"
    path.write_bytes(b"apple\nbanana\ncherry\napple\n\ndate\r\n")
    return path


@pytest.fixture
def sample_file(temp_dir: Path) -> Path:
    """File holding the 5-byte input ``hello``."""
    path = temp_dir / "hello.bin"
    path.write_bytes(b"hello")
    return path


@pytest.fixture
def default_config() -> AppConfig:
    """Default application configuration."""
    return AppConfig()


# Pytest configuration
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
