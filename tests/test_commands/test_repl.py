"""Tests for the repl command."""

from __future__ import annotations

import warnings

from click.testing import CliRunner

from pihash.__main__ import main
from pihash.hashing import hexdigest


class TestReplCommand:
    """Tests for `pihash repl`."""

    def test_hashes_each_line(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["repl"], input="hello\nworld\n")
        assert result.exit_code == 0
        assert f"hash32:  {hexdigest('hash32', b'hello')}" in result.output
        assert f"hash64:  {hexdigest('hash64', b'hello')}" in result.output
        assert f"hash128: {hexdigest('hash128', b'hello')}" in result.output
        assert f"hash128: {hexdigest('hash128', b'world')}" in result.output

    def test_trailing_newline_excluded(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["repl"], input="hello\n")
        assert "aa787c32" in result.output

    def test_crlf_line_endings(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["repl"], input="hello\r\n")
        assert "aa787c32" in result.output

    def test_prompts_until_end_of_input(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["repl"], input="a\nb\n")
        assert result.exit_code == 0
        # One prompt per line plus the final one before end of input
        assert result.output.count(">> ") == 3

    def test_empty_input(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["repl"], input="")
        assert result.exit_code == 0
        assert "hash32" not in result.output

    def test_empty_line_hashes_empty_input(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["repl"], input="\n")
        assert f"hash128: {hexdigest('hash128', b'')}" in result.output

    def test_wide_adds_hash256(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["repl", "--wide"], input="hello\n")
        assert result.exit_code == 0
        assert f"hash256: {hexdigest('hash256', b'hello')}" in result.output

    def test_custom_prompt(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["repl", "--prompt", "? "], input="x\n")
        assert result.output.startswith("? ")

    def test_stdin_read_raises_no_deprecation_warning(self) -> None:
        runner = CliRunner()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = runner.invoke(main, ["repl"], input="hello\n")
        assert result.exit_code == 0
        assert "aa787c32" in result.output
        deprecated = [
            w for w in caught
            if issubclass(w.category, DeprecationWarning) and "pihash" in w.filename
        ]
        assert deprecated == []
