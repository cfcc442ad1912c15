"""Tests for the CLI in main.py."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from main import app

runner = CliRunner()


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["reverse", "Apple"], "elppA\n"),
        (["prefix", "www.example.com", "https://"], "https://www.example.com\n"),
        (["words", "The sun in Berlin"], "4\n"),
        (["replace", "a would b would", "would", "should"], "a should b should\n"),
        (["chars", "abc"], "a\nb\nc\n"),
        (["capitalize", "apple"], "Apple\n"),
        (["decapitalize", "Apple"], "apple\n"),
        (["mask", "1234567890"], "*****67890\n"),
        (["mask", "1234567890", "--begin", "3", "--end", "8"], "123*****90\n"),
        (["mask", "1234567890", "--end", "4", "--char", "#"], "####567890\n"),
        (["chunk", "1234567890", "--size", "2"], "12\n34\n56\n78\n90\n"),
        (["insert", "1234567890", "-", "5"], "12345-67890\n"),
        (["insert", "1234567890", "-", "3", "--repeat"], "123-456-789-0\n"),
    ],
)
def test_commands_print_result(args: list[str], expected: str) -> None:
    result = runner.invoke(app, args)
    assert result.exit_code == 0
    assert result.output == expected


def test_result_is_not_treated_as_markup() -> None:
    result = runner.invoke(app, ["reverse", "]b/[x]b["])
    assert result.exit_code == 0
    assert result.output == "[b]x[/b]\n"


def test_email_exit_codes() -> None:
    assert runner.invoke(app, ["email", "me@me.com"]).exit_code == 0
    result = runner.invoke(app, ["email", "not-an-email"])
    assert result.exit_code == 1
    assert "invalid" in result.output


def test_palindrome_exit_codes() -> None:
    assert runner.invoke(app, ["palindrome", "lol"]).exit_code == 0
    assert runner.invoke(app, ["palindrome", "Berlin"]).exit_code == 1


def test_mask_short_input() -> None:
    result = runner.invoke(app, ["mask", "a"])
    assert result.exit_code == 0
    assert "Nothing to mask" in result.output


def test_mask_uses_configured_char(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRING_EXTENSIONS_REPLACE_CHAR", "#")
    result = runner.invoke(app, ["mask", "1234"])
    assert result.output == "##34\n"


def test_chunk_uses_configured_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRING_EXTENSIONS_CHUNK_SIZE", "4")
    result = runner.invoke(app, ["chunk", "123456"])
    assert result.output == "1234\n56\n"


def test_chunk_rejects_zero_size() -> None:
    result = runner.invoke(app, ["chunk", "abc", "--size", "0"])
    assert result.exit_code == 1
    assert "positive integer" in result.output


def test_replace_rejects_bad_pattern() -> None:
    result = runner.invoke(app, ["replace", "abc", "(", "x"])
    assert result.exit_code == 1
    assert "not a valid pattern" in result.output


def test_bad_configuration_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRING_EXTENSIONS_CHUNK_SIZE", "zero")
    result = runner.invoke(app, ["reverse", "abc"])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_verbose_flag() -> None:
    result = runner.invoke(app, ["--verbose", "words", "a b"])
    assert result.exit_code == 0


def test_inspect_shows_table() -> None:
    result = runner.invoke(app, ["inspect", "lol"])
    assert result.exit_code == 0
    assert "Text Report" in result.output
    assert "is_palindrome" in result.output


def test_inspect_file(tmp_path: Path) -> None:
    f = tmp_path / "lines.txt"
    f.write_text("lol\nme@me.com\n\nBerlin\n", encoding="utf-8")
    result = runner.invoke(app, ["inspect-file", str(f)])
    assert result.exit_code == 0
    assert "Inspected 3 line(s)" in result.output
    assert "1 palindrome(s)" in result.output
    assert "5 word(s)" in result.output


def test_inspect_file_missing(tmp_path: Path) -> None:
    result = runner.invoke(app, ["inspect-file", str(tmp_path / "nope.txt")])
    assert result.exit_code == 1


def test_inspect_empty_file(tmp_path: Path) -> None:
    f = tmp_path / "empty.txt"
    f.write_text("\n\n", encoding="utf-8")
    result = runner.invoke(app, ["inspect-file", str(f)])
    assert result.exit_code == 0
    assert "No lines to inspect" in result.output


def test_inspect_file_not_utf8(tmp_path: Path) -> None:
    f = tmp_path / "binary.txt"
    f.write_bytes(b"lol\n\xff\xfe\n")
    result = runner.invoke(app, ["inspect-file", str(f)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "Could not read" in result.output
