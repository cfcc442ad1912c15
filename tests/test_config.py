"""Tests for string_extensions.config."""

import pytest

from string_extensions.config import Settings, load_settings
from string_extensions.errors import InvalidArgumentError


def test_load_settings_defaults() -> None:
    assert load_settings() == Settings(replace_char="*", chunk_size=3, log_level="WARNING")


def test_load_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRING_EXTENSIONS_REPLACE_CHAR", "#")
    monkeypatch.setenv("STRING_EXTENSIONS_CHUNK_SIZE", "4")
    monkeypatch.setenv("STRING_EXTENSIONS_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.replace_char == "#"
    assert settings.chunk_size == 4
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("CHUNK_SIZE", "three"),
        ("CHUNK_SIZE", "0"),
        ("REPLACE_CHAR", ""),
        ("LOG_LEVEL", "chatty"),
    ],
)
def test_load_settings_rejects_bad_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(f"STRING_EXTENSIONS_{name}", value)
    with pytest.raises(InvalidArgumentError) as excinfo:
        load_settings()
    assert excinfo.value.name == f"STRING_EXTENSIONS_{name}"
