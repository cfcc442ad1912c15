import pytest

from string_extensions.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's STRING_EXTENSIONS_* variables out of the tests."""
    for name in ("REPLACE_CHAR", "CHUNK_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(f"{ENV_PREFIX}{name}", raising=False)
