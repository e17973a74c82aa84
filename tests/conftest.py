"""Общие фикстуры для тестов."""

from typing import Iterator

import pytest

from emailcheck.config import get_settings

ENV_KEYS = (
    "EMAILCHECK_LOG_LEVEL",
    "EMAILCHECK_LOG_FORMAT",
    "EMAILCHECK_DEDUPE",
    "EMAILCHECK_INPUT_ENCODING",
)


@pytest.fixture(autouse=True)
def default_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Очищает переменные окружения и кэш настроек вокруг каждого теста."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]
