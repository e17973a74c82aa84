"""Загрузка конфигурации из переменных окружения."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Глобальные настройки приложения."""

    log_level: int
    log_format: str
    dedupe: bool
    input_encoding: str


def _env(key: str, default: str = "") -> str:
    """Возвращает значение переменной окружения или значение по умолчанию."""
    return os.getenv(key, default).strip()


def _env_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_log_level(key: str, default: int = logging.INFO) -> int:
    value = _env(key).upper()
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Загружает настройки один раз и кэширует их для повторного использования."""
    return Settings(
        log_level=_env_log_level("EMAILCHECK_LOG_LEVEL"),
        log_format=_env("EMAILCHECK_LOG_FORMAT") or DEFAULT_LOG_FORMAT,
        dedupe=_env_bool("EMAILCHECK_DEDUPE", False),
        input_encoding=_env("EMAILCHECK_INPUT_ENCODING", "utf-8") or "utf-8",
    )
