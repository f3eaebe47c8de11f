"""Конфигурация клиента AnkiConnect и загрузка окружения."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

# Версия протокола AnkiConnect, под которую написан клиент.
API_VERSION = 6


def _env_default(name: str, fallback: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return fallback
    trimmed = value.strip()
    return trimmed or fallback


def _env_optional(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def _env_float(name: str, fallback: float) -> float:
    raw = _env_optional(name)
    if raw is None:
        return fallback
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def reload_from_env() -> None:
    global ANKI_URL, ANKI_TIMEOUT

    ANKI_URL = _env_default("ANKI_URL", "http://127.0.0.1:8765")
    ANKI_TIMEOUT = _env_float("ANKI_TIMEOUT", 25.0)


def load_env(path: Optional[Union[str, Path]] = None) -> bool:
    """Подгрузить `.env` и перечитать настройки.

    Без аргумента `python-dotenv` ищет файл, начиная с текущего каталога.
    Уже заданные переменные окружения не перезаписываются.
    """

    loaded = load_dotenv(path) if path is not None else load_dotenv()
    reload_from_env()
    return loaded


reload_from_env()


__all__ = [
    "ANKI_TIMEOUT",
    "ANKI_URL",
    "API_VERSION",
    "load_env",
    "reload_from_env",
    "_env_default",
    "_env_optional",
]
