"""Общие помощники для разбора компактных форматов AnkiConnect."""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import ValidationError

from ..errors import ReviewFormatError

_INT_KEY_RE = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_int_key(key: Any) -> int:
    """Разобрать ключ вида `"1653613948202"` в 64-битное целое."""

    if isinstance(key, bool):
        raise ReviewFormatError(f"invalid key {key!r}: not a base-10 integer")
    if isinstance(key, int):
        value = key
    elif isinstance(key, str) and _INT_KEY_RE.fullmatch(key):
        value = int(key)
    else:
        raise ReviewFormatError(f"invalid key {key!r}: not a base-10 integer")

    if not INT64_MIN <= value <= INT64_MAX:
        raise ReviewFormatError(f"invalid key {key!r}: value out of range")
    return value


def load_json(raw: Any) -> Any:
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ReviewFormatError(f"invalid JSON: {exc}") from exc
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ReviewFormatError(f"invalid JSON: {exc}") from exc


def format_error_from(exc: ValidationError) -> ReviewFormatError:
    """Достать исходную ReviewFormatError из ошибки валидации Pydantic."""

    for error in exc.errors():
        original = (error.get("ctx") or {}).get("error")
        if isinstance(original, ReviewFormatError):
            return original
    return ReviewFormatError(str(exc))


__all__ = ["INT64_MAX", "INT64_MIN", "format_error_from", "load_json", "parse_int_key"]
