"""Конверты запроса и ответа протокола AnkiConnect."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from ..config import API_VERSION


class RequestEnvelope(BaseModel):
    """Тело POST-запроса: действие, версия протокола и параметры."""

    action: str
    version: int = API_VERSION
    params: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> Dict[str, Any]:
        # `params` не передаётся вовсе, если у действия нет аргументов.
        return self.model_dump(exclude_none=True)


class ResponseEnvelope(BaseModel):
    """Ответ сервера: ровно одно из полей `result`/`error` заполнено."""

    result: Any = None
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


__all__ = ["RequestEnvelope", "ResponseEnvelope"]
