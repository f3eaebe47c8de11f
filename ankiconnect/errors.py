"""Исключения клиента AnkiConnect."""

from __future__ import annotations

from http import HTTPStatus
from typing import Optional


class AnkiConnectError(Exception):
    """Базовая ошибка клиента со статусом в духе HTTP."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, message={self.message!r})"


class TransportError(AnkiConnectError):
    """Запрос не дошёл до сервера или ответ не удалось разобрать."""

    def __init__(self, message: str = HTTPStatus.INTERNAL_SERVER_ERROR.phrase) -> None:
        super().__init__(message, HTTPStatus.INTERNAL_SERVER_ERROR)


class ResultDecodeError(TransportError):
    """Поле `result` не соответствует ожидаемому типу."""

    def __init__(self, detail: str) -> None:
        super().__init__()
        self.detail = detail


class ServerError(AnkiConnectError):
    """AnkiConnect вернул непустое поле `error`."""

    def __init__(self, message: str) -> None:
        super().__init__(message, HTTPStatus.BAD_REQUEST)


class ReviewFormatError(ValueError):
    """Компактная запись повторений нарушает формат протокола."""


__all__ = [
    "AnkiConnectError",
    "ResultDecodeError",
    "ReviewFormatError",
    "ServerError",
    "TransportError",
]
