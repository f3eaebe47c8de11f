"""Типизированный клиент для AnkiConnect."""

from __future__ import annotations

from typing import Optional

import httpx

from . import config
from .errors import (
    AnkiConnectError,
    ResultDecodeError,
    ReviewFormatError,
    ServerError,
    TransportError,
)
from .schemas import (
    CardInfo,
    CardReview,
    DeckStats,
    FieldData,
    ReviewData,
    decode_card_review,
    decode_reviews_by_card,
)
from .services import CardsManager, Client, DecksManager


class AnkiConnect:
    """Точка входа: общий транспорт и менеджеры `cards` и `decks`."""

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.client = Client(url, timeout=timeout, http_client=http_client)
        self.cards = CardsManager(self.client)
        self.decks = DecksManager(self.client)

    def is_responsive(self) -> bool:
        return self.client.is_responsive()

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "AnkiConnect":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = [
    "AnkiConnect",
    "AnkiConnectError",
    "CardInfo",
    "CardReview",
    "CardsManager",
    "Client",
    "DeckStats",
    "DecksManager",
    "FieldData",
    "ResultDecodeError",
    "ReviewData",
    "ReviewFormatError",
    "ServerError",
    "TransportError",
    "config",
    "decode_card_review",
    "decode_reviews_by_card",
]
