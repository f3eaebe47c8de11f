"""Операции с карточками: поиск и получение подробностей."""

from __future__ import annotations

from typing import Dict, List

from ..schemas import CardIdsParams, CardInfo, FindCardsParams, ReviewData, ReviewsByCard
from .client import Client

ACTION_FIND_CARDS = "findCards"
ACTION_CARDS_INFO = "cardsInfo"
ACTION_GET_REVIEWS_OF_CARDS = "getReviewsOfCards"


class CardsManager:
    """Поиск карточек и получение сведений о найденных.

    `get` и `get_reviews` делают два последовательных запроса: сначала
    `findCards`, затем запрос по найденным идентификаторам. Ошибка поиска
    пробрасывается как есть, второй запрос в этом случае не отправляется.
    """

    def __init__(self, client: Client) -> None:
        self.client = client

    def search(self, query: str) -> List[int]:
        return self.client.invoke(
            ACTION_FIND_CARDS, FindCardsParams(query=query), result_type=List[int]
        )

    def get(self, query: str) -> List[CardInfo]:
        card_ids = self.search(query)
        return self.client.invoke(
            ACTION_CARDS_INFO, CardIdsParams(cards=card_ids), result_type=List[CardInfo]
        )

    def get_reviews(self, query: str) -> Dict[int, List[ReviewData]]:
        # Требует AnkiConnect со свежим `getReviewsOfCards`:
        # https://github.com/FooSoft/anki-connect/issues/378
        card_ids = self.search(query)
        reviews = self.client.invoke(
            ACTION_GET_REVIEWS_OF_CARDS,
            CardIdsParams(cards=card_ids),
            result_type=ReviewsByCard,
        )
        return reviews.root


__all__ = [
    "ACTION_CARDS_INFO",
    "ACTION_FIND_CARDS",
    "ACTION_GET_REVIEWS_OF_CARDS",
    "CardsManager",
]
