"""Операции с колодами Anki."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, List

from ..schemas import (
    CardReview,
    CardReviewsParams,
    CreateDeckParams,
    DeckStats,
    DeckStatsById,
    DeckStatsParams,
    DeleteDecksParams,
    PositionalCardReview,
)
from .client import Client

ACTION_DECK_NAMES = "deckNames"
ACTION_CREATE_DECK = "createDeck"
ACTION_GET_DECK_STATS = "getDeckStats"
ACTION_DELETE_DECKS = "deleteDecks"
ACTION_CARD_REVIEWS = "cardReviews"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_epoch_millis(moment: datetime) -> int:
    """Перевести момент времени в миллисекунды от эпохи.

    Наивные `datetime` считаются локальным временем, как в
    `datetime.timestamp()`. Счёт идёт в целых числах, без потери точности
    на больших значениях.
    """

    if moment.tzinfo is None:
        moment = moment.astimezone()
    return (moment - _EPOCH) // timedelta(milliseconds=1)


class DecksManager:
    """Операции над колодами и журналом их повторений."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def get_all(self) -> List[str]:
        """Вернуть имена всех колод."""

        return self.client.invoke(ACTION_DECK_NAMES, result_type=List[str])

    def create(self, name: str) -> None:
        # Сервер возвращает id новой колоды, он нам не нужен.
        self.client.invoke(ACTION_CREATE_DECK, CreateDeckParams(deck=name))

    def delete(self, name: str) -> None:
        """Удалить колоду вместе с её карточками."""

        self.client.invoke(
            ACTION_DELETE_DECKS, DeleteDecksParams(decks=[name], cards_too=True)
        )

    def get_reviews_after(self, name: str, start_time: datetime) -> List[CardReview]:
        """Вернуть повторения карточек колоды, сделанные после `start_time`."""

        params = CardReviewsParams(deck=name, start_id=to_epoch_millis(start_time))
        return self.client.invoke(
            ACTION_CARD_REVIEWS, params, result_type=List[PositionalCardReview]
        )

    def get_stats(self, *names: str) -> Dict[int, DeckStats]:
        stats = self.client.invoke(
            ACTION_GET_DECK_STATS,
            DeckStatsParams(decks=list(names)),
            result_type=DeckStatsById,
        )
        return stats.root


__all__ = [
    "ACTION_CARD_REVIEWS",
    "ACTION_CREATE_DECK",
    "ACTION_DECK_NAMES",
    "ACTION_DELETE_DECKS",
    "ACTION_GET_DECK_STATS",
    "DecksManager",
    "to_epoch_millis",
]
