"""Публичный интерфейс схем клиента AnkiConnect."""

from .cards import (
    CardIdsParams,
    CardInfo,
    FieldData,
    FindCardsParams,
    ReviewData,
    ReviewsByCard,
    decode_reviews_by_card,
)
from .decks import (
    CARD_REVIEW_FIELDS,
    CardReview,
    CardReviewsParams,
    CreateDeckParams,
    DeckStats,
    DeckStatsById,
    DeckStatsParams,
    DeleteDecksParams,
    PositionalCardReview,
    decode_card_review,
)
from .envelope import RequestEnvelope, ResponseEnvelope


__all__ = [
    "CARD_REVIEW_FIELDS",
    "CardIdsParams",
    "CardInfo",
    "CardReview",
    "CardReviewsParams",
    "CreateDeckParams",
    "DeckStats",
    "DeckStatsById",
    "DeckStatsParams",
    "DeleteDecksParams",
    "FieldData",
    "FindCardsParams",
    "PositionalCardReview",
    "RequestEnvelope",
    "ResponseEnvelope",
    "ReviewData",
    "ReviewsByCard",
    "decode_card_review",
    "decode_reviews_by_card",
]
