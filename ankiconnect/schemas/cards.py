"""Pydantic-схемы для карточек Anki и истории их повторений."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError, model_validator

from ..errors import ReviewFormatError
from ._decoding import format_error_from, load_json, parse_int_key


class FindCardsParams(BaseModel):
    """Параметры действия `findCards`."""

    query: str


class CardIdsParams(BaseModel):
    """Параметры `cardsInfo` и `getReviewsOfCards`: список идентификаторов карточек."""

    cards: List[int]


class FieldData(BaseModel):
    value: str = ""
    order: int = 0

    model_config = ConfigDict(frozen=True)


class CardInfo(BaseModel):
    """Снимок карточки, возвращаемый `cardsInfo`.

    AnkiConnect отдаёт пустой объект для несуществующих карточек, поэтому
    все поля необязательны. Неизвестные ключи сохраняются в `model_extra`.
    """

    answer: Optional[str] = None
    question: Optional[str] = None
    deck_name: Optional[str] = Field(default=None, alias="deckName")
    model_name: Optional[str] = Field(default=None, alias="modelName")
    field_order: Optional[int] = Field(default=None, alias="fieldOrder")
    fields: Dict[str, FieldData] = Field(default_factory=dict)
    css: Optional[str] = None
    card_id: Optional[int] = Field(default=None, alias="cardId")
    interval: Optional[int] = None
    note: Optional[int] = None
    ord: Optional[int] = None
    type: Optional[int] = None
    queue: Optional[int] = None
    due: Optional[int] = None
    factor: Optional[int] = None
    reps: Optional[int] = None
    lapses: Optional[int] = None
    left: Optional[int] = None
    mod: Optional[int] = None

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, extra="allow", protected_namespaces=()
    )


class ReviewData(BaseModel):
    """Одна запись из `getReviewsOfCards`."""

    id: int
    usn: int
    ease: int
    interval: int = Field(alias="ivl")
    last_interval: int = Field(alias="lastIvl")
    factor: int
    time: int
    type: int

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)


class ReviewsByCard(RootModel[Dict[int, List[ReviewData]]]):
    """История повторений, сгруппированная по идентификатору карточки.

    Сервер присылает объект, ключи которого являются идентификаторами
    карточек в виде строк. Любой ключ, не являющийся десятичным целым,
    прерывает разбор целиком.
    """

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _parse_keys(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            raise ReviewFormatError(
                f"reviews must be an object keyed by card id, got {type(value).__name__}"
            )
        return {parse_int_key(key): entries for key, entries in value.items()}


def decode_reviews_by_card(raw: Any) -> Dict[int, List[ReviewData]]:
    """Разобрать ответ `getReviewsOfCards` (объект или JSON-текст)."""

    data = load_json(raw)
    try:
        return ReviewsByCard.model_validate(data).root
    except ValidationError as exc:
        raise format_error_from(exc) from exc


__all__ = [
    "CardIdsParams",
    "CardInfo",
    "FieldData",
    "FindCardsParams",
    "ReviewData",
    "ReviewsByCard",
    "decode_reviews_by_card",
]
