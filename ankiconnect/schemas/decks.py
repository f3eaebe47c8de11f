"""Pydantic-схемы для колод Anki и журнала повторений колоды."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Dict, List

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    RootModel,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from ..errors import ReviewFormatError
from ._decoding import INT64_MAX, INT64_MIN, format_error_from, load_json, parse_int_key


class CreateDeckParams(BaseModel):
    """Параметры действия `createDeck`."""

    deck: str


class DeleteDecksParams(BaseModel):
    """Параметры действия `deleteDecks`."""

    decks: List[str]
    cards_too: bool = Field(default=False, alias="cardsToo")

    model_config = ConfigDict(populate_by_name=True)


class DeckStatsParams(BaseModel):
    """Параметры действия `getDeckStats`."""

    decks: List[str]


class CardReviewsParams(BaseModel):
    """Параметры действия `cardReviews`; `startID` задаётся в миллисекундах."""

    deck: str
    start_id: int = Field(alias="startID")

    model_config = ConfigDict(populate_by_name=True)


# Порядок полей в позиционной записи `cardReviews`.
CARD_REVIEW_FIELDS = (
    "review_time",
    "card_id",
    "usn",
    "button_pressed",
    "new_interval",
    "previous_interval",
    "new_factor",
    "review_duration",
    "review_type",
)


class CardReview(BaseModel):
    """Одно повторение карточки из журнала колоды."""

    review_time: int = Field(alias="reviewTime")
    card_id: int = Field(alias="cardID")
    usn: int
    button_pressed: int = Field(alias="buttonPressed")
    new_interval: int = Field(alias="newInterval")
    previous_interval: int = Field(alias="previousInterval")
    new_factor: int = Field(alias="newFactor")
    review_duration: int = Field(alias="reviewDuration")
    review_type: int = Field(alias="reviewType")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_list(self) -> List[int]:
        """Вернуть запись в позиционном виде, как её присылает сервер."""

        return [getattr(self, name) for name in CARD_REVIEW_FIELDS]


def _positional_fields(value: Any) -> Dict[str, int]:
    if not isinstance(value, (list, tuple)):
        raise ReviewFormatError(f"card review must be an array, got {type(value).__name__}")
    if len(value) != len(CARD_REVIEW_FIELDS):
        raise ReviewFormatError(
            "unexpected number of fields in card review: "
            f"got {len(value)}, expected {len(CARD_REVIEW_FIELDS)}"
        )
    for name, item in zip(CARD_REVIEW_FIELDS, value):
        if isinstance(item, bool) or not isinstance(item, int):
            raise ReviewFormatError(f"card review field {name!r} must be an integer, got {item!r}")
        if not INT64_MIN <= item <= INT64_MAX:
            raise ReviewFormatError(f"card review field {name!r} out of 64-bit range: {item!r}")
    return dict(zip(CARD_REVIEW_FIELDS, value))


# CardReview в том виде, в каком он приходит по сети: массив из девяти чисел.
PositionalCardReview = Annotated[CardReview, BeforeValidator(_positional_fields)]

_POSITIONAL_ADAPTER = TypeAdapter(PositionalCardReview)


def decode_card_review(raw: Any) -> CardReview:
    """Разобрать позиционную запись повторения (список или JSON-текст)."""

    data = load_json(raw)
    try:
        return _POSITIONAL_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise format_error_from(exc) from exc


class DeckStats(BaseModel):
    """Статистика колоды из `getDeckStats`."""

    deck_id: int
    name: str
    new_count: int = 0
    learn_count: int = 0
    review_count: int = 0
    total_in_deck: int = 0

    model_config = ConfigDict(frozen=True, extra="allow")


class DeckStatsById(RootModel[Dict[int, DeckStats]]):
    """Ответ `getDeckStats`: ключи являются идентификаторами колод в виде строк."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _parse_keys(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            raise ReviewFormatError(
                f"deck stats must be an object keyed by deck id, got {type(value).__name__}"
            )
        return {parse_int_key(key): stats for key, stats in value.items()}


__all__ = [
    "CARD_REVIEW_FIELDS",
    "CardReview",
    "CardReviewsParams",
    "CreateDeckParams",
    "DeckStats",
    "DeckStatsById",
    "DeckStatsParams",
    "DeleteDecksParams",
    "PositionalCardReview",
    "decode_card_review",
]
