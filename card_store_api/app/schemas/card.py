"""
Pydantic models for card data.

A card has a ``suit`` and a ``value`` drawn from two fixed sets.  The
allowed spellings are the enum values below; validation against them
is case-sensitive.  ``CardWrite`` is the validated body of create and
update requests, ``CardRead`` is what the API returns.
"""

from enum import Enum
from typing import Any, List, Mapping

from pydantic import BaseModel, Field

from card_store_api.app.core.errors import InvalidEnumError, MissingFieldError


class Suit(str, Enum):
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"


class Rank(str, Enum):
    ACE = "Ace"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"


SUITS: List[str] = [suit.value for suit in Suit]
RANKS: List[str] = [rank.value for rank in Rank]


class CardWrite(BaseModel):
    """Validated body for creating or replacing a card."""

    suit: Suit = Field(..., examples=["Hearts"])
    value: Rank = Field(..., examples=["Ace"])

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CardWrite":
        """Validate a raw JSON object and build a ``CardWrite``.

        Raises ``MissingFieldError`` when either field is absent, null
        or empty, and ``InvalidEnumError`` when a field is not one of
        the canonical spellings.  Suit is checked before value.
        """
        missing = [name for name in ("suit", "value") if payload.get(name) in (None, "")]
        if missing:
            raise MissingFieldError(missing)
        suit = payload["suit"]
        if suit not in SUITS:
            raise InvalidEnumError("suit", SUITS)
        value = payload["value"]
        if value not in RANKS:
            raise InvalidEnumError("value", RANKS)
        return cls(suit=Suit(suit), value=Rank(value))


class CardRead(BaseModel):
    """Schema for reading a card from the API."""

    id: int
    suit: str
    value: str

    model_config = {
        "from_attributes": True,
    }


class CardDeleted(BaseModel):
    """Response body of a successful delete."""

    message: str
    card: CardRead
