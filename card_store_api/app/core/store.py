"""
In‑memory card storage.

``CardStore`` owns the ordered list of cards and the id counter.  One
store is created per application by ``create_app`` and discarded when
the application shuts down; nothing is persisted.

Lookups and filters are linear scans over the list.  The id counter
only ever increases, so ids of deleted cards are never handed out
again.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


SEED_CARDS: Sequence[Tuple[str, str]] = (
    ("Hearts", "Ace"),
    ("Spades", "King"),
    ("Diamonds", "10"),
)


@dataclass(frozen=True)
class Card:
    id: int
    suit: str
    value: str


class CardStore:
    """Ordered collection of cards with a monotonically increasing id."""

    def __init__(self, seed: Sequence[Tuple[str, str]] = SEED_CARDS) -> None:
        self._seed = tuple(seed)
        self._cards: List[Card] = []
        self._next_id = 1
        self.reset()

    def reset(self) -> None:
        """Restore the seed records and the id counter."""
        self._cards = [Card(id=index, suit=suit, value=value) for index, (suit, value) in enumerate(self._seed, start=1)]
        self._next_id = len(self._cards) + 1
        logger.debug("Card store seeded with %d cards", len(self._cards))

    def clear(self) -> None:
        """Drop every record.  Used when the application shuts down."""
        self._cards = []

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def next_id(self) -> int:
        return self._next_id

    def all(self) -> List[Card]:
        return list(self._cards)

    def get(self, card_id: int) -> Optional[Card]:
        return next((card for card in self._cards if card.id == card_id), None)

    def add(self, suit: str, value: str) -> Card:
        card = Card(id=self._next_id, suit=suit, value=value)
        self._next_id += 1
        self._cards.append(card)
        return card

    def replace(self, card_id: int, suit: str, value: str) -> Optional[Card]:
        index = self._index_of(card_id)
        if index is None:
            return None
        card = replace(self._cards[index], suit=suit, value=value)
        self._cards[index] = card
        return card

    def remove(self, card_id: int) -> Optional[Card]:
        index = self._index_of(card_id)
        if index is None:
            return None
        return self._cards.pop(index)

    def find_by_suit(self, suit: str) -> List[Card]:
        needle = suit.lower()
        return [card for card in self._cards if card.suit.lower() == needle]

    def find_by_value(self, value: str) -> List[Card]:
        needle = value.lower()
        return [card for card in self._cards if card.value.lower() == needle]

    def _index_of(self, card_id: int) -> Optional[int]:
        for index, card in enumerate(self._cards):
            if card.id == card_id:
                return index
        return None
