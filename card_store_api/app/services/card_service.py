"""
Business logic for cards.

``CardService`` wraps a ``CardStore`` and applies the rules the HTTP
layer relies on: payloads are validated before anything is written,
misses are reported with ``CardNotFoundError`` or
``NoMatchingCardsError`` and every mutation is logged.
"""

import logging
from typing import Any, List, Mapping, Optional

from card_store_api.app.core.errors import CardNotFoundError, NoMatchingCardsError
from card_store_api.app.core.store import Card, CardStore
from card_store_api.app.schemas.card import CardDeleted, CardRead, CardWrite


logger = logging.getLogger(__name__)


class CardService:
    """Service for managing cards held in a ``CardStore``."""

    def __init__(self, store: CardStore) -> None:
        self.store = store

    async def list_cards(self) -> List[CardRead]:
        """Return all cards in insertion order."""
        return [self._to_read(card) for card in self.store.all()]

    async def get_card(self, card_id: int) -> CardRead:
        """Return the card with ``card_id`` or raise ``CardNotFoundError``."""
        return self._to_read(self._require(card_id))

    async def create_card(self, payload: Optional[Mapping[str, Any]]) -> CardRead:
        """Validate ``payload`` and store a new card.

        The store assigns the id.  Nothing is written when validation
        fails.
        """
        data = CardWrite.from_payload(payload or {})
        card = self.store.add(data.suit.value, data.value.value)
        logger.info("Created card %s (%s of %s)", card.id, card.value, card.suit)
        return self._to_read(card)

    async def update_card(self, card_id: int, payload: Optional[Mapping[str, Any]]) -> CardRead:
        """Replace suit and value of an existing card.

        Existence is checked first, so an unknown id yields a 404 even
        when the payload is invalid too.  The id never changes.
        """
        self._require(card_id)
        data = CardWrite.from_payload(payload or {})
        card = self.store.replace(card_id, data.suit.value, data.value.value)
        logger.info("Updated card %s to %s of %s", card_id, card.value, card.suit)
        return self._to_read(card)

    async def delete_card(self, card_id: int) -> CardDeleted:
        """Remove a card and echo it back."""
        card = self.store.remove(card_id)
        if card is None:
            logger.debug("Delete of unknown card %s", card_id)
            raise CardNotFoundError(card_id)
        logger.info("Deleted card %s", card_id)
        return CardDeleted(message=f"Card with ID {card_id} removed", card=self._to_read(card))

    async def cards_by_suit(self, suit: str) -> List[CardRead]:
        """Return cards whose suit matches ``suit`` ignoring case."""
        cards = self.store.find_by_suit(suit)
        if not cards:
            raise NoMatchingCardsError("suit", suit)
        return [self._to_read(card) for card in cards]

    async def cards_by_value(self, value: str) -> List[CardRead]:
        """Return cards whose value matches ``value`` ignoring case."""
        cards = self.store.find_by_value(value)
        if not cards:
            raise NoMatchingCardsError("value", value)
        return [self._to_read(card) for card in cards]

    def _require(self, card_id: int) -> Card:
        card = self.store.get(card_id)
        if card is None:
            logger.debug("Card %s not found", card_id)
            raise CardNotFoundError(card_id)
        return card

    @staticmethod
    def _to_read(card: Card) -> CardRead:
        return CardRead.model_validate(card)
