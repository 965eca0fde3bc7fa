"""
Card endpoints for API v1.

These routes expose CRUD operations over the in‑memory card store plus
two case‑insensitive filters (by suit and by value).  Validation and
error reporting happen in ``CardService``; the error handlers in
``core.errors`` turn its exceptions into JSON responses.
"""

import re
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Request, status

from card_store_api.app.core.errors import CardNotFoundError
from card_store_api.app.core.store import CardStore
from card_store_api.app.schemas.card import CardDeleted, CardRead
from card_store_api.app.services.card_service import CardService

router = APIRouter()

_CARD_ID = re.compile(r"-?[0-9]+")


def get_card_store(request: Request) -> CardStore:
    """Return the store owned by the running application."""
    return request.app.state.card_store


def get_card_service(store: CardStore = Depends(get_card_store)) -> CardService:
    return CardService(store)


def resolve_card_id(card_id: str) -> int:
    """Parse the ``{card_id}`` path segment.

    A segment that is not an integer cannot name any card, so it is
    reported as ``CardNotFoundError`` rather than a malformed request.
    """
    if not _CARD_ID.fullmatch(card_id):
        raise CardNotFoundError(card_id)
    return int(card_id)


@router.get("", response_model=List[CardRead])
async def list_cards(service: CardService = Depends(get_card_service)) -> List[CardRead]:
    """Return every card in the store."""
    return await service.list_cards()


@router.get("/suit/{suit}", response_model=List[CardRead])
async def cards_by_suit(suit: str, service: CardService = Depends(get_card_service)) -> List[CardRead]:
    """Return cards of the given suit.

    Matching ignores case, so ``/cards/suit/hearts`` finds ``Hearts``.
    Returns 404 with only a ``message`` when nothing matches.
    """
    return await service.cards_by_suit(suit)


@router.get("/value/{value}", response_model=List[CardRead])
async def cards_by_value(value: str, service: CardService = Depends(get_card_service)) -> List[CardRead]:
    """Return cards of the given value, ignoring case."""
    return await service.cards_by_value(value)


@router.get("/{card_id}", response_model=CardRead)
async def get_card(
    card_id: int = Depends(resolve_card_id),
    service: CardService = Depends(get_card_service),
) -> CardRead:
    """Retrieve a single card by its ID.  Raises 404 if missing."""
    return await service.get_card(card_id)


@router.post("", response_model=CardRead, status_code=status.HTTP_201_CREATED)
async def create_card(
    body: Optional[Dict[str, Any]] = Body(None, examples=[{"suit": "Clubs", "value": "7"}]),
    service: CardService = Depends(get_card_service),
) -> CardRead:
    """Create a new card.

    The body must contain ``suit`` and ``value`` using the canonical
    spellings (e.g. ``"Hearts"``, ``"Queen"``).  Returns 400 when a
    field is missing or not allowed.
    """
    return await service.create_card(body)


@router.put("/{card_id}", response_model=CardRead)
async def update_card(
    card_id: int = Depends(resolve_card_id),
    body: Optional[Dict[str, Any]] = Body(None, examples=[{"suit": "Spades", "value": "Ace"}]),
    service: CardService = Depends(get_card_service),
) -> CardRead:
    """Replace suit and value of an existing card.

    Both fields are required; partial updates are not supported.
    """
    return await service.update_card(card_id, body)


@router.delete("/{card_id}", response_model=CardDeleted)
async def delete_card(
    card_id: int = Depends(resolve_card_id),
    service: CardService = Depends(get_card_service),
) -> CardDeleted:
    """Delete a card and return it together with a confirmation message."""
    return await service.delete_card(card_id)


# Every GET route also answers HEAD.  The copies stay out of the
# OpenAPI schema so operation ids remain unique.
for _route in list(router.routes):
    if "GET" in _route.methods:
        router.add_api_route(
            _route.path,
            _route.endpoint,
            methods=["HEAD"],
            response_model=_route.response_model,
            include_in_schema=False,
        )
