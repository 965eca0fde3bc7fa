"""
Top‑level router for version 1 of the API.

This router aggregates resource routers under a unified prefix.  When
new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import cards

router = APIRouter()

router.include_router(cards.router, prefix="/cards", tags=["cards"])
