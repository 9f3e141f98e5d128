"""
Health check endpoints.

Provides liveness and readiness probes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from pokedeck.api.decks import card_library
from pokedeck.models.card import Card
from pokedeck.models.failure import CardLibraryUnavailableError

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    card_library: str | None = None
    cards: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check dependencies.
    """
    return HealthResponse(status="healthy")


def _optional_card_library() -> list[Card] | None:
    try:
        return card_library()
    except CardLibraryUnavailableError:
        return None


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    cards: Annotated[list[Card] | None, Depends(_optional_card_library)],
) -> HealthResponse:
    """
    Readiness probe.

    Checks that the card library is loaded. Returns 503 if it is unavailable.
    """
    if cards is None:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", card_library="unavailable")
    return HealthResponse(status="ready", card_library="loaded", cards=len(cards))
