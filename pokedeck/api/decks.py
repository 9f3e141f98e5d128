"""
Deck API endpoints.

Provides decklist text import (text -> resolved entries) and export
(entries -> text) against the loaded card library.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from pokedeck.config import DEFAULT_DECK_NAME
from pokedeck.models.card import Card
from pokedeck.models.deck import DeckEntry
from pokedeck.models.failure import (
    CardLibraryUnavailableError,
    CardNotFoundError,
    EmptyImportError,
)
from pokedeck.services.card_library import get_card_library
from pokedeck.services.card_ordering import sort_deck_entries
from pokedeck.services.card_resolver import import_deck_from_text
from pokedeck.services.deck_formatter import format_deck_as_text, get_set_identifier
from pokedeck.services.deck_rules import validate_entries

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])


class DeckImportRequest(BaseModel):
    """Request model for importing a decklist."""

    text: str = Field(
        ...,
        description="Raw decklist text",
        examples=["Pokémon: 4\n4 Charizard ex OBF 125"],
    )


class DeckEntryResponse(BaseModel):
    """A resolved deck entry."""

    card_id: str
    name: str
    supertype: str
    set_code: str
    number: str
    count: int


class DeckImportResponse(BaseModel):
    """Response model for decklist import."""

    deck_name: str | None = None
    entries: list[DeckEntryResponse] = Field(default_factory=list)
    errors: list[str] = Field(
        default_factory=list,
        description="Lines that could not be resolved (non-blocking)",
    )
    issues: list[str] = Field(
        default_factory=list,
        description="Deck size and copy-limit violations (informational)",
    )
    total_cards: int = 0


class ExportEntry(BaseModel):
    """A card id and count to export."""

    card_id: str
    count: int = Field(..., ge=1)


class DeckExportRequest(BaseModel):
    """Request model for decklist export."""

    deck_name: str = DEFAULT_DECK_NAME
    entries: list[ExportEntry]
    sort: bool = Field(
        default=True,
        description="Sort entries for display before formatting",
    )


class DeckExportResponse(BaseModel):
    """Response model for decklist export."""

    text: str


def card_library() -> list[Card]:
    """Dependency providing the loaded card catalog."""
    try:
        return get_card_library()
    except FileNotFoundError as e:
        raise CardLibraryUnavailableError(detail=str(e)) from e


def _entry_response(entry: DeckEntry) -> DeckEntryResponse:
    return DeckEntryResponse(
        card_id=entry.card.id,
        name=entry.card.name,
        supertype=entry.card.supertype,
        set_code=get_set_identifier(entry),
        number=entry.card.number,
        count=entry.count,
    )


@router.post("/import", response_model=DeckImportResponse)
async def import_deck(
    request: DeckImportRequest,
    cards: Annotated[list[Card], Depends(card_library)],
) -> DeckImportResponse:
    """
    Import decklist text.

    Lines that fail to resolve are reported in `errors` without failing the
    import. Fails only when no line resolves to a card.
    """
    result = import_deck_from_text(request.text, cards)
    logger.info(
        "Deck import: %d entries, %d cards, %d errors",
        len(result.entries),
        result.total_cards,
        len(result.errors),
    )

    if not result.entries:
        raise EmptyImportError(result.errors)

    return DeckImportResponse(
        deck_name=result.deck_name,
        entries=[_entry_response(entry) for entry in result.entries],
        errors=list(result.errors),
        issues=validate_entries(result.entries),
        total_cards=result.total_cards,
    )


@router.post("/export", response_model=DeckExportResponse)
async def export_deck(
    request: DeckExportRequest,
    cards: Annotated[list[Card], Depends(card_library)],
) -> DeckExportResponse:
    """Format deck entries as decklist text."""
    by_id = {card.id: card for card in cards}

    missing = [item.card_id for item in request.entries if item.card_id not in by_id]
    if missing:
        raise CardNotFoundError(missing)

    entries = [DeckEntry(card=by_id[item.card_id], count=item.count) for item in request.entries]
    if request.sort:
        entries = sort_deck_entries(entries, cards)

    return DeckExportResponse(text=format_deck_as_text(request.deck_name, entries))
