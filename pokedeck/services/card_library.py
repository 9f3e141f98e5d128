"""
Card library service.

Loads and caches the generated card catalog bundle.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pokedeck.config import settings
from pokedeck.models.card import Card

logger = logging.getLogger(__name__)


def parse_card_library(payload: dict[str, Any] | list[dict[str, Any]]) -> list[Card]:
    """
    Build catalog cards from a decoded bundle.

    Args:
        payload: Either `{"generatedAt", "count", "cards": [...]}` or a bare
            list of card records

    Returns:
        Cards in bundle order. Records without an id are skipped.
    """
    records = payload.get("cards", []) if isinstance(payload, dict) else payload

    cards: list[Card] = []
    for record in records:
        if not record.get("id"):
            logger.warning("Skipping catalog record without id: %r", record.get("name"))
            continue
        cards.append(Card.from_dict(record))
    return cards


def load_card_library(path: Path | None = None) -> list[Card]:
    """
    Load the card catalog from file.

    Args:
        path: Path to JSON bundle. Defaults to settings.card_library_path

    Returns:
        List of catalog cards.

    Raises:
        FileNotFoundError: If the bundle doesn't exist
    """
    if path is None:
        path = Path(settings.card_library_path)

    if not path.exists():
        raise FileNotFoundError(f"Card library not found at {path}.")

    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    cards = parse_card_library(payload)
    logger.info("Loaded %d cards from %s", len(cards), path)
    return cards


@lru_cache(maxsize=1)
def get_card_library() -> list[Card]:
    """
    Get cached card catalog.

    Cached after first load.

    Raises:
        FileNotFoundError: If the bundle doesn't exist
    """
    return load_card_library()
