"""
Deck construction rules.

Copy limits and deck size are policy for whoever commits entries into a
deck. The resolver deliberately does not apply them.

Decks are passed in as `Mapping[card_id, DeckEntry]` and new mappings are
returned. Nothing here mutates its input.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from pokedeck.config import (
    DEFAULT_DECK_NAME,
    MAX_CARD_COPIES,
    MAX_DECK_SIZE,
    STANDARD_REGULATION_MARKS,
)
from pokedeck.models.card import Card
from pokedeck.models.deck import DeckEntry, DeckStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddCheck:
    """Whether one more copy of a card may be added."""

    allowed: bool
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class SetDeckResult:
    """
    Outcome of replacing a whole deck.

    Attributes:
        deck: The replacement deck, or None when it was refused
        deck_name: Name to use for the deck after the call
        issues: Validation messages that caused a refusal
    """

    deck: dict[str, DeckEntry] | None
    deck_name: str
    issues: tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        return self.deck is not None


def is_basic_energy(card: Card) -> bool:
    """Basic energy is exempt from the copy limit."""
    return card.supertype.lower() == "energy" and any(
        subtype.lower() == "basic" for subtype in card.subtypes
    )


def is_standard_card(card: Card) -> bool:
    """
    Check Standard legality.

    The printed regulation mark decides when present; otherwise the
    catalog's `standard` legality is used.
    """
    if card.regulation_mark:
        return card.regulation_mark.upper() in STANDARD_REGULATION_MARKS
    return (card.legality("standard") or "").lower() == "legal"


def _normalize(name: str) -> str:
    return name.strip().lower()


def _total(deck: Mapping[str, DeckEntry]) -> int:
    return sum(entry.count for entry in deck.values())


def _copies_of_name(deck: Mapping[str, DeckEntry], name: str) -> int:
    target = _normalize(name)
    return sum(entry.count for entry in deck.values() if _normalize(entry.card.name) == target)


def compute_deck_stats(entries: Sequence[DeckEntry]) -> DeckStats:
    """
    Summarize a deck.

    Args:
        entries: Deck entries

    Returns:
        DeckStats with total, remaining slots, counts per supertype and
        whether every card is Standard legal
    """
    counts_by_supertype: dict[str, int] = {}
    total = 0
    standard_legal = True

    for entry in entries:
        key = entry.card.supertype or "Other"
        counts_by_supertype[key] = counts_by_supertype.get(key, 0) + entry.count
        total += entry.count
        if standard_legal and not is_standard_card(entry.card):
            standard_legal = False

    return DeckStats(
        total=total,
        remaining=max(0, MAX_DECK_SIZE - total),
        counts_by_supertype=counts_by_supertype,
        standard_legal=standard_legal,
    )


def validate_entries(entries: Sequence[DeckEntry]) -> list[str]:
    """
    Check a complete deck against size and copy limits.

    Returns:
        One message per violation. Empty list if the deck is valid.
    """
    issues: list[str] = []

    total = sum(entry.count for entry in entries)
    if total > MAX_DECK_SIZE:
        issues.append(f"Deck has {total} cards. The Standard limit is {MAX_DECK_SIZE}.")

    # name -> (count, display label)
    name_counts: dict[str, tuple[int, str]] = {}
    for entry in entries:
        if is_basic_energy(entry.card):
            continue

        key = _normalize(entry.card.name)
        count, label = name_counts.get(key, (0, entry.card.name))
        name_counts[key] = (count + entry.count, label)

        if entry.count > MAX_CARD_COPIES:
            issues.append(f"{entry.card.name} exceeds the four-copy limit.")

    for count, label in name_counts.values():
        if count > MAX_CARD_COPIES:
            issues.append(f"{label} exceeds the four-copy limit across printings.")

    return issues


def can_add_card(card: Card, deck: Mapping[str, DeckEntry]) -> AddCheck:
    """Check whether one more copy of `card` fits in `deck`."""
    total = _total(deck)
    existing = deck.get(card.id)

    if existing is None and total >= MAX_DECK_SIZE:
        return AddCheck(allowed=False, reason=f"Deck already has {MAX_DECK_SIZE} cards.")

    if existing is not None and total >= MAX_DECK_SIZE and not is_basic_energy(card):
        return AddCheck(allowed=False, reason="Deck is full. Remove a card before adding more.")

    if not is_basic_energy(card):
        copies = existing.count if existing is not None else 0
        if copies >= MAX_CARD_COPIES:
            return AddCheck(allowed=False, reason="You can only run four copies of this card.")

        if _copies_of_name(deck, card.name) >= MAX_CARD_COPIES:
            return AddCheck(
                allowed=False,
                reason=f"You already have four cards named {card.name}.",
            )

    return AddCheck(allowed=True)


def add_card(
    deck: Mapping[str, DeckEntry], card: Card
) -> tuple[dict[str, DeckEntry], AddCheck]:
    """
    Add one copy of a card.

    Returns:
        (new deck, check). The new deck equals the input when the
        check fails.
    """
    check = can_add_card(card, deck)
    updated = dict(deck)
    if not check.allowed:
        logger.debug("Refused to add %s: %s", card.name, check.reason)
        return updated, check

    existing = updated.get(card.id)
    count = existing.count + 1 if existing is not None else 1
    updated[card.id] = DeckEntry(card=card, count=count)
    return updated, check


def increment_card(
    deck: Mapping[str, DeckEntry], card_id: str
) -> tuple[dict[str, DeckEntry], AddCheck]:
    """
    Add one copy of a card already in the deck.

    Unknown ids leave the deck unchanged.
    """
    existing = deck.get(card_id)
    if existing is None:
        return dict(deck), AddCheck(allowed=False, reason="Card is not in the deck.")
    return add_card(deck, existing.card)


def decrement_card(deck: Mapping[str, DeckEntry], card_id: str) -> dict[str, DeckEntry]:
    """Remove one copy of a card. The entry is dropped at zero."""
    updated = dict(deck)
    existing = updated.get(card_id)
    if existing is None:
        return updated

    if existing.count <= 1:
        del updated[card_id]
    else:
        updated[card_id] = DeckEntry(card=existing.card, count=existing.count - 1)
    return updated


def remove_card(deck: Mapping[str, DeckEntry], card_id: str) -> dict[str, DeckEntry]:
    """Remove every copy of a card."""
    updated = dict(deck)
    updated.pop(card_id, None)
    return updated


def set_deck(
    entries: Sequence[DeckEntry],
    deck_name: str | None = None,
    current_name: str = DEFAULT_DECK_NAME,
) -> SetDeckResult:
    """
    Replace a deck wholesale, e.g. after an import.

    The whole deck is refused when `validate_entries` reports anything.
    Later entries for the same card id replace earlier ones. A blank
    `deck_name` keeps `current_name`.
    """
    issues = validate_entries(entries)
    if issues:
        logger.debug("Refused deck replacement: %s", " ".join(issues))
        return SetDeckResult(deck=None, deck_name=current_name, issues=tuple(issues))

    deck = {entry.card.id: DeckEntry(card=entry.card, count=entry.count) for entry in entries}
    name = deck_name.strip() if deck_name and deck_name.strip() else current_name
    return SetDeckResult(deck=deck, deck_name=name)
