"""
Card Resolution Service.

Resolves parsed decklist lines to cards in the provided catalog.

INVARIANTS:
1. Resolution reads the catalog ONLY (no network, no mutation)
2. Match strategies are tried in a fixed order; first match wins
3. One unresolved or failing line never aborts the import
4. Lines resolving to the same card id consolidate to ONE entry (SUM counts)
5. Copy limits are NOT applied here (see deck_rules)
"""

import logging
import re
import unicodedata
from collections.abc import Callable, Sequence

from pokedeck.models.card import Card
from pokedeck.models.deck import DeckEntry, ImportResult
from pokedeck.parsers.deck_text import RawLine, parse_deck_text
from pokedeck.services.deck_rules import is_basic_energy

logger = logging.getLogger(__name__)

Matcher = Callable[[RawLine, Sequence[Card]], Card | None]

# "Fighting Energy", "Water Energy" -> element word
# Groups: (element)
ENERGY_NAME_PATTERN = re.compile(r"^([\w-]+)\s+energy", re.IGNORECASE)

# Mechanic suffixes dropped when comparing base names
SUFFIX_TAG_PATTERN = re.compile(r"\b(ex|vstar|vmax|v-union|v|gx)\b")

_WHITESPACE = re.compile(r"\s+")


# =============================================================================
# NAME NORMALIZATION
# =============================================================================


def normalize_name(value: str) -> str:
    """Trim, lowercase and strip diacritics ("Pokémon" -> "pokemon")."""
    decomposed = unicodedata.normalize("NFD", value.strip().lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def base_name(value: str) -> str:
    """Normalized name with suffix tags (ex, V, VMAX, ...) removed."""
    return SUFFIX_TAG_PATTERN.sub("", normalize_name(value)).strip()


def _collapse(value: str) -> str:
    return _WHITESPACE.sub(" ", value.strip().lower())


# =============================================================================
# MATCHERS
# =============================================================================


def match_set_and_number(line: RawLine, cards: Sequence[Card]) -> Card | None:
    """Match on set id or short set code plus printed number."""
    target_set = line.set_code.lower()
    target_number = line.card_number.strip().lower()

    for card in cards:
        set_matches = card.set.id.lower() == target_set or (
            card.set.ptcgo_code is not None and card.set.ptcgo_code.lower() == target_set
        )
        if set_matches and card.number.strip().lower() == target_number:
            return card
    return None


def match_basic_energy(line: RawLine, cards: Sequence[Card]) -> Card | None:
    """
    Match basic energy by name or by the element in "<Element> Energy".

    Decklists often carry placeholder set codes for basic energy, so the
    printing is chosen from the catalog instead.
    """
    match = ENERGY_NAME_PATTERN.match(line.name)
    energy_type = match.group(1).lower() if match else None
    target_name = _collapse(line.name)

    for card in cards:
        if not is_basic_energy(card):
            continue
        if _collapse(card.name) == target_name:
            return card
        if energy_type and energy_type in (t.lower() for t in card.types):
            return card
    return None


def match_exact_name(line: RawLine, cards: Sequence[Card]) -> Card | None:
    """Match on normalized name; loose containment as a fallback."""
    target = normalize_name(line.name)

    for card in cards:
        if normalize_name(card.name) == target:
            return card

    for card in cards:
        if target in normalize_name(card.name):
            return card
    return None


def match_base_name(line: RawLine, cards: Sequence[Card]) -> Card | None:
    """Match on names with suffix tags removed from both sides."""
    target = base_name(line.name)
    if not target:
        return None

    for card in cards:
        if base_name(card.name) == target:
            return card
    return None


# Order matters - first match wins
DEFAULT_MATCHERS: tuple[Matcher, ...] = (
    match_set_and_number,
    match_basic_energy,
    match_exact_name,
    match_base_name,
)


# =============================================================================
# RESOLVER
# =============================================================================


def _describe(line: RawLine) -> str:
    return f"{line.count}x {line.name} ({line.set_code} {line.card_number})"


class CardResolver:
    """
    Resolves RawLine -> Card using the supplied catalog.

    CONTRACT:
    - Input: parsed RawLine list (untrusted user text)
    - Output: consolidated DeckEntry list plus one error string per failed line
    - Never raises for line-level failures
    """

    def __init__(
        self,
        cards: Sequence[Card],
        matchers: Sequence[Matcher] = DEFAULT_MATCHERS,
    ) -> None:
        """
        Initialize resolver with a card catalog.

        Args:
            cards: Catalog cards, in the order ties should be broken
            matchers: Match strategies, tried in order
        """
        self._cards = cards
        self._matchers = tuple(matchers)

    def find_card(self, line: RawLine) -> Card | None:
        """Return the first card any matcher finds for this line."""
        for matcher in self._matchers:
            card = matcher(line, self._cards)
            if card is not None:
                return card
        return None

    def resolve_lines(self, lines: Sequence[RawLine]) -> tuple[list[DeckEntry], list[str]]:
        """
        Resolve parsed lines to consolidated deck entries.

        Args:
            lines: Parsed decklist lines in input order

        Returns:
            (entries in first-seen order, error strings in input order)
        """
        resolved: dict[str, tuple[Card, int]] = {}
        errors: list[str] = []

        for line in lines:
            try:
                card = self.find_card(line)
            except Exception as e:
                logger.warning("Failed to process %s", _describe(line), exc_info=True)
                errors.append(f"Failed to process {_describe(line)}: {e}")
                continue

            if card is None:
                logger.info("No match for %s", _describe(line))
                errors.append(f"No match for {_describe(line)}")
                continue

            # Consolidate by card id (SUM counts)
            if card.id in resolved:
                existing_card, existing_count = resolved[card.id]
                resolved[card.id] = (existing_card, existing_count + line.count)
            else:
                resolved[card.id] = (card, line.count)

        entries = [DeckEntry(card=card, count=count) for card, count in resolved.values()]
        return entries, errors


# =============================================================================
# PUBLIC API
# =============================================================================


def import_deck_from_text(text: str, cards: Sequence[Card]) -> ImportResult:
    """
    Parse decklist text and resolve every card line against the catalog.

    Args:
        text: Raw decklist text
        cards: Card catalog supplied by the caller

    Returns:
        ImportResult with resolved entries, per-line errors and deck name.
        An empty result is returned (not raised) when nothing resolves.
    """
    parsed = parse_deck_text(text)
    entries, errors = CardResolver(cards).resolve_lines(parsed.lines)

    logger.debug(
        "Imported %d entries from %d lines (%d errors)",
        len(entries),
        len(parsed.lines),
        len(errors),
    )

    return ImportResult(
        entries=tuple(entries),
        errors=tuple(errors),
        deck_name=parsed.deck_name,
    )
