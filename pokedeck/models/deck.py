from dataclasses import dataclass

from pokedeck.models.card import Card


@dataclass(frozen=True, slots=True)
class DeckEntry:
    """
    A catalog card paired with a copy count.

    Attributes:
        card: The resolved catalog card
        count: Copies of this exact printing in the deck
    """

    card: Card
    count: int


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Result of importing decklist text against a card catalog."""

    entries: tuple[DeckEntry, ...]
    """One entry per distinct card id, in first-seen order."""

    errors: tuple[str, ...]
    """Human-readable message per line that could not be resolved."""

    deck_name: str | None = None
    """Deck name found in a `Deck:` or `Title:` line, if any."""

    @property
    def total_cards(self) -> int:
        """Sum of counts across all entries."""
        return sum(entry.count for entry in self.entries)


@dataclass(frozen=True, slots=True)
class DeckStats:
    """Summary counts for a deck."""

    total: int
    remaining: int
    counts_by_supertype: dict[str, int]
    standard_legal: bool
