"""
Deck Text Formatter.

THIS MODULE HANDLES OUTPUT RENDERING ONLY.

Formats resolved deck entries as canonical decklist text. Entry order
within a section is the caller's order; sort first if needed
(see card_ordering.sort_deck_entries).

The output is readable by parse_deck_text:

    Deck: Charizard ex

    Pokemon: 4
    4 Charizard ex OBF 125

    Total Cards: 4/60
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from pokedeck.config import MAX_DECK_SIZE
from pokedeck.models.deck import DeckEntry


@dataclass
class DeckSection:
    """Entries sharing one supertype category."""

    label: str
    entries: list[DeckEntry] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(entry.count for entry in self.entries)


# Section order and supertype predicates
SECTION_ORDER: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("Pokemon", lambda supertype: supertype.lower().startswith("pok")),
    ("Trainer", lambda supertype: supertype.lower() == "trainer"),
    ("Energy", lambda supertype: supertype.lower() == "energy"),
)

FALLBACK_SECTION = "Other"


def get_set_identifier(entry: DeckEntry) -> str:
    """Short set code if known, else the catalog set id, uppercased."""
    code = entry.card.set.ptcgo_code or entry.card.set.id or "UNK"
    return code.upper()


def group_entries(entries: Sequence[DeckEntry]) -> list[DeckSection]:
    """
    Group entries into Pokemon, Trainer, Energy and Other sections.

    All four sections are returned, in that order, even when empty.
    """
    sections = [DeckSection(label=label) for label, _ in SECTION_ORDER]
    fallback = DeckSection(label=FALLBACK_SECTION)

    for entry in entries:
        for section, (_, matches) in zip(sections, SECTION_ORDER, strict=True):
            if matches(entry.card.supertype):
                section.entries.append(entry)
                break
        else:
            fallback.entries.append(entry)

    return [*sections, fallback]


def format_deck_as_text(deck_name: str, entries: Sequence[DeckEntry]) -> str:
    """
    Format deck entries as decklist text.

    Args:
        deck_name: Name written on the `Deck:` line
        entries: Deck entries, already in display order

    Returns:
        Decklist text with a header per non-empty section and a
        trailing `Total Cards` line
    """
    lines: list[str] = [f"Deck: {deck_name}", ""]

    for section in group_entries(entries):
        if not section.entries:
            continue
        lines.append(f"{section.label}: {section.total}")
        for entry in section.entries:
            lines.append(_format_entry_line(entry))
        lines.append("")

    total_cards = sum(entry.count for entry in entries)
    lines.append(f"Total Cards: {total_cards}/{MAX_DECK_SIZE}")

    return "\n".join(lines).strip()


def _format_entry_line(entry: DeckEntry) -> str:
    """Format a single card line."""
    return f"{entry.count} {entry.card.name} {get_set_identifier(entry)} {entry.card.number}"
