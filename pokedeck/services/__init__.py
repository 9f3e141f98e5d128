"""
PokeDeck services.

Deck text import/export and deck construction rules.
"""

from pokedeck.services.card_library import (
    get_card_library,
    load_card_library,
    parse_card_library,
)
from pokedeck.services.card_ordering import compare_cards_for_display, sort_deck_entries
from pokedeck.services.card_resolver import (
    DEFAULT_MATCHERS,
    CardResolver,
    import_deck_from_text,
    match_base_name,
    match_basic_energy,
    match_exact_name,
    match_set_and_number,
)
from pokedeck.services.deck_formatter import (
    DeckSection,
    format_deck_as_text,
    group_entries,
)
from pokedeck.services.deck_rules import (
    AddCheck,
    SetDeckResult,
    add_card,
    can_add_card,
    compute_deck_stats,
    decrement_card,
    increment_card,
    is_basic_energy,
    is_standard_card,
    remove_card,
    set_deck,
    validate_entries,
)

__all__ = [
    # Card catalog
    "get_card_library",
    "load_card_library",
    "parse_card_library",
    # Display ordering
    "compare_cards_for_display",
    "sort_deck_entries",
    # Import (tiered card matching)
    "DEFAULT_MATCHERS",
    "CardResolver",
    "import_deck_from_text",
    "match_base_name",
    "match_basic_energy",
    "match_exact_name",
    "match_set_and_number",
    # Export (output rendering)
    "DeckSection",
    "format_deck_as_text",
    "group_entries",
    # Deck rules
    "AddCheck",
    "SetDeckResult",
    "add_card",
    "can_add_card",
    "compute_deck_stats",
    "decrement_card",
    "increment_card",
    "is_basic_energy",
    "is_standard_card",
    "remove_card",
    "set_deck",
    "validate_entries",
]
