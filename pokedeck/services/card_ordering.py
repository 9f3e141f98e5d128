"""
Display ordering for deck entries.

Pokémon are grouped by evolution line (Charmander, Charmeleon, Charizard
sit together) and ordered by stage inside a line. Trainers go Supporter,
Item/Tool, Stadium. Energy goes Basic, Special.
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from functools import cmp_to_key

from pokedeck.models.card import Card
from pokedeck.models.deck import DeckEntry

POKEMON_LABEL = "Pokémon"

SUPERTYPE_ORDER: dict[str, int] = {
    POKEMON_LABEL: 0,
    "Trainer": 1,
    "Energy": 2,
}

STAGE_PRIORITY: dict[str, int] = {
    "Basic": 0,
    "Stage 1": 1,
    "Stage 2": 2,
    "Stage 3": 3,
    "Restored": 1,
    "BREAK": 2,
}

TRAINER_SUBTYPE_ORDER: dict[str, int] = {
    "Supporter": 0,
    "Item": 1,
    "Tool": 1,
    "Stadium": 2,
}

ENERGY_SUBTYPE_ORDER: dict[str, int] = {
    "Basic": 0,
    "Special": 1,
}


def build_pokemon_name_index(cards: Iterable[Card]) -> dict[str, Card]:
    """Map each Pokémon name to its first printing in the catalog."""
    index: dict[str, Card] = {}
    for card in cards:
        if card.supertype == POKEMON_LABEL and card.name not in index:
            index[card.name] = card
    return index


def _best_rank(card: Card, order: Mapping[str, int], default: int) -> int:
    ranks = [order.get(subtype, math.inf) for subtype in card.subtypes]
    best = min(ranks, default=math.inf)
    return int(best) if math.isfinite(best) else default


def _evolution_root(card: Card, name_index: Mapping[str, Card]) -> str:
    """Name of the earliest known Pokémon in this card's evolution line."""
    if card.supertype != POKEMON_LABEL:
        return card.name.lower()

    visited: set[str] = set()
    current = card

    while current.evolves_from and current.name not in visited:
        visited.add(current.name)
        parent = name_index.get(current.evolves_from)
        if parent is None:
            break
        current = parent

    return current.name.lower()


def _cmp(a: str | int, b: str | int) -> int:
    return (a > b) - (a < b)


def compare_cards_for_display(a: Card, b: Card, name_index: Mapping[str, Card]) -> int:
    """Three-way comparison of two cards for deck display."""
    order_a = SUPERTYPE_ORDER.get(a.supertype, 3)
    order_b = SUPERTYPE_ORDER.get(b.supertype, 3)
    if order_a != order_b:
        return order_a - order_b

    if a.supertype == POKEMON_LABEL and b.supertype == POKEMON_LABEL:
        root_a = _evolution_root(a, name_index)
        root_b = _evolution_root(b, name_index)
        if root_a != root_b:
            return _cmp(root_a, root_b)
        stage_diff = _best_rank(a, STAGE_PRIORITY, 0) - _best_rank(b, STAGE_PRIORITY, 0)
        if stage_diff:
            return stage_diff
    elif a.supertype == "Trainer" and b.supertype == "Trainer":
        fallback = TRAINER_SUBTYPE_ORDER["Stadium"] + 1
        rank_diff = _best_rank(a, TRAINER_SUBTYPE_ORDER, fallback) - _best_rank(
            b, TRAINER_SUBTYPE_ORDER, fallback
        )
        if rank_diff:
            return rank_diff
    elif a.supertype == "Energy" and b.supertype == "Energy":
        fallback = ENERGY_SUBTYPE_ORDER["Special"] + 1
        rank_diff = _best_rank(a, ENERGY_SUBTYPE_ORDER, fallback) - _best_rank(
            b, ENERGY_SUBTYPE_ORDER, fallback
        )
        if rank_diff:
            return rank_diff

    return _cmp(a.name.lower(), b.name.lower())


def sort_deck_entries(
    entries: Sequence[DeckEntry], catalog: Iterable[Card] | None = None
) -> list[DeckEntry]:
    """
    Sort deck entries for display or export.

    Args:
        entries: Deck entries in any order
        catalog: Cards used to walk evolution lines. Defaults to the deck's
            own cards, which is enough when every stage is in the deck.

    Returns:
        New list in display order (stable for equal cards)
    """
    cards = catalog if catalog is not None else (entry.card for entry in entries)
    name_index = build_pokemon_name_index(cards)
    key = cmp_to_key(lambda a, b: compare_cards_for_display(a.card, b.card, name_index))
    return sorted(entries, key=key)
