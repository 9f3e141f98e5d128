"""
Card catalog models.

The catalog is owned by the surrounding application. These models are
read-only views over the generated card bundle.

INVARIANTS:
- Card ids are unique within a catalog
- All models are frozen (immutable after construction)
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CardSet:
    """
    The expansion a card was printed in.

    Attributes:
        id: Catalog set id (e.g., "sv3")
        ptcgo_code: Short code used by decklists (e.g., "OBF"), if any
        name: Display name of the set
    """

    id: str
    ptcgo_code: str | None = None
    name: str = ""


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single printing from the card catalog.

    Attributes:
        id: Unique catalog id (e.g., "sv3-125")
        name: Printed card name
        supertype: Top-level category (Pokémon, Trainer, Energy)
        subtypes: Subtypes such as "Basic", "Stage 1", "Supporter"
        types: Energy types (e.g., "Fire")
        number: Printed collector number within the set
        set: The set this printing belongs to
        regulation_mark: Regulation letter printed on the card, if any
        evolves_from: Name of the Pokémon this card evolves from
        legalities: (format, status) pairs, e.g. ("standard", "Legal")
    """

    id: str
    name: str
    supertype: str
    number: str
    set: CardSet
    subtypes: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    regulation_mark: str | None = None
    evolves_from: str | None = None
    legalities: tuple[tuple[str, str], ...] = ()

    def legality(self, format_name: str) -> str | None:
        """Legality status in a format (case-insensitive), if listed."""
        target = format_name.lower()
        for name, status in self.legalities:
            if name.lower() == target:
                return status
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Card":
        """Build a Card from a catalog JSON record (camelCase keys)."""
        set_data = data.get("set") or {}
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            supertype=str(data.get("supertype", "")),
            number=str(data.get("number", "")),
            set=CardSet(
                id=str(set_data.get("id", "")),
                ptcgo_code=set_data.get("ptcgoCode"),
                name=str(set_data.get("name", "")),
            ),
            subtypes=tuple(data.get("subtypes") or ()),
            types=tuple(data.get("types") or ()),
            regulation_mark=data.get("regulationMark"),
            evolves_from=data.get("evolvesFrom"),
            legalities=tuple(
                (str(name), str(status))
                for name, status in (data.get("legalities") or {}).items()
            ),
        )
