import pytest

from pokedeck.models.card import Card, CardSet

OBF = CardSet(id="sv3", ptcgo_code="OBF", name="Obsidian Flames")
SVI = CardSet(id="sv1", ptcgo_code="SVI", name="Scarlet & Violet")
PAL = CardSet(id="sv2", ptcgo_code="PAL", name="Paldea Evolved")
SVE = CardSet(id="sve", ptcgo_code="SVE", name="Scarlet & Violet Energies")
VIV = CardSet(id="swsh4", ptcgo_code="VIV", name="Vivid Voltage")


@pytest.fixture
def charizard_ex() -> Card:
    return Card(
        id="sv3-125",
        name="Charizard ex",
        supertype="Pokémon",
        number="125",
        set=OBF,
        subtypes=("Stage 2", "ex"),
        types=("Darkness",),
        regulation_mark="G",
        evolves_from="Charmeleon",
    )


@pytest.fixture
def charmander() -> Card:
    return Card(
        id="sv3-26",
        name="Charmander",
        supertype="Pokémon",
        number="26",
        set=OBF,
        subtypes=("Basic",),
        types=("Fire",),
        regulation_mark="G",
    )


@pytest.fixture
def charmeleon() -> Card:
    return Card(
        id="sv3-27",
        name="Charmeleon",
        supertype="Pokémon",
        number="27",
        set=OBF,
        subtypes=("Stage 1",),
        types=("Fire",),
        regulation_mark="G",
        evolves_from="Charmander",
    )


@pytest.fixture
def pikachu() -> Card:
    return Card(
        id="swsh4-43",
        name="Pikachu",
        supertype="Pokémon",
        number="43",
        set=VIV,
        subtypes=("Basic",),
        types=("Lightning",),
        regulation_mark="D",
        legalities=(("unlimited", "Legal"), ("expanded", "Legal")),
    )


@pytest.fixture
def rare_candy() -> Card:
    return Card(
        id="sv1-191",
        name="Rare Candy",
        supertype="Trainer",
        number="191",
        set=SVI,
        subtypes=("Item",),
        regulation_mark="G",
    )


@pytest.fixture
def professors_research() -> Card:
    return Card(
        id="sv1-189",
        name="Professor's Research",
        supertype="Trainer",
        number="189",
        set=SVI,
        subtypes=("Supporter",),
        regulation_mark="G",
    )


@pytest.fixture
def pokegear() -> Card:
    return Card(
        id="sv1-186",
        name="Pokégear 3.0",
        supertype="Trainer",
        number="186",
        set=SVI,
        subtypes=("Item",),
        regulation_mark="G",
    )


@pytest.fixture
def fire_energy() -> Card:
    return Card(
        id="sve-2",
        name="Basic Fire Energy",
        supertype="Energy",
        number="2",
        set=SVE,
        subtypes=("Basic",),
        types=("Fire",),
        legalities=(("standard", "Legal"),),
    )


@pytest.fixture
def jet_energy() -> Card:
    return Card(
        id="sv2-190",
        name="Jet Energy",
        supertype="Energy",
        number="190",
        set=PAL,
        subtypes=("Special",),
        regulation_mark="G",
    )


@pytest.fixture
def catalog(
    charizard_ex: Card,
    charmander: Card,
    charmeleon: Card,
    pikachu: Card,
    rare_candy: Card,
    professors_research: Card,
    pokegear: Card,
    fire_energy: Card,
    jet_energy: Card,
) -> list[Card]:
    """Small card catalog covering every supertype and matcher tier."""
    return [
        charizard_ex,
        charmander,
        charmeleon,
        pikachu,
        rare_candy,
        professors_research,
        pokegear,
        fire_energy,
        jet_energy,
    ]


@pytest.fixture
def sample_decklist() -> str:
    """Decklist text in the common export dialect."""
    return """Deck: Charizard Control

Pokémon: 7
4 Charmander OBF 26
3 Charizard ex OBF 125

Trainer: 8
4 Professor's Research SVI 189
4x Rare Candy SVI 191

Energy: 10
10 Basic Fire Energy SVE 2

Total Cards: 25"""
