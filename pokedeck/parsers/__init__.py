from pokedeck.parsers.deck_text import (
    ParsedDeckText,
    RawLine,
    extract_deck_name,
    parse_deck_text,
    parse_line,
)

__all__ = [
    "ParsedDeckText",
    "RawLine",
    "extract_deck_name",
    "parse_deck_text",
    "parse_line",
]
