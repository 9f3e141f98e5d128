"""
Parser for plain-text Pokémon TCG decklists.

Common export format:
    <count> <card name> <set code> <card number>

Example:
    Pokémon: 12
    4 Charizard ex OBF 125
    4x Rare Candy SVI 191

    Energy: 8
    8 Fire Energy SVE 2

Header lines (`Pokémon: 12`, `Total Cards: 60`), comments and bracketed
annotations are ignored. Lines that cannot be read as a card line are
dropped silently; they are indistinguishable from section headers.
"""

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

# Lines beginning with these are comments
COMMENT_PREFIXES = ("#", "//", "*")

# "4x Name SET 1" or "4 x Name SET 1"
# Groups: (count, rest)
COUNT_X_PATTERN = re.compile(r"^(\d+)\s*x\s+(.*)$", re.IGNORECASE)

# "Deck: Charizard Control" or "Title - Lost Box"
# Groups: (deck_name)
DECK_NAME_PATTERN = re.compile(
    r"^(?:deck|title)[ \t]*[:\-][ \t]*(.+)$",
    re.IGNORECASE | re.MULTILINE,
)

# ASCII digits with an optional all-zero fraction ("4", "4.0")
COUNT_PATTERN = re.compile(r"(\d+)(?:\.0*)?", re.ASCII)

LINE_BREAK_PATTERN = re.compile(r"\r?\n")

# count + name (at least one token) + set code + card number
MIN_TOKENS = 4


@dataclass(frozen=True, slots=True)
class RawLine:
    """
    One card line read from decklist text. Not yet resolved.

    Attributes:
        count: Copies requested on this line
        name: Card name as written (may be multi-word)
        set_code: Set identifier as written (e.g., "OBF")
        card_number: Printed card number as written (e.g., "125", "TG05")
    """

    count: int
    name: str
    set_code: str
    card_number: str


@dataclass
class ParsedDeckText:
    """Card lines and optional deck name extracted from decklist text."""

    lines: list[RawLine] = field(default_factory=list)
    deck_name: str | None = None


def normalize_line(raw_line: str) -> str:
    """Replace non-breaking spaces and trim surrounding whitespace."""
    return raw_line.replace("\u00a0", " ").strip()


def extract_deck_name(text: str) -> str | None:
    """Find the first non-blank `Deck:` or `Title:` line in the text."""
    for match in DECK_NAME_PATTERN.finditer(text):
        name = match.group(1).strip()
        if name:
            return name
    return None


def _parse_count(token: str) -> int | None:
    """Read a positive whole-number count."""
    match = COUNT_PATTERN.fullmatch(token)
    if match is None:
        return None
    value = int(match.group(1))
    return value if value > 0 else None


def parse_line(line: str) -> RawLine | None:
    """
    Parse a single decklist line.

    Returns None for blank lines, comments, bracketed annotations,
    headers and anything else that is not a card line.
    """
    sanitized = normalize_line(line)

    if not sanitized:
        return None

    if sanitized.startswith(COMMENT_PREFIXES):
        return None

    if sanitized.startswith("[") and sanitized.endswith("]"):
        return None

    # "4x Pikachu VIV 44" -> "4 Pikachu VIV 44" (rewritten once)
    match = COUNT_X_PATTERN.match(sanitized)
    if match:
        count_token, rest = match.groups()
        sanitized = f"{count_token} {rest}"

    tokens = sanitized.split()
    if len(tokens) < MIN_TOKENS:
        return None

    count = _parse_count(tokens[0])
    if count is None:
        return None

    return RawLine(
        count=count,
        name=" ".join(tokens[1:-2]),
        set_code=tokens[-2],
        card_number=tokens[-1],
    )


def parse_deck_text(text: str) -> ParsedDeckText:
    """
    Parse decklist text into card lines.

    Args:
        text: Raw decklist text (clipboard paste, file contents)

    Returns:
        ParsedDeckText with card lines in input order and the deck name,
        if the text declares one.
    """
    parsed = ParsedDeckText(deck_name=extract_deck_name(text))

    for line in LINE_BREAK_PATTERN.split(text):
        raw_line = parse_line(line)
        if raw_line is None:
            if line.strip():
                logger.debug("Skipping non-card line: %r", line)
            continue
        parsed.lines.append(raw_line)

    return parsed
