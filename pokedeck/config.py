from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="POKEDECK_")

    app_name: str = "PokeDeck"
    debug: bool = False

    # Generated catalog bundle ({"generatedAt", "count", "cards"})
    card_library_path: str = "data/cards.json"


settings = Settings()


# =============================================================================
# DECK CONSTRUCTION LIMITS
# =============================================================================

# Name used when a deck has not been named
DEFAULT_DECK_NAME = "Untitled Deck"

# Standard deck size
MAX_DECK_SIZE = 60

# Copies allowed per card name (basic energy exempt)
MAX_CARD_COPIES = 4

# Regulation marks currently legal in Standard
STANDARD_REGULATION_MARKS: frozenset[str] = frozenset({"G", "H", "I"})
