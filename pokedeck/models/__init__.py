from pokedeck.models.card import Card, CardSet
from pokedeck.models.deck import DeckEntry, DeckStats, ImportResult
from pokedeck.models.failure import (
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    ApiResponse,
    CardLibraryUnavailableError,
    CardNotFoundError,
    EmptyImportError,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    create_known_failure,
    create_success,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)

__all__ = [
    "Card",
    "CardSet",
    "DeckEntry",
    "DeckStats",
    "ImportResult",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "ApiResponse",
    "CardLibraryUnavailableError",
    "CardNotFoundError",
    "EmptyImportError",
    "FailureDetail",
    "FailureKind",
    "KnownError",
    "OutcomeType",
    "create_known_failure",
    "create_success",
    "create_unknown_failure",
    "finalize_response",
    "is_finalized",
]
