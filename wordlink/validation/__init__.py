"""English word validation."""

from .validator import (
    DICTIONARY_API_URL,
    MIN_WORD_LENGTH,
    Lookup,
    WordValidator,
    dictionary_api_lookup,
    offline_lookup,
)

__all__ = [
    "DICTIONARY_API_URL",
    "MIN_WORD_LENGTH",
    "Lookup",
    "WordValidator",
    "dictionary_api_lookup",
    "offline_lookup",
]
