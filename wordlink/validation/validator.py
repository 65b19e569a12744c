"""
Layered English word validation.

A word is checked against three tiers, stopping at the first that answers:
1. Local corpus built from the word banks (offline, always trusted)
2. In-memory cache of earlier remote answers
3. Remote dictionary lookup (a 2xx response means the word exists)

Validation is fail-closed: a lookup that errors or times out counts as an
invalid word and is never raised to the caller.
"""

import logging
from typing import Callable, Dict, Iterable, Mapping, Optional, Set
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

DICTIONARY_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/{word}"
MIN_WORD_LENGTH = 2

Lookup = Callable[[str], bool]


def dictionary_api_lookup(
    word: str,
    url_template: str = DICTIONARY_API_URL,
    timeout: Optional[float] = None
) -> bool:
    """
    Ask the remote dictionary whether `word` exists.

    Raises whatever `requests` raises; WordValidator turns that into False.
    """
    response = requests.get(url_template.format(word=quote(word)), timeout=timeout)
    return 200 <= response.status_code < 300


def offline_lookup(word: str) -> bool:
    """Lookup used when the network tier is disabled."""
    return False


class WordValidator:
    """
    Answers "is this a real English word?" for Word Link guesses.

    Args:
        word_banks: Mapping of word type -> words; every word joins the corpus
        lookup: Remote tier, called with the lowercased word
    """

    def __init__(
        self,
        word_banks: Optional[Mapping[str, Iterable[str]]] = None,
        lookup: Optional[Lookup] = None
    ):
        self._corpus: Set[str] = set()
        self._cache: Dict[str, bool] = {}
        self._lookup: Lookup = lookup or dictionary_api_lookup

        for words in (word_banks or {}).values():
            for word in words:
                self._corpus.add(word.lower())

    @property
    def corpus_size(self) -> int:
        return len(self._corpus)

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def in_corpus(self, word: str) -> bool:
        return word.lower() in self._corpus

    def is_valid(self, word: str) -> bool:
        """Return True if `word` is a valid English word. Never raises."""
        if not isinstance(word, str) or len(word) < MIN_WORD_LENGTH:
            return False

        normalized = word.lower()

        if normalized in self._corpus:
            return True

        if normalized in self._cache:
            return self._cache[normalized]

        try:
            valid = bool(self._lookup(normalized))
        except Exception as e:
            logger.warning("Dictionary lookup failed for '%s': %s", normalized, e)
            valid = False

        self._cache[normalized] = valid
        return valid

    def add_word(self, word: str) -> None:
        """Register newly earned vocabulary in the corpus. The cache is left alone."""
        if not word:
            return
        self._corpus.add(word.lower())

    def clear_cache(self) -> None:
        """Forget remote answers; the corpus stays intact."""
        self._cache.clear()
