from unittest.mock import Mock, patch

import pytest
import requests

from wordlink.data import WORD_BANKS
from wordlink.validation import (
    DICTIONARY_API_URL,
    WordValidator,
    dictionary_api_lookup,
    offline_lookup,
)


def create_mock_response(status_code: int = 200) -> Mock:
    """Create a mock matching the parts of requests.Response the lookup reads."""
    return Mock(status_code=status_code, ok=200 <= status_code < 300)


class TestCorpusTier:
    """Words from the banks are valid without touching the network."""

    def test_bank_word_valid(self):
        """Corpus words stay valid even when the remote tier is down."""
        lookup = Mock(side_effect=requests.ConnectionError("offline"))
        validator = WordValidator(WORD_BANKS, lookup=lookup)

        assert validator.is_valid("llama") is True
        lookup.assert_not_called()

    def test_case_folding(self):
        lookup = Mock(return_value=False)
        validator = WordValidator(WORD_BANKS, lookup=lookup)

        assert validator.is_valid("LLaMa") is True
        assert validator.in_corpus("PIZZA")
        lookup.assert_not_called()

    def test_corpus_size(self):
        validator = WordValidator({"noun": ["Cat", "cat", "dog"]})
        assert validator.corpus_size == 2

    def test_add_word(self):
        lookup = Mock(return_value=False)
        validator = WordValidator(lookup=lookup)

        validator.add_word("Banana")

        assert validator.is_valid("banana") is True
        assert validator.cache_size == 0
        lookup.assert_not_called()


class TestRemoteTier:
    """Words outside the corpus go to the lookup, once."""

    def test_lookup_called_lowercased(self):
        lookup = Mock(return_value=True)
        validator = WordValidator(lookup=lookup)

        assert validator.is_valid("HeLLo") is True
        lookup.assert_called_once_with("hello")

    def test_success_cached(self):
        lookup = Mock(return_value=True)
        validator = WordValidator(lookup=lookup)

        assert validator.is_valid("hello") is True
        assert validator.is_valid("Hello") is True
        assert lookup.call_count == 1

    def test_failure_cached(self):
        lookup = Mock(return_value=False)
        validator = WordValidator(lookup=lookup)

        assert validator.is_valid("xyzzyqqq") is False
        assert validator.is_valid("xyzzyqqq") is False
        assert lookup.call_count == 1

    def test_lookup_error_is_invalid(self):
        """A failing lookup never raises to the caller."""
        lookup = Mock(side_effect=requests.ConnectionError("offline"))
        validator = WordValidator(lookup=lookup)

        assert validator.is_valid("hello") is False

    def test_timeout_is_invalid(self):
        lookup = Mock(side_effect=requests.Timeout("slow"))
        validator = WordValidator(lookup=lookup)

        assert validator.is_valid("hello") is False
        assert validator.cache_size == 1

    def test_clear_cache_keeps_corpus(self):
        lookup = Mock(return_value=True)
        validator = WordValidator({"noun": ["robot"]}, lookup=lookup)
        validator.is_valid("hello")

        validator.clear_cache()

        assert validator.cache_size == 0
        assert validator.in_corpus("robot")
        validator.is_valid("hello")
        assert lookup.call_count == 2


class TestRejectedInput:
    """Input that never reaches any tier."""

    @pytest.mark.parametrize("word", ["", "a", None, 42])
    def test_rejected(self, word):
        lookup = Mock(return_value=True)
        validator = WordValidator(lookup=lookup)

        assert validator.is_valid(word) is False
        lookup.assert_not_called()

    def test_offline_lookup(self):
        validator = WordValidator(WORD_BANKS, lookup=offline_lookup)
        assert validator.is_valid("hello") is False
        assert validator.is_valid("taco") is True


class TestDictionaryApiLookup:
    """The dictionaryapi.dev lookup."""

    @patch("wordlink.validation.validator.requests.get")
    def test_found(self, mock_get):
        mock_get.return_value = create_mock_response(200)

        assert dictionary_api_lookup("hello") is True
        mock_get.assert_called_once_with(DICTIONARY_API_URL.format(word="hello"), timeout=None)

    @patch("wordlink.validation.validator.requests.get")
    def test_not_found(self, mock_get):
        mock_get.return_value = create_mock_response(404)
        assert dictionary_api_lookup("xyzzyqqq") is False

    @patch("wordlink.validation.validator.requests.get")
    def test_custom_url_and_timeout(self, mock_get):
        mock_get.return_value = create_mock_response(200)

        dictionary_api_lookup("hello", url_template="http://dict.test/{word}", timeout=2.5)

        mock_get.assert_called_once_with("http://dict.test/hello", timeout=2.5)

    @patch("wordlink.validation.validator.requests.get")
    def test_default_validator_uses_api(self, mock_get):
        """Garbage outside the corpus is rejected by the remote tier."""
        mock_get.return_value = create_mock_response(404)
        validator = WordValidator(WORD_BANKS)

        assert validator.is_valid("xyzzyqqq") is False
        assert mock_get.call_count == 1

    @patch("wordlink.validation.validator.requests.get")
    def test_network_error_through_validator(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("no route")
        validator = WordValidator()

        assert validator.is_valid("hello") is False
