"""Tests for chunk length functions."""

from unittest.mock import MagicMock, patch

import pytest

from mdsplit.lib import tokenization
from mdsplit.lib.errors import ConfigError
from mdsplit.lib.tokenization import get_length_function, token_length
from mdsplit.models.config import LengthUnit


@pytest.fixture(autouse=True)
def clear_encoding_cache():
    """Keep mocked encodings out of the shared cache."""
    tokenization._get_encoding.cache_clear()
    yield
    tokenization._get_encoding.cache_clear()


@pytest.mark.unit
class TestGetLengthFunction:
    """Tests for get_length_function()."""

    def test_chars_is_len(self) -> None:
        """Test that character counting uses len."""
        assert get_length_function(LengthUnit.chars) is len

    def test_accepts_plain_string(self) -> None:
        """Test that the unit may be given as a string."""
        assert get_length_function("chars") is len

    def test_unknown_unit(self) -> None:
        """Test that an unknown unit is a configuration error."""
        with pytest.raises(ConfigError) as exc_info:
            get_length_function("words")
        assert exc_info.value.field == "length_unit"

    def test_tokens_uses_tiktoken(self) -> None:
        """Test that token counting goes through the named encoding."""
        encoding = MagicMock()
        encoding.encode.return_value = [1, 2, 3]

        with patch(
            "mdsplit.lib.tokenization.tiktoken.get_encoding", return_value=encoding
        ) as mock_get:
            length = get_length_function(LengthUnit.tokens, "p50k_base")

            assert length("three token text") == 3
            mock_get.assert_called_once_with("p50k_base")


@pytest.mark.unit
class TestTokenLength:
    """Tests for token_length()."""

    def test_empty_text_is_zero(self) -> None:
        """Test that empty text is not sent to the encoder."""
        encoding = MagicMock()
        with patch(
            "mdsplit.lib.tokenization.tiktoken.get_encoding", return_value=encoding
        ):
            assert token_length()("") == 0
        encoding.encode.assert_not_called()

    def test_encoding_loaded_once(self) -> None:
        """Test that encodings are cached by name."""
        encoding = MagicMock()
        with patch(
            "mdsplit.lib.tokenization.tiktoken.get_encoding", return_value=encoding
        ) as mock_get:
            token_length("cl100k_base")
            token_length("cl100k_base")
        mock_get.assert_called_once()

    def test_unknown_encoding(self) -> None:
        """Test that an unknown encoding name is a configuration error."""
        with patch(
            "mdsplit.lib.tokenization.tiktoken.get_encoding",
            side_effect=ValueError("Unknown encoding nope"),
        ):
            with pytest.raises(ConfigError) as exc_info:
                token_length("nope")
        assert exc_info.value.field == "encoding_name"
