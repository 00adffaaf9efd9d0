import pytest
from unittest.mock import patch, MagicMock
from wpr.core.tokenizer import TokenCounter


class TestTokenCounter:
    def test_encoder_is_loaded_lazily(self):
        with patch('wpr.core.tokenizer.tiktoken') as mock_tiktoken:
            counter = TokenCounter()
            mock_tiktoken.get_encoding.assert_not_called()

            assert counter.is_available is True
            mock_tiktoken.get_encoding.assert_called_once_with("cl100k_base")

    def test_custom_encoding(self):
        with patch('wpr.core.tokenizer.tiktoken') as mock_tiktoken:
            counter = TokenCounter("o200k_base")
            counter.is_available

            assert counter.encoding_name == "o200k_base"
            mock_tiktoken.get_encoding.assert_called_once_with("o200k_base")

    def test_count_with_encoder(self):
        with patch('wpr.core.tokenizer.tiktoken') as mock_tiktoken:
            mock_encoder = MagicMock()
            mock_encoder.encode.return_value = [1, 2, 3, 4, 5]
            mock_tiktoken.get_encoding.return_value = mock_encoder

            counter = TokenCounter()
            result = counter.count("test text")

            assert result == 5
            mock_encoder.encode.assert_called_once_with("test text", disallowed_special=())

    def test_encoder_failure_counts_zero(self):
        with patch('wpr.core.tokenizer.tiktoken') as mock_tiktoken:
            mock_tiktoken.get_encoding.side_effect = ValueError("no such encoding")

            counter = TokenCounter()

            assert counter.is_available is False
            assert counter.count("hello world") == 0
            mock_tiktoken.get_encoding.assert_called_once()

    def test_count_empty_string(self):
        with patch('wpr.core.tokenizer.tiktoken') as mock_tiktoken:
            counter = TokenCounter()

            assert counter.count("") == 0
            mock_tiktoken.get_encoding.assert_not_called()
