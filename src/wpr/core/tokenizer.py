"""
Token counting for the generated document.

Uses tiktoken so the user can see how much of a model's context window the
document will take.
"""

import logging
from typing import Optional, Any

import tiktoken

logger = logging.getLogger(__name__)


class TokenCounter:
    """
    Counts tokens in text.

    The encoder is loaded lazily on first use; if it cannot be loaded
    (tiktoken fetches encodings on first use), counting reports 0.
    """

    def __init__(self, encoding_name: str = "cl100k_base"):
        """
        Initialize the token counter.

        Args:
            encoding_name: The name of the tiktoken encoding to use.
        """
        self.encoding_name = encoding_name
        self.encoder: Optional[Any] = None
        self._loaded = False

    def _load(self) -> None:
        self._loaded = True
        try:
            self.encoder = tiktoken.get_encoding(self.encoding_name)
        except Exception as e:
            logger.warning(f"Failed to initialize token encoder '{self.encoding_name}': {e}")

    @property
    def is_available(self) -> bool:
        """Check if token counting is available."""
        if not self._loaded:
            self._load()
        return self.encoder is not None

    def count(self, text: str) -> int:
        """
        Count tokens in the given text.

        Returns:
            Number of tokens, or 0 if counting is unavailable.
        """
        if not text or not self.is_available:
            return 0
        return len(self.encoder.encode(text, disallowed_special=()))
