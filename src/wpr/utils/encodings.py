"""
Encoding detection and handling utilities.

Selected files are embedded verbatim, so decoding never strips anything:
a UTF-8 byte order mark stays in the text as U+FEFF and encodes back to the
same bytes.
"""

import logging
from typing import Optional, List, Tuple


# Encodings to try, ordered by likelihood. latin-1 accepts any byte sequence.
DEFAULT_ENCODINGS = [
    'utf-8',
    'cp1252',     # Windows-1252
    'latin-1',
]

# Set up module logger
logger = logging.getLogger(__name__)


class EncodingDetector:
    """Handles encoding detection and text decoding."""

    def __init__(self, fallback_encodings: Optional[List[str]] = None):
        """
        Initialize the encoding detector.

        Args:
            fallback_encodings: List of encodings to try. If None, uses defaults.
        """
        self.encodings = fallback_encodings or DEFAULT_ENCODINGS

    def decode_bytes(self, content: bytes, file_path: Optional[str] = None) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        """
        Attempt to decode bytes to string using multiple encodings.

        Args:
            content: Raw bytes to decode.
            file_path: Optional file path for better error messages.

        Returns:
            Tuple of (decoded_text, encoding_used, error_message).
            If successful: (text, encoding, None)
            If failed: (None, None, error_message)
        """
        # UTF-16/32 files announce themselves with a BOM
        has_bom, bom_encoding = self.has_bom(content)
        if has_bom:
            try:
                decoded = content.decode(bom_encoding)
                logger.debug(f"Decoded {file_path} using BOM-detected {bom_encoding}")
                return decoded, bom_encoding, None
            except UnicodeDecodeError as e:
                logger.debug(f"BOM decode failed for {file_path}: {e}")

        last_error = None
        for encoding in self.encodings:
            try:
                decoded = content.decode(encoding)
                logger.debug(f"Decoded {file_path} using {encoding}")
                return decoded, encoding, None
            except UnicodeDecodeError as e:
                last_error = e
                continue
            except LookupError as e:
                logger.warning(f"Unknown encoding {encoding} for {file_path}")
                last_error = e
                continue

        error_msg = f"Unable to decode file with available encodings ({', '.join(self.encodings[:3])})"
        if last_error and hasattr(last_error, 'start'):
            error_msg += f" - failed at byte {last_error.start}"

        logger.info(f"Encoding detection failed for {file_path}: tried {len(self.encodings)} encodings")
        return None, None, error_msg

    def has_bom(self, content: bytes) -> Tuple[bool, Optional[str]]:
        """
        Check if content starts with a UTF-16 or UTF-32 Byte Order Mark.

        The UTF-32 marks are checked first since the UTF-16 LE mark is a
        prefix of the UTF-32 LE one. The codecs named here keep the mark in
        the decoded text.

        Returns:
            Tuple of (has_bom, encoding_name).
        """
        bom_checks = [
            (b'\xff\xfe\x00\x00', 'utf-32-le'),
            (b'\x00\x00\xfe\xff', 'utf-32-be'),
            (b'\xff\xfe', 'utf-16-le'),
            (b'\xfe\xff', 'utf-16-be'),
        ]

        for bom, encoding in bom_checks:
            if content.startswith(bom):
                return True, encoding

        return False, None
