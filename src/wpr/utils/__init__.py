"""Utility modules for wpr."""

from .file_filter import PathFilter, is_eligible
from .encodings import EncodingDetector
from .console import ConsoleManager, StatusType

__all__ = ["PathFilter", "is_eligible", "EncodingDetector", "ConsoleManager", "StatusType"]
