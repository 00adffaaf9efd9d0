"""Core components for wpr."""

from .models import (
    DONE,
    DEFAULT_BLACKLIST,
    FilterRules,
    Settings,
    EmptyQuery,
    TextQuery,
    parse_query,
    Document,
    DocumentEntry,
    RunResult,
)
from .exceptions import WprError, ConfigParseError, ScanError, ReadError, WriteError, InstallError
from .tokenizer import TokenCounter

__all__ = [
    "DONE",
    "DEFAULT_BLACKLIST",
    "FilterRules",
    "Settings",
    "EmptyQuery",
    "TextQuery",
    "parse_query",
    "Document",
    "DocumentEntry",
    "RunResult",
    "WprError",
    "ConfigParseError",
    "ScanError",
    "ReadError",
    "WriteError",
    "InstallError",
    "TokenCounter",
]
