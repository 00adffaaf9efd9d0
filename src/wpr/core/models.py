"""
Core data models for wpr.

This module contains the data structures shared across the selection engine:
filter rules, run settings, the query union and the rendered document.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()


# Reserved choice that ends the selection loop
DONE = "Done"

DEFAULT_BLACKLIST: List[str] = [
    '.git',
    'node_modules',
    '.DS_Store',
    '.idea',
    '.vscode',
    'package-lock.json',
    'package.json',
    'yarn.lock',
]


class FilterRules(BaseModel):
    """Whitelist/blacklist rules read from wpr.conf."""
    whitelist: List[str] = Field(default_factory=list)  # path prefixes
    blacklist: List[str] = Field(default_factory=list)  # substrings, always win

    @classmethod
    def defaults(cls) -> 'FilterRules':
        """Rules used when no wpr.conf is present."""
        return cls(whitelist=[], blacklist=list(DEFAULT_BLACKLIST))


@dataclass
class Settings:
    """Settings for a single wpr run."""

    cwd: str = field(default_factory=os.getcwd)
    output_dir_name: str = 'wpr'
    config_name: str = 'wpr.conf'
    link_path: str = field(default_factory=lambda: os.getenv('WPR_LINK_PATH', '/usr/local/bin/wpr'))
    theme: str = field(default_factory=lambda: os.getenv('WPR_THEME', 'manhattan'))

    enable_token_counting: bool = True
    token_encoder: str = "cl100k_base"

    # Fuzzy search permissiveness
    fuzzy_threshold: float = 0.4
    fuzzy_distance: int = 100

    @property
    def config_path(self) -> str:
        return os.path.join(self.cwd, self.config_name)

    @property
    def output_dir(self) -> str:
        return os.path.join(self.cwd, self.output_dir_name)


@dataclass(frozen=True)
class EmptyQuery:
    """No search text: show every candidate plus the Done sentinel."""


@dataclass(frozen=True)
class TextQuery:
    """Search text to run through the fuzzy index."""
    text: str


Query = Union[EmptyQuery, TextQuery]


def parse_query(raw: Optional[str]) -> Query:
    """Turn raw user input into a query. Blank input is an empty query."""
    if raw is None or not raw.strip():
        return EmptyQuery()
    return TextQuery(raw)


@dataclass
class DocumentEntry:
    """A selected file and its verbatim content."""
    path: str
    content: str


@dataclass
class Document:
    """The prompt together with the selected files, ready to render."""

    prompt: str
    entries: List[DocumentEntry] = field(default_factory=list)
    filename: str = "prompt.md"

    @property
    def paths(self) -> List[str]:
        return [entry.path for entry in self.entries]

    def render(self) -> str:
        """Render the document as Markdown."""
        parts = [f"# Prompt\n\n{self.prompt}\n\n---\n\n# Files:\n\n"]
        for entry in self.entries:
            parts.append(f"## {entry.path}\n\n```\n{entry.content}\n```\n\n")
        return "".join(parts)


@dataclass
class RunResult:
    """Outcome of an interactive run."""

    output_path: str
    selected_paths: List[str]
    total_tokens: int = 0

    @property
    def total_files(self) -> int:
        return len(self.selected_paths)
