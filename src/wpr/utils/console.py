"""Console output with theme support.

All user-facing output of wpr goes through :class:`ConsoleManager`, which
wraps a Rich console configured from one of the retro terminal themes.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Any

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success", "green")
    ERROR = ("[x]", "error", "red")
    WARNING = ("[!]", "warning", "yellow")
    INFO = ("[!]", "info", "cyan")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    panel_border: str
    header: str
    prompt: str
    path: str
    number: str
    dim: str
    interactive: str       # For interactive prompts and selections
    selection_active: str  # For already selected items
    token_count: str


# Retro terminal themes
THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        panel_border='bright_cyan',
        header='bold bright_cyan on black',
        prompt='bright_cyan',
        path='white',
        number='bright_blue',
        dim='bright_black',
        interactive='bold bright_cyan',
        selection_active='bold bright_white on blue',
        token_count='bright_blue',
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        highlight='bold green',
        panel_border='green',
        header='bold green on black',
        prompt='bright_green',
        path='bright_green',
        number='green',
        dim='green',
        interactive='bold bright_green',
        selection_active='bold black on green',
        token_count='bright_white',
    ),
    'matrix': ThemeColors(
        info='bright_green',
        warning='yellow',
        error='red',
        success='green',
        highlight='bold bright_green',
        panel_border='green',
        header='bold bright_green on black',
        prompt='bright_green',
        path='green',
        number='bright_green',
        dim='green',
        interactive='bold bright_green',
        selection_active='bold black on bright_green',
        token_count='bright_white',
    ),
    'sunset': ThemeColors(
        info='orange3',
        warning='yellow',
        error='red3',
        success='green',
        highlight='bold orange1',
        panel_border='orange3',
        header='bold orange1 on black',
        prompt='orange1',
        path='wheat1',
        number='orange1',
        dim='grey50',
        interactive='bold bright_cyan',
        selection_active='bold black on orange1',
        token_count='orange1',
    ),
}


class ConsoleManager:
    """Themed console for status lines, headers and prompts."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_plain: bool = False):
        """Initialize console manager.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
            force_plain: Disable colors even on a color terminal
        """
        self.theme_name = theme if theme in THEMES else 'manhattan'
        self.theme_colors = THEMES[self.theme_name]
        self.file = file or sys.stdout

        no_color = force_plain or bool(os.environ.get('NO_COLOR'))
        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            no_color=no_color,
            highlight=False,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        colors = self.theme_colors
        return Theme({
            'info': colors.info,
            'warning': colors.warning,
            'error': colors.error,
            'success': colors.success,
            'highlight': colors.highlight,
            'panel.border': colors.panel_border,
            'header': colors.header,
            'prompt': colors.prompt,
            'path': colors.path,
            'number': colors.number,
            'dim': colors.dim,
            'interactive': colors.interactive,
            'selection_active': colors.selection_active,
            'token_count': colors.token_count,
        })

    def print(self, *args, **kwargs):
        """Print with Rich markup."""
        self.console.print(*args, **kwargs)

    def print_header(self, title: str, subtitle: Optional[str] = None, width: int = 60):
        """Print a section header panel."""
        header_text = Text(title.center(width - 4), style="header")
        if subtitle:
            header_text.append("\n" + subtitle.center(width - 4), style="dim")
        self.console.print(Panel(header_text, width=width, style="panel.border"))

    def print_status(self, status: StatusType, message: str,
                     details: Optional[str] = None):
        """Print a status line with icon and optional details."""
        icon, _, color = status.value
        status_text = Text()
        status_text.append(f"{icon} ", style=color)
        status_text.append(message)
        if details:
            status_text.append(f" - {details}", style="dim")
        self.console.print(status_text)

    def print_error(self, message: str, details: Optional[str] = None):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message, details)

    def print_success(self, message: str):
        """Print a success message."""
        self.print_status(StatusType.SUCCESS, message)

    def print_info(self, message: str):
        """Print an info message."""
        self.print_status(StatusType.INFO, message)

    def print_warning(self, message: str):
        """Print a warning message."""
        self.print_status(StatusType.WARNING, message)

    def print_separator(self, char: str = "═", width: int = 60):
        """Print a separator line."""
        self.console.print(char * width, style="dim")

    def print_exception(self):
        """Print the current exception traceback."""
        self.console.print_exception()
