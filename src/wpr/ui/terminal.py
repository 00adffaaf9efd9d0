"""Terminal responder built on Rich prompts."""
import logging
from typing import Optional, Sequence

from rich.markup import escape
from rich.prompt import Confirm, Prompt

from .base import Responder
from ..utils.console import ConsoleManager

logger = logging.getLogger(__name__)


class TerminalResponder(Responder):
    """
    Asks questions on the terminal.

    Choices are shown as a numbered list; the user answers with a number or
    an exact label. A blank answer picks nothing.
    """

    def __init__(self, console: ConsoleManager, page_size: int = 20):
        self.console = console
        self.page_size = page_size

    def ask(self, message: str) -> str:
        return Prompt.ask(f"[prompt]{message}[/prompt]", console=self.console.console,
                          default="", show_default=False)

    def confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(f"[prompt]{message}[/prompt]", console=self.console.console,
                           default=default)

    def render_options(self, options: Sequence[str]) -> None:
        """Print the first page of options."""
        shown = options[:self.page_size]
        for i, option in enumerate(shown, start=1):
            self.console.print(f"  [number]{i:3d}.[/number] [path]{escape(option)}[/path]")
        hidden = len(options) - len(shown)
        if hidden > 0:
            self.console.print(f"  [dim]... +{hidden} more (refine the search, or enter a number up to {len(options)})[/dim]")

    def parse_choice(self, answer: str, options: Sequence[str]) -> Optional[str]:
        """
        Map an answer to one of the options.

        Returns:
            The matching option, or None if the answer matches nothing.
        """
        answer = answer.strip()
        if answer.isdigit():
            index = int(answer)
            if 1 <= index <= len(options):
                return options[index - 1]
            return None
        if answer in options:
            return answer
        return None

    def choose(self, message: str, options: Sequence[str]) -> Optional[str]:
        if not options:
            self.console.print_warning("No matching files")
            return None

        self.console.print(f"\n[interactive]{message}[/interactive]")
        self.render_options(options)

        while True:
            answer = Prompt.ask("[prompt][?] Your choice[/prompt]", console=self.console.console,
                                default="", show_default=False)
            if not answer.strip():
                return None
            choice = self.parse_choice(answer, options)
            if choice is not None:
                return choice
            logger.debug(f"Rejected answer {answer!r} for {len(options)} options")
            self.console.print_warning("Invalid input. Please try again.")
