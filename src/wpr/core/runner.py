"""Main run orchestrator."""
import logging
from typing import Optional

from .config import load_config
from .document import DocumentBuilder
from .fuzzy import FuzzyIndex
from .models import RunResult, Settings
from .scanner import TreeScanner
from .session import SelectionSession
from .tokenizer import TokenCounter
from ..ui.base import Responder
from ..utils.console import ConsoleManager

logger = logging.getLogger(__name__)

PROMPT_MESSAGE = 'Enter the prompt:'


class WprRunner:
    """Runs scan, selection and document assembly in order."""

    def __init__(self, settings: Settings, responder: Responder,
                 console: Optional[ConsoleManager] = None):
        self.settings = settings
        self.responder = responder
        self.console = console
        self.token_counter = TokenCounter(settings.token_encoder) if settings.enable_token_counting else None

    def _say(self, message: str) -> None:
        if self.console:
            self.console.print(f"[dim]{message}[/dim]")

    def run(self) -> RunResult:
        """
        Run one interactive session.

        Returns:
            RunResult describing the written document.

        Raises:
            ConfigParseError, ScanError, ReadError, WriteError: Any of these aborts the run.
        """
        settings = self.settings

        self._say("LOADING CONFIGURATION...")
        rules = load_config(settings.config_path)

        self._say("SCANNING FILES...")
        candidates = TreeScanner(rules).scan(settings.cwd)
        self._say(f"FOUND {len(candidates)} FILES")

        index = FuzzyIndex(candidates, threshold=settings.fuzzy_threshold,
                           distance=settings.fuzzy_distance)
        session = SelectionSession(candidates, index, self.responder)
        selection = session.run()
        logger.debug(f"Selection finished with {len(selection)} files")

        prompt = self.responder.ask(PROMPT_MESSAGE)

        builder = DocumentBuilder(settings.cwd, show_progress=self.console is not None)
        document = builder.build(prompt, selection)
        output_path = builder.write(document, settings.output_dir)

        total_tokens = 0
        if self.token_counter:
            total_tokens = self.token_counter.count(document.render())

        return RunResult(
            output_path=output_path,
            selected_paths=selection,
            total_tokens=total_tokens,
        )
