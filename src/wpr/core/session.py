"""Interactive selection loop."""
import logging
from enum import Enum
from typing import List, Sequence

from .fuzzy import FuzzyIndex
from .models import DONE, EmptyQuery, Query, TextQuery, parse_query
from ..ui.base import Responder

logger = logging.getLogger(__name__)

SEARCH_MESSAGE = 'Search files (leave empty to list all):'
SELECT_MESSAGE = 'Select a file to include or select "Done" to finish:'


class SessionState(Enum):
    """States of a selection session."""
    SELECTING = "selecting"
    FINISHED = "finished"


class SelectionSession:
    """
    Builds the ordered, duplicate-free selection.

    Each step asks the responder for a query, turns it into a list of
    options and asks the responder to pick one. Picking "Done" finishes the
    session; picking a path already selected changes nothing.
    """

    def __init__(self, candidates: Sequence[str], index: FuzzyIndex, responder: Responder):
        self.candidates = tuple(candidates)
        self.index = index
        self.responder = responder
        self._candidate_set = set(self.candidates)
        self._selection: List[str] = []
        self._state = SessionState.SELECTING

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def selection(self) -> List[str]:
        """Paths selected so far, in selection order."""
        return list(self._selection)

    def candidates_for(self, query: Query) -> List[str]:
        """List of options to present for a query."""
        if isinstance(query, EmptyQuery):
            return [DONE, *self.candidates]
        if isinstance(query, TextQuery):
            return self.index.search(query.text)
        raise TypeError(f"Unknown query type: {type(query).__name__}")

    def select(self, path: str) -> bool:
        """
        Add a path to the selection.

        Returns:
            True if the path was added, False if it was already selected.

        Raises:
            ValueError: If the path is not a candidate.
        """
        if path not in self._candidate_set:
            raise ValueError(f"Not a candidate path: {path}")
        if path in self._selection:
            logger.debug(f"Already selected: {path}")
            return False
        self._selection.append(path)
        logger.debug(f"Selected {path} ({len(self._selection)} total)")
        return True

    def step(self) -> SessionState:
        """Run one ask/choose round."""
        if self._state is SessionState.FINISHED:
            raise RuntimeError("Selection session already finished")

        query = parse_query(self.responder.ask(SEARCH_MESSAGE))
        options = self.candidates_for(query)
        choice = self.responder.choose(SELECT_MESSAGE, options)

        if choice == DONE:
            self._state = SessionState.FINISHED
        elif choice is not None:
            self.select(choice)
        return self._state

    def run(self) -> List[str]:
        """Loop until the user picks "Done" and return the selection."""
        while self._state is SessionState.SELECTING:
            self.step()
        return self.selection
