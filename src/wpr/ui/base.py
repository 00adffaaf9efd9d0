"""
Base responder interface.

A responder is whatever answers the questions the selection engine asks:
a live terminal, a scripted list of answers in tests, or anything else that
can pick one value from a list and read one line of text.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence


class Responder(ABC):
    """Abstract source of user answers."""

    @abstractmethod
    def ask(self, message: str) -> str:
        """
        Request one line of free text.

        Args:
            message: Question shown to the user.

        Returns:
            The entered text, possibly empty.
        """
        pass

    @abstractmethod
    def choose(self, message: str, options: Sequence[str]) -> Optional[str]:
        """
        Offer an ordered list of choices and return the one picked.

        Args:
            message: Question shown to the user.
            options: Labels to choose from, in display order.

        Returns:
            The chosen label, or None if nothing was chosen.
        """
        pass

    def confirm(self, message: str, default: bool = True) -> bool:
        """Ask a yes/no question. Responders without a yes/no prompt take the default."""
        return default
