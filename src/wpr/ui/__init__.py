"""User interaction for wpr."""

from .base import Responder
from .terminal import TerminalResponder

__all__ = ["Responder", "TerminalResponder"]
