"""wpr: select project files interactively and bundle them with a prompt."""

__version__ = "1.0.0"
