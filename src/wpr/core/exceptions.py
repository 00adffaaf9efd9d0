"""
Error taxonomy for wpr.

Every failure that aborts a run is raised as a subclass of :class:`WprError`
carrying the offending path, so the CLI can report it and the user can re-run.
"""

from typing import Optional


class WprError(Exception):
    """Base exception for wpr errors."""

    action = "Error"

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        message = f"{self.action}: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ConfigParseError(WprError):
    """Raised when wpr.conf is not valid JSON or has the wrong shape."""

    action = "Invalid configuration file"


class ScanError(WprError):
    """Raised when a directory cannot be read during traversal."""

    action = "Cannot scan directory"


class ReadError(WprError):
    """Raised when a selected file cannot be read at assembly time."""

    action = "Cannot read file"


class WriteError(WprError):
    """Raised when the output directory or document cannot be written."""

    action = "Cannot write output"


class InstallError(WprError):
    """Raised when the PATH symlink cannot be created or removed."""

    action = "Cannot update symlink"
