"""
Path filtering utilities for wpr.

This module decides whether a path relative to the scan root is eligible,
based on the blacklist (substring) and whitelist (prefix) rules of wpr.conf.
"""

from typing import Optional

from ..core.models import FilterRules


def is_eligible(relative_path: str, is_directory: bool, rules: FilterRules) -> bool:
    """
    Check whether a relative path survives the filter rules.

    Args:
        relative_path: Path relative to the scan root.
        is_directory: Whether the path names a directory.
        rules: Whitelist/blacklist rules.

    Returns:
        True if the path is eligible (files) or should be traversed (directories).
    """
    return _excluded_reason(relative_path, is_directory, rules) is None


def _excluded_reason(relative_path: str, is_directory: bool, rules: FilterRules) -> Optional[str]:
    # Blacklist is checked first and always wins over the whitelist
    for entry in rules.blacklist:
        if entry in relative_path:
            return f"Blacklisted by '{entry}'"

    if not rules.whitelist or is_directory:
        return None

    if any(relative_path.startswith(prefix) for prefix in rules.whitelist):
        return None
    return "Outside whitelist"


class PathFilter:
    """Handles path filtering logic."""

    def __init__(self, rules: FilterRules):
        self.rules = rules

    def is_eligible(self, relative_path: str, is_directory: bool = False) -> bool:
        """
        Check if a path should be kept.

        Directories are always kept when a whitelist is set, so that
        whitelisted descendants stay reachable.
        """
        return is_eligible(relative_path, is_directory, self.rules)

    def excluded_reason(self, relative_path: str, is_directory: bool = False) -> Optional[str]:
        """
        Get the reason why a path would be excluded.

        Returns:
            Reason string if the path would be excluded, None otherwise.
        """
        return _excluded_reason(relative_path, is_directory, self.rules)
