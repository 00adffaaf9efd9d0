"""Directory traversal producing the candidate file set."""
import os
import logging
from typing import List, Tuple

from .exceptions import ScanError
from .models import FilterRules
from ..utils.file_filter import PathFilter

logger = logging.getLogger(__name__)


class TreeScanner:
    """Walks a root directory and collects every eligible file."""

    def __init__(self, rules: FilterRules):
        self.rules = rules
        self.path_filter = PathFilter(rules)

    def scan(self, root_dir: str) -> Tuple[str, ...]:
        """
        Recursively scan a directory.

        Entries are visited depth-first in the order the filesystem returns
        them; nothing is re-sorted.

        Args:
            root_dir: Directory to scan.

        Returns:
            Tuple of eligible file paths relative to root_dir.

        Raises:
            ScanError: If any directory (root included) cannot be read.
        """
        root = os.path.abspath(root_dir)
        if not os.path.isdir(root):
            raise ScanError(root_dir, "not a directory")

        files: List[str] = []
        self._scan_dir(root, root, files)
        logger.debug(f"Scanned {root}: {len(files)} eligible files")
        return tuple(files)

    def _scan_dir(self, dir_path: str, root: str, files: List[str]) -> None:
        try:
            with os.scandir(dir_path) as it:
                entries = list(it)
        except OSError as e:
            raise ScanError(dir_path, e.strerror or str(e)) from e

        for entry in entries:
            rel_path = os.path.relpath(entry.path, root)
            try:
                # Symlinks count as plain entries and are never descended into
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                raise ScanError(entry.path, e.strerror or str(e)) from e

            reason = self.path_filter.excluded_reason(rel_path, is_dir)
            if reason:
                logger.debug(f"Skipping {rel_path}: {reason}")
                continue

            if is_dir:
                self._scan_dir(entry.path, root, files)
            else:
                files.append(rel_path)


def scan(root_dir: str, rules: FilterRules) -> Tuple[str, ...]:
    """Scan root_dir with the given rules. See :meth:`TreeScanner.scan`."""
    return TreeScanner(rules).scan(root_dir)
