"""
PATH installation helpers.

wpr can be run from a checkout; these helpers put a symlink to it on the
PATH and remove it again. They run before (or instead of) the interactive
core and never touch its state.
"""

import os
import shutil
import logging
from typing import Optional

from .core.exceptions import InstallError
from .ui.base import Responder

logger = logging.getLogger(__name__)

COMMAND_NAME = "wpr"
INSTALL_QUESTION = (
    'wpr is not currently accessible in your PATH. '
    'Would you like to create a symlink so it can be run as "wpr"?'
)


def is_installed(command: str = COMMAND_NAME) -> bool:
    """Check whether the command resolves on the PATH."""
    return shutil.which(command) is not None


def resolve_script(argv0: str) -> Optional[str]:
    """
    Find the launcher a symlink should point at.

    Returns:
        Absolute path of argv0 when it is an executable command, None when
        wpr was started some other way (``python -m``, a bare ``.py`` file).
    """
    if not argv0 or argv0.endswith('.py'):
        return None
    script = os.path.abspath(argv0)
    if not (os.path.isfile(script) and os.access(script, os.X_OK)):
        return None
    return script


def install(script_path: str, link_path: str) -> str:
    """
    Create a symlink at link_path pointing to script_path.

    Raises:
        InstallError: If the link cannot be created.
    """
    target = os.path.abspath(script_path)
    try:
        os.makedirs(os.path.dirname(link_path), exist_ok=True)
        os.symlink(target, link_path)
    except OSError as e:
        raise InstallError(link_path, e.strerror or str(e)) from e
    logger.debug(f"Linked {link_path} -> {target}")
    return link_path


def ensure_installed(responder: Responder, script_path: str, link_path: str) -> bool:
    """
    Offer to install the symlink when wpr is not on the PATH.

    Returns:
        True if a symlink was created, False if nothing was done.

    Raises:
        InstallError: If the user agreed but the link cannot be created.
    """
    if is_installed():
        return False
    if not responder.confirm(INSTALL_QUESTION, default=True):
        return False
    install(script_path, link_path)
    return True


def uninstall(link_path: str) -> bool:
    """
    Remove the symlink.

    Returns:
        True if a link was removed, False if there was none.

    Raises:
        InstallError: If the link exists but cannot be removed.
    """
    if not os.path.lexists(link_path):
        return False
    try:
        os.remove(link_path)
    except OSError as e:
        raise InstallError(link_path, e.strerror or str(e)) from e
    return True
