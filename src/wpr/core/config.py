"""Loading and bootstrapping of wpr.conf."""
import os
import json
import logging

from pydantic import ValidationError

from .exceptions import ConfigParseError, WriteError
from .models import FilterRules

logger = logging.getLogger(__name__)


def load_config(config_path: str) -> FilterRules:
    """
    Load filter rules from a wpr.conf file.

    A missing file gives the default rules. A present file is authoritative:
    keys it leaves out are empty lists.

    Raises:
        ConfigParseError: If the file is not JSON or does not hold two lists of strings.
    """
    if not os.path.exists(config_path):
        logger.debug(f"No config at {config_path}, using defaults")
        return FilterRules.defaults()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(config_path, f"line {e.lineno}: {e.msg}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(config_path, str(e)) from e

    if not isinstance(raw, dict):
        raise ConfigParseError(config_path, "expected a JSON object")

    try:
        rules = FilterRules(**raw)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigParseError(config_path, f"invalid value for {fields}") from e

    logger.debug(f"Loaded {config_path}: {len(rules.whitelist)} whitelist, "
                 f"{len(rules.blacklist)} blacklist entries")
    return rules


def create_default_config(config_path: str) -> bool:
    """
    Write a wpr.conf holding the default rules.

    Returns:
        True if the file was created, False if one already exists.

    Raises:
        WriteError: If the file cannot be written.
    """
    if os.path.exists(config_path):
        return False

    data = FilterRules.defaults().model_dump()
    try:
        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise WriteError(config_path, e.strerror or str(e)) from e
    return True
