"""Configuration utilities for bk.

Settings come from environment variables only; bk never reads or writes
config files.
"""

import logging
import os
from typing import Optional, Tuple

from .constants import DESCRIPTION_WIDTH, ENV_VAR_DEFINITIONS

logger = logging.getLogger(__name__)


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    if value is None:
        return True, None

    valid_range = ENV_VAR_DEFINITIONS[name].get("valid_range")
    if valid_range is None:
        return True, None

    low, high = valid_range
    try:
        number = int(value.strip())
    except ValueError:
        return False, f"Invalid value '{value}' for {name}. Expected an integer"

    if not low <= number <= high:
        return False, f"Invalid value '{value}' for {name}. Valid range: {low}-{high}"

    return True, None


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Args:
        name: The environment variable name.
        validate: Whether to validate the value against known definitions.

    Returns:
        The environment variable value, or its default if not set.

    Raises:
        ValueError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ValueError(error)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_description_width() -> int:
    """Wrap width for the description column, from BK_DESCRIPTION_WIDTH."""
    try:
        value = get_env_var("BK_DESCRIPTION_WIDTH")
    except ValueError as e:
        logger.warning(f"{e}; using {DESCRIPTION_WIDTH}")
        return DESCRIPTION_WIDTH
    return int(value.strip()) if value else DESCRIPTION_WIDTH
