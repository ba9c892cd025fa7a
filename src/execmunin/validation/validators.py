"""
Validation functions for configuration values.
"""

import os
import re
from typing import Any, Optional

from .exceptions import ScriptValidationError, ValidationError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def validate_positive_integer(
    value: Any,
    min_value: int = 1,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate that a value is a positive integer.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated integer value

    Raises:
        ValidationError: If validation fails
    """
    text = str(value).strip() if value is not None else ""
    if not _INTEGER_RE.fullmatch(text):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value!r}",
            field_name=field_name,
            value=value
        )
    int_value = int(text)
    if int_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and int_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    return int_value


def validate_executable_script(path: str) -> str:
    """
    Validate that a plugin script exists and carries an execute bit.

    Args:
        path: Script path as written in the configuration file

    Returns:
        The unchanged path

    Raises:
        ScriptValidationError: If the script is missing or not executable
    """
    if not os.path.exists(path):
        raise ScriptValidationError(f"Script `{path}' doesn't exist.", path)
    if not os.access(path, os.X_OK):
        raise ScriptValidationError(
            f"Script `{path}' exists but is not executable.", path
        )
    return path
