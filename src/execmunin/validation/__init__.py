"""
Validation and error handling for the execmunin package.

This module provides the exception taxonomy and consistent error reporting
used across the application.
"""

from .exceptions import (
    ConfigLoadError,
    ConfigShapeError,
    ErrorSeverity,
    ExecMuninError,
    ScriptValidationError,
    SpawnError,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
    handle_subprocess_error,
)
from .validators import (
    validate_executable_script,
    validate_positive_integer,
)

__all__ = [
    # Exceptions
    "ExecMuninError",
    "ValidationError",
    "ConfigLoadError",
    "ConfigShapeError",
    "ScriptValidationError",
    "SpawnError",
    # Error handling
    "ErrorSeverity",
    "handle_error",
    "handle_config_error",
    "handle_subprocess_error",
    "handle_cli_error",
    # Validators
    "validate_executable_script",
    "validate_positive_integer",
]
