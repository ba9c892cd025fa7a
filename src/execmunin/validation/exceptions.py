"""
Exception types and error reporting for exec-munin.

Only ConfigLoadError is fatal. Every other error is reported through
handle_error() at the point where it is detected and the surrounding loop
carries on.
"""

import logging
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ExecMuninError(Exception):
    """Base class for all errors raised by exec-munin."""


class ValidationError(ExecMuninError):
    """
    Exception raised when a single value fails validation.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class ConfigLoadError(ExecMuninError):
    """The configuration file is missing, unreadable or malformed."""

    def __init__(self, message: str, path: Optional[str] = None,
                 line_number: Optional[int] = None):
        if path is not None and line_number is not None:
            message = f"{path}:{line_number}: {message}"
        elif path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path
        self.line_number = line_number


class ConfigShapeError(ExecMuninError):
    """An option's value has a structure the interpreter cannot use."""

    def __init__(self, option: str, value: Any):
        super().__init__(
            f"Option `{option}' has an unsupported value of type "
            f"{type(value).__name__}; ignoring it."
        )
        self.option = option
        self.value = value


class ScriptValidationError(ValidationError):
    """A configured script does not exist or is not executable."""

    def __init__(self, message: str, script_path: str):
        super().__init__(message, field_name="script", value=script_path,
                         severity=ErrorSeverity.WARNING)
        self.script_path = script_path


class SpawnError(ExecMuninError):
    """A validated script could not be launched for the current round."""

    def __init__(self, script_path: str, cause: OSError):
        super().__init__(f"Executing `{script_path}' failed: {cause}")
        self.script_path = script_path
        self.cause = cause


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()['logger']

    error_msg = f"Error in {context}: {error}"

    if isinstance(severity, str):
        severity_str = severity.lower()
    else:
        severity_str = severity.value

    if severity_str == "debug":
        effective_logger.debug(error_msg)
    elif severity_str == "info":
        effective_logger.info(error_msg)
    elif severity_str == "warning":
        effective_logger.warning(error_msg)
    elif severity_str == "error":
        effective_logger.error(error_msg)
    elif severity_str == "critical":
        effective_logger.critical(error_msg)

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_subprocess_error(error: Exception, command: str, **kwargs) -> None:
    """Handle subprocess-related errors."""
    handle_error(error, f"subprocess command '{command}'", **kwargs)


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Log a fatal CLI error and exit."""
    exit_code = kwargs.pop('exit_code', 1)

    severity = kwargs.pop('severity', ErrorSeverity.CRITICAL)
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)

    import sys
    sys.exit(exit_code)
