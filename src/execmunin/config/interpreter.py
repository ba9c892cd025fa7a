"""
Translation of the parsed configuration into a ShimConfig.

Three options are understood:

- ``AddType <type> <field> [<field> ...]`` maps Munin fields to a collectd type
- ``Script <path>`` adds a plugin to run every round
- ``Interval <seconds>`` overrides the default round period

Each option may be absent, given once, or repeated. Any other shape is
reported and the option is skipped; none of these problems stop startup.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..models import DEFAULT_HOSTNAME, DEFAULT_INTERVAL, ShimConfig
from ..validation import (
    ConfigShapeError,
    ErrorSeverity,
    ScriptValidationError,
    ValidationError,
    handle_config_error,
    validate_executable_script,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)


def option_entries(config_data: Mapping[str, Any], option: str) -> List[str]:
    """
    Return the values of an option as a list of strings.

    Raises:
        ConfigShapeError: If the value is neither a string nor a list of strings
    """
    value = config_data.get(option)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ConfigShapeError(option, value)


def interpret_add_types(entries: List[str], type_map: Dict[str, str]) -> None:
    """Insert every (field -> type) pair from AddType entries, later ones winning."""
    for entry in entries:
        tokens = entry.split()
        if len(tokens) < 2:
            logger.warning(f"AddType `{entry}' names no fields; ignoring it.")
            continue
        type_name, fields = tokens[0], tokens[1:]
        for field_name in fields:
            if field_name in type_map and type_map[field_name] != type_name:
                logger.debug(f"Field `{field_name}' remapped from `{type_map[field_name]}' to `{type_name}'")
            type_map[field_name] = type_name


def interpret_scripts(entries: List[str], scripts: List[str]) -> None:
    """Append every existing, executable script; warn about the rest."""
    for entry in entries:
        try:
            scripts.append(validate_executable_script(entry))
        except ScriptValidationError as e:
            logger.warning(str(e))


def interpret_interval(entries: List[str], interval: int) -> int:
    """Return the last positive integer Interval, or the given default."""
    for entry in entries:
        try:
            interval = validate_positive_integer(entry, field_name="Interval")
        except ValidationError as e:
            logger.debug(f"Ignoring Interval: {e}")
    return interval


def _apply(config_data: Mapping[str, Any], option: str,
           action: Callable[[List[str]], Any]) -> Any:
    try:
        entries = option_entries(config_data, option)
    except ConfigShapeError as e:
        handle_config_error(
            error=e,
            context=f"option `{option}'",
            severity=ErrorSeverity.ERROR,
            reraise=False,
            logger=logger,
        )
        return None
    return action(entries)


def interpret_config(
    config_data: Mapping[str, Any],
    interval: int = DEFAULT_INTERVAL,
    hostname: str = DEFAULT_HOSTNAME,
) -> ShimConfig:
    """
    Build a ShimConfig from the parsed configuration.

    Args:
        config_data: Output of the configuration loader (lower-cased keys)
        interval: Interval to use unless the configuration overrides it
        hostname: Host name for emitted identifiers

    Returns:
        Immutable configuration for the scheduler and runner
    """
    type_map: Dict[str, str] = {}
    scripts: List[str] = []

    _apply(config_data, "addtype", lambda entries: interpret_add_types(entries, type_map))
    _apply(config_data, "script", lambda entries: interpret_scripts(entries, scripts))
    configured: Optional[int] = _apply(
        config_data, "interval", lambda entries: interpret_interval(entries, interval)
    )
    if configured is not None:
        interval = configured

    for option in config_data:
        if option not in ("addtype", "script", "interval"):
            logger.debug(f"Ignoring unknown option `{option}'")

    shim_config = ShimConfig(
        interval=interval,
        hostname=hostname,
        type_map=type_map,
        scripts=tuple(scripts),
    )
    logger.info(
        f"Configured {len(shim_config.scripts)} scripts, {len(shim_config.type_map)} type mappings, "
        f"interval {shim_config.interval}s, host {shim_config.hostname}"
    )
    return shim_config
