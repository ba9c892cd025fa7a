"""
Configuration file loading utilities.

This module parses the Apache-style (Config::General) configuration format
used by exec-munin into plain dictionaries. Option and block names are
lower-cased, repeated options are collected into lists, and boolean-looking
values are normalised to "1" or "0".

Example::

    AddType voltage in out
    Script "/usr/lib/munin/plugins/cpu"
    <Options>
        Verbose yes
    </Options>

loads as::

    {"addtype": "voltage in out",
     "script": "/usr/lib/munin/plugins/cpu",
     "options": {"verbose": "1"}}
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Tuple, Union

from ..validation import ConfigLoadError

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"(?<!\\)#.*$")
_OPEN_TAG_RE = re.compile(r"^<\s*(?P<name>[^/\s>][^\s>]*)(?:\s+(?P<arg>[^>]*?))?\s*>$")
_CLOSE_TAG_RE = re.compile(r"^<\s*/\s*(?P<name>[^\s>]+)\s*>$")
_OPTION_RE = re.compile(r"^(?P<key>[^\s=<>]+)(?:\s*=\s*|\s+|$)(?P<value>.*)$")

_TRUE_RE = re.compile(r"^(?:on|yes|true)$", re.IGNORECASE)
_FALSE_RE = re.compile(r"^(?:off|no|false)$", re.IGNORECASE)


def _logical_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, text) for every meaningful line.

    Comments and blank lines are dropped and a trailing backslash joins a
    line with the next one. The line number is that of the first physical
    line.
    """
    pending = ""
    pending_start = 0
    for number, raw in enumerate(lines, start=1):
        text = _COMMENT_RE.sub("", raw.rstrip("\r\n")).replace("\\#", "#")
        if pending:
            text = text.lstrip()
        else:
            pending_start = number
        if text.rstrip().endswith("\\"):
            pending += text.rstrip()[:-1]
            continue
        text = (pending + text).strip()
        pending = ""
        if text:
            yield pending_start, text
    if pending.strip():
        yield pending_start, pending.strip()


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _auto_true(value: str) -> str:
    """Normalise boolean-looking strings to "1" / "0"."""
    if _TRUE_RE.match(value):
        return "1"
    if _FALSE_RE.match(value):
        return "0"
    return value


def _store(target: Dict[str, Any], key: str, value: Any) -> None:
    """Insert a value, turning repeated keys into a list."""
    if key not in target:
        target[key] = value
    elif isinstance(target[key], list):
        target[key].append(value)
    else:
        target[key] = [target[key], value]


def _store_named_block(target: Dict[str, Any], name: str, arg: str,
                       block: Dict[str, Any]) -> None:
    existing = target.get(name)
    if isinstance(existing, dict) and arg not in existing:
        existing[arg] = block
    else:
        _store(target, name, {arg: block})


def parse_config_lines(lines: Iterable[str], source: str = "<string>") -> Dict[str, Any]:
    """
    Parse configuration text into a nested dictionary.

    Args:
        lines: Iterable of raw text lines
        source: Name used in error messages

    Returns:
        Mapping of lower-cased option names to a string, a list of values
        for repeated options, or a dictionary for blocks

    Raises:
        ConfigLoadError: On unbalanced or malformed block tags
    """
    root: Dict[str, Any] = {}
    # (block name, block dict, line where it was opened)
    stack: List[Tuple[str, Dict[str, Any], int]] = [("", root, 0)]

    for number, text in _logical_lines(lines):
        close_match = _CLOSE_TAG_RE.match(text)
        if close_match:
            name = close_match.group("name").lower()
            if len(stack) == 1:
                raise ConfigLoadError(f"Unexpected closing tag </{name}>", source, number)
            if stack[-1][0] != name:
                raise ConfigLoadError(
                    f"Closing tag </{name}> does not match <{stack[-1][0]}> "
                    f"opened on line {stack[-1][2]}",
                    source,
                    number,
                )
            stack.pop()
            continue

        if text.startswith("<"):
            open_match = _OPEN_TAG_RE.match(text)
            if not open_match:
                raise ConfigLoadError(f"Malformed block tag: {text}", source, number)
            name = open_match.group("name").lower()
            arg = open_match.group("arg")
            block: Dict[str, Any] = {}
            parent = stack[-1][1]
            if arg:
                _store_named_block(parent, name, _unquote(arg.strip()), block)
            else:
                _store(parent, name, block)
            stack.append((name, block, number))
            continue

        option_match = _OPTION_RE.match(text)
        if not option_match:
            raise ConfigLoadError(f"Cannot parse line: {text}", source, number)
        key = option_match.group("key").lower()
        value = _auto_true(_unquote(option_match.group("value").strip()))
        _store(stack[-1][1], key, value)

    if len(stack) > 1:
        name, _, opened_at = stack[-1]
        raise ConfigLoadError(f"Block <{name}> is never closed", source, opened_at)

    return root


def load_config_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load and parse an exec-munin configuration file.

    Args:
        file_path: Path to the configuration file

    Returns:
        Parsed configuration data as a dictionary

    Raises:
        ConfigLoadError: If the file cannot be read or is malformed
    """
    path = Path(file_path)
    logger.info(f"Loading configuration file from: {path}")

    try:
        with open(path, "r", encoding="utf-8") as handle:
            return parse_config_lines(handle, source=str(path))
    except OSError as e:
        raise ConfigLoadError(f"Unable to read configuration file: {e.strerror or e}", str(path)) from e
    except UnicodeDecodeError as e:
        raise ConfigLoadError(f"Configuration file is not valid UTF-8: {e}", str(path)) from e
