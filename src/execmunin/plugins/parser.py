"""
Parsing of Munin plugin output.

Only `<field>.value <number>` lines carry data. Everything else a plugin
prints (graph_title, <field>.label, unknown values "U", ...) is ignored.
"""

import re
from typing import Optional

from ..models import ParsedLine

REAL_NUMBER_PATTERN = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"

VALUE_LINE_RE = re.compile(
    r"^(?P<field>[^.\-/]+)\.value\s+(?P<value>" + REAL_NUMBER_PATTERN + r")\s*$",
    re.ASCII,
)


def parse_value_line(line: str) -> Optional[ParsedLine]:
    """
    Extract the field name and numeric text from one line of plugin output.

    Args:
        line: A line as read from the plugin, with or without its newline

    Returns:
        ParsedLine on a match, None for every other line

    Examples:
        >>> parse_value_line("temp.value 23.5")
        ParsedLine(field='temp', value='23.5')
        >>> parse_value_line("graph_title Temperature") is None
        True
    """
    match = VALUE_LINE_RE.match(line.rstrip("\r\n"))
    if match is None:
        return None
    return ParsedLine(field=match.group("field"), value=match.group("value"))
