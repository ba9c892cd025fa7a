"""
Data models used throughout exec-munin.

Configuration Models:
- ShimConfig: type map, script list, interval and host name

Value Models:
- ParsedLine: field name and numeric text from one plugin output line
- ValueRecord: a fully resolved value ready for emission
"""

from .config import DEFAULT_HOSTNAME, DEFAULT_INTERVAL, ShimConfig
from .values import ParsedLine, ValueRecord

__all__ = [
    "DEFAULT_HOSTNAME",
    "DEFAULT_INTERVAL",
    "ShimConfig",
    "ParsedLine",
    "ValueRecord",
]
