"""
Munin plugin execution and translation to collectd PUTVAL records.
"""

from .emitter import (
    PutvalEmitter,
    build_identifier,
    escape_identifier,
    format_putval,
)
from .parser import parse_value_line
from .runner import PluginRunner

__all__ = [
    "PluginRunner",
    "PutvalEmitter",
    "build_identifier",
    "escape_identifier",
    "format_putval",
    "parse_value_line",
]
