"""
Value data models produced while processing plugin output.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedLine:
    """
    A `<field>.value <number>` line taken apart.
    """

    field: str
    # Numeric text exactly as the plugin printed it.
    value: str


@dataclass(frozen=True)
class ValueRecord:
    """
    One value ready to be written as a PUTVAL line.
    """

    hostname: str
    plugin_instance: str
    type_name: str
    interval: int
    # Unix epoch second at which the owning script was started.
    timestamp: int
    value: str
