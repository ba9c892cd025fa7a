"""
Configuration data models.

ShimConfig holds everything the scheduler and runner need. It is built once
at startup and never changes while the process runs.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

DEFAULT_INTERVAL = 300
DEFAULT_HOSTNAME = "localhost"


@dataclass(frozen=True)
class ShimConfig:
    """
    Immutable runtime configuration for one exec-munin process.
    """

    # Seconds between scheduler rounds, always > 0.
    interval: int = DEFAULT_INTERVAL
    # Host name used as the first identifier component.
    hostname: str = DEFAULT_HOSTNAME
    # Munin field name -> collectd type name.
    type_map: Mapping[str, str] = field(default_factory=dict)
    # Plugin executables in execution order.
    scripts: Tuple[str, ...] = ()

    def __post_init__(self):
        # Freeze the containers handed in by the interpreter.
        object.__setattr__(self, "type_map", MappingProxyType(dict(self.type_map)))
        object.__setattr__(self, "scripts", tuple(self.scripts))
        if not isinstance(self.interval, int) or self.interval <= 0:
            raise ValueError(f"interval must be a positive integer, got {self.interval!r}")

    def resolve_type(self, field_name: str) -> str:
        """Return the collectd type for a Munin field, or the field itself."""
        return self.type_map.get(field_name, field_name)
