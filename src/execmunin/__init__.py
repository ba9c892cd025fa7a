"""
exec-munin: run Munin plugins under collectd's exec plugin.

Munin plugins print `<field>.value <number>` lines. This package runs a set of
them once per interval and writes the values to stdout as collectd PUTVAL
commands, renaming Munin fields to collectd types as configured.

The package is organized into specialized modules:
- config: Configuration file loading and interpretation
- models: Data structures and type definitions
- validation: Error taxonomy and validation helpers
- plugins: Plugin execution, output parsing and PUTVAL emission
- scheduling: The interval loop driving plugin rounds
- system: Signal handling and process tree termination
- cli: Command-line interface

Usage:
    From command line:
        exec-munin --config /etc/exec-munin.conf

    Programmatically:
        from execmunin import build_shim_config, PluginRunner, RoundScheduler
        config = build_shim_config("/etc/exec-munin.conf")
        RoundScheduler(config, PluginRunner(config)).run_forever()
"""

# Main interfaces
from .config import build_shim_config
from .cli import main_cli
from .plugins import PluginRunner, PutvalEmitter, parse_value_line
from .scheduling import RoundScheduler

# Model classes for external use
from .models import ParsedLine, ShimConfig, ValueRecord

# Errors
from .validation import (
    ConfigLoadError,
    ConfigShapeError,
    ExecMuninError,
    ScriptValidationError,
    SpawnError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "build_shim_config",
    "main_cli",
    "PluginRunner",
    "PutvalEmitter",
    "parse_value_line",
    "RoundScheduler",
    # Models
    "ParsedLine",
    "ShimConfig",
    "ValueRecord",
    # Errors
    "ConfigLoadError",
    "ConfigShapeError",
    "ExecMuninError",
    "ScriptValidationError",
    "SpawnError",
    "ValidationError",
]
