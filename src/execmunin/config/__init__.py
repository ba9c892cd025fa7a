"""
Configuration management for the execmunin package.

This module loads the Apache-style configuration file, applies the defaults
collectd passes through the environment, and produces a ShimConfig.
"""

# Main configuration interface
from .manager import DEFAULT_CONFIG_PATH, build_shim_config

# For advanced usage - direct access to the individual steps
from .environment import default_hostname, default_interval
from .interpreter import interpret_config, option_entries
from .loader import load_config_file, parse_config_lines

__all__ = [
    # Main interface
    "DEFAULT_CONFIG_PATH",
    "build_shim_config",
    # Advanced interface
    "default_hostname",
    "default_interval",
    "interpret_config",
    "option_entries",
    "load_config_file",
    "parse_config_lines",
]
