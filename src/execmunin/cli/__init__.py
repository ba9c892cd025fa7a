"""
Command-line interface for the execmunin package.

This module provides the main CLI entry point for the exec-munin daemon.
"""

from .main import main_cli

__all__ = [
    "main_cli",
]
