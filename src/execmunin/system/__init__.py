"""
System interaction utilities: process tree termination and signal handling.
"""

from .processes import terminate_process_tree
from .signals import SignalHandler

__all__ = [
    "terminate_process_tree",
    "SignalHandler",
]
