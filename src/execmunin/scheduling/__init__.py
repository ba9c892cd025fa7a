"""
Round scheduling for plugin execution.
"""

from .scheduler import RoundScheduler

__all__ = [
    "RoundScheduler",
]
