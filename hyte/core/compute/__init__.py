"""
Shared compute infrastructure for hyte.

Submodules:
    timing: Execution timing utilities
"""

from hyte.core.compute.timing import Timer

__all__ = [
    "Timer",
]
