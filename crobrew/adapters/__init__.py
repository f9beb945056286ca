"""Adapters — process execution behind the dispatcher.

Public re-exports for convenient access.
"""

from crobrew.adapters.base import Adapter, ExecutionContext
from crobrew.adapters.mock import MockAdapter
from crobrew.adapters.shell.command import ShellCommandAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
    "ShellCommandAdapter",
]
