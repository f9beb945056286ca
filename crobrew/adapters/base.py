"""
Adapter base — the protocol contract between dispatcher and processes.

The dispatcher only talks to external programs through this protocol,
which keeps the command-building logic testable without a real
package manager on the machine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from crobrew.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """Everything an adapter needs to execute an action."""

    action: Action

    @property
    def argv(self) -> list[str]:
        """The argument vector to execute."""
        return list(self.action.params.get("argv", []))


class Adapter(ABC):
    """Abstract base class for all adapters.

    Adapters perform external side effects and return receipts.
    They NEVER raise exceptions — failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Validate that the action can be executed.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Execute the action and return a receipt.

        MUST never raise exceptions. All failures are captured
        in the Receipt with status='failed'.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
