"""
Mock adapter — test double and ``--mock`` backend.

Records every execution context it receives and returns success
unless told otherwise. Nothing is ever run.
"""

from __future__ import annotations

import shlex

from crobrew.adapters.base import Adapter, ExecutionContext
from crobrew.core.models.action import Receipt


class MockAdapter(Adapter):
    """Universal mock adapter.

    By default echoes the command it would have run. Can be configured
    with custom responses per action ID.
    """

    def __init__(self, adapter_name: str = "mock"):
        self._name = adapter_name
        self._responses: dict[str, Receipt] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """All execution contexts this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times execute has been called."""
        return len(self._call_log)

    @property
    def last_argv(self) -> list[str] | None:
        """Argument vector of the most recent call, if any."""
        return self._call_log[-1].argv if self._call_log else None

    def set_response(self, action_id: str, receipt: Receipt) -> None:
        """Set a custom response for a specific action ID."""
        self._responses[action_id] = receipt

    def set_failure(self, action_id: str, error: str = "Mock failure") -> None:
        """Configure a specific action to fail."""
        self._responses[action_id] = Receipt.failure(
            adapter=self._name,
            action_id=action_id,
            error=error,
        )

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self._call_log.append(context)

        if context.action.id in self._responses:
            return self._responses[context.action.id]

        return Receipt.success(
            adapter=self._name,
            action_id=context.action.id,
            output=f"[mock] {shlex.join(context.argv)}",
            metadata={"mock": True},
        )

    def reset(self) -> None:
        """Clear call log and custom responses."""
        self._call_log.clear()
        self._responses.clear()
