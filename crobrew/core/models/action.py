"""
Action and Receipt models — the execution contract.

Actions represent requested command executions. Receipts represent
results. The dispatcher sends Actions, adapters return Receipts.
Never exceptions.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Action(BaseModel):
    """A requested command execution.

    ``params["argv"]`` holds the full argument vector. ``params["capture"]``
    chooses between capturing combined output and passing the terminal
    through to the child process.
    """

    id: str                         # e.g. "apt:install"
    name: str = ""                  # operation name
    adapter: str = "shell"          # which adapter handles this
    params: dict[str, Any] = Field(default_factory=dict)


class Receipt(BaseModel):
    """Result of an adapter execution.

    Receipts capture the full outcome of an action. The adapter
    NEVER raises exceptions — failures are captured here.
    """

    adapter: str
    action_id: str
    status: Literal["ok", "failed"] = "ok"

    duration_ms: int = 0

    output: str = ""
    error: str | None = None
    return_code: int | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the action succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the action failed."""
        return self.status == "failed"

    @classmethod
    def success(
        cls,
        adapter: str,
        action_id: str,
        output: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a success receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="ok",
            output=output,
            **kwargs,
        )

    @classmethod
    def failure(
        cls,
        adapter: str,
        action_id: str,
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="failed",
            error=error,
            **kwargs,
        )
