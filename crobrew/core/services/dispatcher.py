"""
Dispatcher — translate user actions into package manager invocations.

The selected profile is fixed at construction time and every operation
reads it from the instance. Execution goes through an ``Adapter``, so a
``MockAdapter`` can stand in for the real processes.
"""

from __future__ import annotations

import logging

from crobrew.adapters.base import Adapter, ExecutionContext
from crobrew.core.models.action import Action
from crobrew.core.models.profile import Operation, Profile

logger = logging.getLogger(__name__)


# Verb used in "error <verb>: ..." messages
_VERBS: dict[str, str] = {
    "update": "updating package list",
    "search": "searching packages",
    "install": "installing package",
    "remove": "removing package",
}

_HINT_SEARCH = (
    "This might be because:\n"
    "1. You're not in a supported environment\n"
    "2. The package manager is not available\n"
    "3. You don't have the required permissions"
)

_HINT_MUTATE = (
    "This might be because:\n"
    "1. You're not in a supported environment\n"
    "2. You don't have sudo permissions\n"
    "3. The package manager is not available"
)

# Lines of captured output quoted in error messages
_OUTPUT_TAIL = 10


class DispatchError(Exception):
    """Raised when a package manager command fails.

    ``raw`` holds the underlying process error text.
    """

    def __init__(self, message: str, raw: str = "", operation: str = ""):
        super().__init__(message)
        self.raw = raw
        self.operation = operation


def build_command(
    profile: Profile,
    operation: Operation,
    argument: str | None = None,
) -> list[str]:
    """Argument vector for an operation.

    The template's tokens, in order, followed by ``argument`` when one
    is given. An empty string is still appended: ``search("")`` asks
    the manager for everything.
    """
    argv = profile.tokens(operation)
    if argument is not None:
        argv.append(argument)
    return argv


class Dispatcher:
    """Run package manager operations against one selected profile."""

    def __init__(
        self,
        profile: Profile,
        adapter: Adapter,
        stream_output: bool = True,
    ):
        self.profile = profile
        self.adapter = adapter
        self.stream_output = stream_output

    def update(self) -> str:
        """Refresh the package list."""
        return self._run("update", capture=not self.stream_output)

    def search(self, query: str = "") -> str:
        """Search packages; an empty query lists all of them."""
        return self._run("search", query, capture=True)

    def install(self, name: str) -> str:
        """Install a package by name."""
        return self._run("install", _require_name(name, "install"), capture=not self.stream_output)

    def remove(self, name: str) -> str:
        """Remove a package by name."""
        return self._run("remove", _require_name(name, "remove"), capture=not self.stream_output)

    def _run(
        self,
        operation: Operation,
        argument: str | None = None,
        *,
        capture: bool,
    ) -> str:
        argv = build_command(self.profile, operation, argument)
        action = Action(
            id=f"{self.profile.name}:{operation}",
            name=operation,
            adapter=self.adapter.name,
            params={
                "argv": argv,
                "capture": capture,
                "success_codes": list(self.profile.success_codes),
            },
        )
        context = ExecutionContext(action=action)

        valid, reason = self.adapter.validate(context)
        if not valid:
            raise _wrap(operation, reason)

        logger.info("Running %s via %s", operation, self.profile.name)
        receipt = self.adapter.execute(context)

        if receipt.failed:
            logger.debug("%s failed: %s", action.id, receipt.error)
            raise _wrap(operation, receipt.error or "unknown error", receipt.output)

        return receipt.output


def _require_name(name: str, operation: str) -> str:
    name = (name or "").strip()
    if not name:
        raise DispatchError(f"A package name is required to {operation}", operation=operation)
    return name


def _wrap(operation: str, raw: str, output: str = "") -> DispatchError:
    """Build the user-facing error for a failed operation."""
    hint = _HINT_SEARCH if operation == "search" else _HINT_MUTATE
    message = f"error {_VERBS[operation]}: {raw}"

    tail = output.strip().splitlines()[-_OUTPUT_TAIL:]
    if tail:
        message += "\n" + "\n".join(f"  │ {line}" for line in tail)

    return DispatchError(f"{message}\n{hint}", raw=raw, operation=operation)
