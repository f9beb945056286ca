"""
Profile model — the command templates for one package manager.

A profile is pure data: four whitespace-separated command templates
and the exit codes the manager uses to signal success. Profiles are
frozen once built; the registry and user configuration only ever
produce new instances.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Operation = Literal["search", "update", "install", "remove"]

OPERATIONS: tuple[Operation, ...] = ("update", "search", "install", "remove")


class Profile(BaseModel):
    """Command templates for a single package manager.

    Each template is a command line without the trailing argument,
    e.g. ``"sudo apt-get install"``. The dispatcher appends the
    package name or search query when the operation takes one.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    search: str
    update: str
    install: str
    remove: str
    success_codes: tuple[int, ...] = Field(default=(0,))

    @field_validator("search", "update", "install", "remove")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.split():
            raise ValueError("command template must not be empty")
        return value

    @property
    def binary(self) -> str:
        """The executable probed during detection (first search token)."""
        return self.search.split()[0]

    def template(self, operation: Operation) -> str:
        """Return the command template for an operation."""
        if operation not in OPERATIONS:
            raise ValueError(f"Unknown operation: {operation!r}")
        return getattr(self, operation)

    def tokens(self, operation: Operation) -> list[str]:
        """Split an operation's template into its argv tokens."""
        return self.template(operation).split()
