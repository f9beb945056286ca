"""
Settings model — the optional user configuration file.

Loaded from YAML by ``crobrew.core.config.loader``. Every field has a
default, so an absent file and an empty file mean the same thing.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from crobrew.core.models.profile import Profile


class Settings(BaseModel):
    """User preferences for manager selection and execution."""

    manager: str | None = None      # force a manager by name, skip probing
    stream_output: bool = True      # pass the terminal through for update/install/remove
    profiles: dict[str, list[Profile]] = Field(default_factory=dict)  # per-platform extras

    @field_validator("profiles")
    @classmethod
    def _lower_platform_keys(cls, value: dict[str, list[Profile]]) -> dict[str, list[Profile]]:
        return {key.strip().lower(): group for key, group in value.items()}
