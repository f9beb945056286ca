"""
Package manager detection — pick the profile to dispatch to.

Read-only probes: each candidate's search binary is asked for its
``--version``. The first one that answers wins. Probe failures are
expected on most machines and only logged at DEBUG.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence

from crobrew.core.config.loader import ConfigError
from crobrew.core.models.profile import Profile
from crobrew.core.models.settings import Settings
from crobrew.core.registry import (
    FALLBACK_PROFILE,
    current_platform,
    find_profile,
    profiles_for,
)

logger = logging.getLogger(__name__)

_PROBE_TIMEOUT = 10

Probe = Callable[[str], bool]


def probe_binary(binary: str) -> bool:
    """Return True if ``<binary> --version`` runs and exits 0."""
    try:
        r = subprocess.run(
            [binary, "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=_PROBE_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Probe %s failed: %s", binary, e)
        return False

    if r.returncode != 0:
        logger.debug("Probe %s exited with %d", binary, r.returncode)
    return r.returncode == 0


def detect(
    platform_id: str,
    profiles: Sequence[Profile] | None = None,
    probe: Probe | None = None,
) -> Profile:
    """Select the first available package manager for a platform.

    Args:
        platform_id: OS identifier, e.g. ``"linux"``.
        profiles: Candidates in probe order (default: registry lookup).
        probe: Availability check for a binary (default: ``probe_binary``).

    Returns:
        The first profile whose binary answers, or the fallback profile
        when none does. Never None.
    """
    candidates = list(profiles) if profiles is not None else profiles_for(platform_id)
    check = probe or probe_binary

    for profile in candidates:
        if check(profile.binary):
            logger.info("Detected package manager: %s", profile.name)
            return profile

    logger.info(
        "No package manager answered on %s, falling back to %s",
        platform_id,
        FALLBACK_PROFILE.name,
    )
    return FALLBACK_PROFILE


def select_profile(
    settings: Settings,
    platform_id: str | None = None,
    probe: Probe | None = None,
) -> Profile:
    """Resolve the profile for this process.

    A manager named in the settings is used as-is, without probing.
    Otherwise the platform's candidates are probed in order.

    Raises:
        ConfigError: If the named manager is not a known profile.
    """
    if settings.manager:
        profile = find_profile(settings.manager, extra=settings.profiles)
        if profile is None:
            raise ConfigError(f"Unknown package manager: {settings.manager}")
        logger.info("Using configured package manager: %s", profile.name)
        return profile

    platform_id = platform_id or current_platform()
    return detect(
        platform_id,
        profiles=profiles_for(platform_id, extra=settings.profiles),
        probe=probe,
    )
