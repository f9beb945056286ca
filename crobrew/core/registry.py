"""
Profile registry — which package managers to try on which platform.

Static data keyed by the lower-cased OS name (``linux``, ``windows``,
``darwin``). Candidates are listed in probe order: the detector picks
the first one whose binary answers ``--version``.

Unknown platforms (ChromeOS containers, BSDs, ...) borrow the linux list.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Mapping, Sequence

from crobrew.core.models.profile import Profile

logger = logging.getLogger(__name__)

DEFAULT_PLATFORM = "linux"


# ── Built-in profiles ───────────────────────────────────────────


_REGISTRY: dict[str, tuple[Profile, ...]] = {
    "linux": (
        Profile(
            name="apt",
            search="apt-cache search",
            update="sudo apt-get update",
            install="sudo apt-get install",
            remove="sudo apt-get remove",
        ),
        Profile(
            name="dnf",
            search="dnf search",
            # check-update exits 100 when updates are available
            update="sudo dnf check-update",
            install="sudo dnf install",
            remove="sudo dnf remove",
            success_codes=(0, 100),
        ),
    ),
    "windows": (
        Profile(
            name="wsl-apt",
            search="wsl apt-cache search",
            update="wsl sudo apt-get update",
            install="wsl sudo apt-get install",
            remove="wsl sudo apt-get remove",
        ),
        Profile(
            name="choco",
            search="choco search",
            update="choco upgrade all -y",
            install="choco install",
            remove="choco uninstall",
        ),
    ),
    "darwin": (
        Profile(
            name="brew",
            search="brew search",
            update="brew update",
            install="brew install",
            remove="brew uninstall",
        ),
    ),
}

FALLBACK_PROFILE: Profile = _REGISTRY[DEFAULT_PLATFORM][0]


def current_platform() -> str:
    """Lower-cased OS identifier of the running host."""
    return platform.system().lower() or DEFAULT_PLATFORM


def platforms() -> list[str]:
    """Platform ids with built-in profiles."""
    return list(_REGISTRY)


def profiles_for(
    platform_id: str,
    extra: Mapping[str, Sequence[Profile]] | None = None,
) -> list[Profile]:
    """Ordered candidate profiles for a platform.

    Args:
        platform_id: OS identifier, as returned by ``current_platform()``.
        extra: User-configured profiles keyed by platform. They are
            tried before the built-ins of the same platform.

    Returns:
        Non-empty list of profiles in probe order.
    """
    key = (platform_id or "").strip().lower()
    builtin = _REGISTRY.get(key)
    if builtin is None:
        logger.debug("No profiles for platform %r, using %s", platform_id, DEFAULT_PLATFORM)
        key = DEFAULT_PLATFORM
        builtin = _REGISTRY[DEFAULT_PLATFORM]

    user = list((extra or {}).get(key, ()))
    return user + list(builtin)


def find_profile(
    name: str,
    extra: Mapping[str, Sequence[Profile]] | None = None,
) -> Profile | None:
    """Look up a profile by name across every platform.

    User-configured profiles shadow built-ins with the same name.
    """
    wanted = name.strip().lower()
    for group in (*(extra or {}).values(), *_REGISTRY.values()):
        for profile in group:
            if profile.name.lower() == wanted:
                return profile
    return None
