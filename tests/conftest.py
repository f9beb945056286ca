"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from crobrew.adapters.mock import MockAdapter
from crobrew.core.models.profile import Profile
from crobrew.core.registry import FALLBACK_PROFILE


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    """Keep the user's real config and log settings out of every test."""
    config_home = tmp_path / "xdg"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    for var in ("CROBREW_CONFIG", "CROBREW_LOG_LEVEL", "CROBREW_LOG_FILE", "CROBREW_LOG_FILE_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return config_home


@pytest.fixture
def no_managers(monkeypatch) -> list[str]:
    """Make every detection probe fail; returns the probed binaries."""
    probed: list[str] = []

    def _probe(binary: str) -> bool:
        probed.append(binary)
        return False

    monkeypatch.setattr("crobrew.core.services.detection.probe_binary", _probe)
    return probed


@pytest.fixture
def apt_profile() -> Profile:
    return FALLBACK_PROFILE


@pytest.fixture
def custom_profile() -> Profile:
    return Profile(
        name="pacman",
        search="pacman -Ss",
        update="sudo pacman -Sy",
        install="sudo pacman -S --needed",
        remove="sudo pacman -R",
    )


@pytest.fixture
def mock_adapter() -> MockAdapter:
    return MockAdapter()
