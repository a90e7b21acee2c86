"""Shared test fixtures for namereg tests."""

from __future__ import annotations

import pytest

from namereg.protocol import Keypair, generate_keypair

_ENV_VARS = (
    "NAMEREG_CORE_HOST",
    "NAMEREG_CORE_PORT",
    "NAMEREG_CORE_API_PASSWORD",
    "NAMEREG_REGISTER_URL",
    "NAMEREG_GAIA_HUB_URL",
    "NAMEREG_OWNER_KEY",
    "NAMEREG_PAYMENT_KEY",
    "NAMEREG_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def namereg_home(tmp_path, monkeypatch):
    """Isolate every test from the developer's ~/.namereg and NAMEREG_* env."""
    home = tmp_path / "namereg_home"
    home.mkdir()
    monkeypatch.setenv("NAMEREG_HOME", str(home))
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture()
def keypair() -> Keypair:
    """Return a fresh owner keypair."""
    return generate_keypair()


@pytest.fixture()
def owner_address() -> str:
    return "1J3PUxY5uDShUnHRrMyU6yKtoHEUPhKULs"


@pytest.fixture()
def profile_url() -> str:
    return "https://gaia.test/1J3PUxY5uDShUnHRrMyU6yKtoHEUPhKULs/profile.json"
