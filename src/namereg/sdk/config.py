"""API endpoint configuration via dataclass (no pydantic -- instant construction)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path

logger = logging.getLogger(__name__)

_DEFAULT_CORE_HOST = "localhost"
_DEFAULT_CORE_PORT = 6270
_DEFAULT_GAIA_HUB_URL = "http://localhost:3000"

_ENV_VARS = {
    "core_host": "NAMEREG_CORE_HOST",
    "core_port": "NAMEREG_CORE_PORT",
    "core_api_password": "NAMEREG_CORE_API_PASSWORD",
    "register_url": "NAMEREG_REGISTER_URL",
    "gaia_hub_url": "NAMEREG_GAIA_HUB_URL",
}


@dataclass
class SubdomainRegistrar:
    """Registrar endpoint that accepts subdomains under one parent suffix."""

    register_url: str


def _coerce_registrar(entry) -> SubdomainRegistrar:
    """Accept a registrar, a ``{"register_url": ...}`` table, or a bare URL."""
    if isinstance(entry, SubdomainRegistrar):
        return entry
    if isinstance(entry, dict):
        return SubdomainRegistrar(register_url=entry["register_url"])
    return SubdomainRegistrar(register_url=str(entry))


@dataclass
class ApiConfig:
    """Endpoints and credentials for a registration attempt.

    Priority (highest wins): constructor arg > env var > config.toml > default.

    ``config.toml`` lives in ``data_dir`` (``NAMEREG_HOME`` or
    ``~/.namereg``)::

        [api]
        core_host = "localhost"
        core_port = 6270

        [subdomains."personal.id"]
        register_url = "https://registrar.example.com/register"
    """

    core_host: str | None = None
    core_port: int | str | None = None
    core_api_password: str | None = None
    register_url: str | None = None
    gaia_hub_url: str | None = None
    subdomains: dict[str, SubdomainRegistrar] = field(default_factory=dict)
    data_dir: Path | str | None = None

    def __post_init__(self) -> None:
        if self.data_dir is None:
            home = os.getenv("NAMEREG_HOME")
            self.data_dir = Path(home) if home else Path.home() / ".namereg"
        else:
            self.data_dir = Path(self.data_dir)

        file_api: dict = {}
        file_subdomains: dict = {}
        config_path = Path(self.data_dir) / "config.toml"
        if config_path.exists():
            file_api, file_subdomains = self._load_config_file(config_path)

        for name, env_var in _ENV_VARS.items():
            if getattr(self, name) is not None:
                continue
            env_value = os.getenv(env_var)
            if env_value is not None:
                setattr(self, name, env_value)
            elif name in file_api:
                setattr(self, name, file_api[name])

        if self.core_host is None:
            self.core_host = _DEFAULT_CORE_HOST
        if self.core_port is None:
            self.core_port = _DEFAULT_CORE_PORT
        if self.core_api_password is None:
            self.core_api_password = ""
        if self.gaia_hub_url is None:
            self.gaia_hub_url = _DEFAULT_GAIA_HUB_URL

        try:
            self.core_port = int(self.core_port)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid core_port {self.core_port!r}") from None
        if not 0 < self.core_port < 65536:
            raise ValueError(f"Invalid core_port {self.core_port!r}")

        if self.register_url is None:
            self.register_url = f"{self.core_url}/v1/names"

        # Explicit subdomain registrars win over ones from the config file
        registrars = {
            suffix: _coerce_registrar(entry)
            for suffix, entry in file_subdomains.items()
            if isinstance(entry, dict) and "register_url" in entry
        }
        for suffix, entry in self.subdomains.items():
            registrars[suffix] = _coerce_registrar(entry)
        self.subdomains = registrars

    @property
    def core_url(self) -> str:
        return f"http://{self.core_host}:{self.core_port}"

    @property
    def owner_key_url(self) -> str:
        """Core endpoint holding the wallet's owner key."""
        return f"{self.core_url}/v1/wallet/keys/owner"

    def to_dict(self, *, mask_secrets: bool = True) -> dict:
        """Plain-dict view of the resolved configuration."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "subdomains":
                value = {k: v.register_url for k, v in value.items()}
            elif f.name == "data_dir":
                value = str(value)
            elif f.name == "core_api_password" and mask_secrets and value:
                value = "********"
            data[f.name] = value
        return data

    def _load_config_file(self, path: Path) -> tuple[dict, dict]:
        """Load optional config.toml, returning its ``api`` and ``subdomains`` tables."""
        try:
            import tomllib
        except ModuleNotFoundError:
            import tomli as tomllib  # type: ignore[no-redef]  # Python 3.10 fallback

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            logger.warning("Failed to load config file %s", path, exc_info=True)
            return {}, {}

        return data.get("api", {}), data.get("subdomains", {})
