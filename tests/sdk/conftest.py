"""Shared fixtures for namereg SDK tests.

``FakeBackend`` plays the storage hub, the core node and the subdomain
registrar behind an ``httpx.MockTransport`` and records every request.
"""

from __future__ import annotations

import json

import httpx
import pytest

from namereg.sdk.config import ApiConfig, SubdomainRegistrar
from namereg.sdk.identity import Identity, LocalIdentities
from namereg.sdk.notifications import NotificationLog

HUB_HOST = "hub.test"
CORE_HOST = "core.test"
REGISTRAR_HOST = "registrar.test"
READ_URL_PREFIX = "https://gaia.test/"
CHALLENGE_TEXT = '["gaiahub","2026","hub.test","blockstack_storage_please_sign"]'


class FakeBackend:
    """Routes hub, core and registrar requests; every request is recorded.

    Set ``*_error`` to an exception to make that endpoint fail at the
    transport level, or change ``register_text`` to control the
    registrar's response body.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.hub_error: Exception | None = None
        self.owner_key_error: Exception | None = None
        self.register_error: Exception | None = None
        self.hub_store_status = 200
        self.owner_key_status = 200
        self.register_status = 200
        self.register_text = json.dumps({"status": True, "transaction_hash": "ab" * 32})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        host = request.url.host
        path = request.url.path

        if host == HUB_HOST:
            if self.hub_error is not None:
                raise self.hub_error
            if path == "/hub_info":
                return httpx.Response(
                    200,
                    json={"read_url_prefix": READ_URL_PREFIX, "challenge_text": CHALLENGE_TEXT},
                )
            if path.startswith("/store/"):
                stored = path[len("/store/"):]
                return httpx.Response(
                    self.hub_store_status, json={"publicURL": f"{READ_URL_PREFIX}{stored}"}
                )

        if host == CORE_HOST and path == "/v1/wallet/keys/owner":
            if self.owner_key_error is not None:
                raise self.owner_key_error
            return httpx.Response(self.owner_key_status, json={"status": True})

        if (host == CORE_HOST and path == "/v1/names") or (
            host == REGISTRAR_HOST and path == "/register"
        ):
            if self.register_error is not None:
                raise self.register_error
            return httpx.Response(self.register_status, text=self.register_text)

        return httpx.Response(404, json={"error": "not found"})

    def calls(self, method: str | None = None, path: str | None = None) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if (method is None or r.method == method)
            and (path is None or r.url.path == path)
        ]


class RecordingIdentities(LocalIdentities):
    """LocalIdentities that also records each add_username call."""

    def __init__(self, identities: list[Identity]) -> None:
        super().__init__(identities)
        self.calls: list[tuple[int, str]] = []

    def add_username(self, identity_index: int, domain_name: str) -> None:
        self.calls.append((identity_index, domain_name))
        super().add_username(identity_index, domain_name)


@pytest.fixture()
def api(tmp_path) -> ApiConfig:
    """ApiConfig pointed at the fake backend hosts."""
    return ApiConfig(
        core_host=CORE_HOST,
        core_port=6270,
        core_api_password="s3cret",
        register_url=f"http://{CORE_HOST}:6270/v1/names",
        gaia_hub_url=f"http://{HUB_HOST}",
        subdomains={"personal.id": SubdomainRegistrar(f"http://{REGISTRAR_HOST}/register")},
        data_dir=tmp_path,
    )


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
async def client(backend):
    """httpx.AsyncClient wired to the fake backend (in-process)."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(backend.handler)) as c:
        yield c


@pytest.fixture()
def identity(owner_address) -> Identity:
    return Identity(owner_address=owner_address)


@pytest.fixture()
def identities(identity) -> RecordingIdentities:
    return RecordingIdentities([Identity(owner_address="1Other"), identity])


@pytest.fixture()
def notifications() -> NotificationLog:
    return NotificationLog()


@pytest.fixture()
def read_url_prefix() -> str:
    return READ_URL_PREFIX


@pytest.fixture()
def challenge_text() -> str:
    return CHALLENGE_TEXT
