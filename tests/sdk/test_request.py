"""Tests for the registration request builder."""

from __future__ import annotations

import json

import pytest

from namereg.protocol.errors import MissingPaymentKeyError, RegistrarNotConfiguredError
from namereg.sdk.request import (
    build_registration_body,
    build_registration_request,
    registration_headers,
    select_register_url,
)

ZONE_FILE = '$ORIGIN alice.id\n$TTL 3600\n_http._tcp\tIN\tURI\t10\t1\t"https://gaia.test/p.json"\n\n'


class TestRegistrationBody:
    def test_subdomain_shape(self, owner_address):
        body = build_registration_body(
            "alice.id", owner_address, ZONE_FILE, is_subdomain=True
        )
        assert body == {
            "name": "alice",
            "owner_address": owner_address,
            "zonefile": ZONE_FILE,
        }

    def test_subdomain_ignores_payment_key(self, owner_address):
        body = build_registration_body(
            "alice.personal.id", owner_address, ZONE_FILE,
            is_subdomain=True, payment_key="deadbeef",
        )
        assert "payment_key" not in body
        assert "min_confs" not in body
        assert "unsafe" not in body

    def test_top_level_shape(self, owner_address):
        body = build_registration_body(
            "alice", owner_address, ZONE_FILE,
            is_subdomain=False, payment_key="deadbeef",
        )
        assert body == {
            "name": "alice",
            "owner_address": owner_address,
            "zonefile": ZONE_FILE,
            "min_confs": 0,
            "unsafe": True,
            "payment_key": "deadbeef01",
        }

    @pytest.mark.parametrize("payment_key", [None, ""])
    def test_top_level_requires_payment_key(self, owner_address, payment_key):
        with pytest.raises(MissingPaymentKeyError):
            build_registration_body(
                "alice.id", owner_address, ZONE_FILE,
                is_subdomain=False, payment_key=payment_key,
            )


class TestSelectRegisterUrl:
    def test_top_level_uses_core(self, api):
        assert select_register_url(api, "alice.id") == "http://core.test:6270/v1/names"

    def test_subdomain_uses_suffix_registrar(self, api):
        assert select_register_url(api, "alice.personal.id") == "http://registrar.test/register"

    def test_unknown_suffix(self, api):
        with pytest.raises(RegistrarNotConfiguredError, match="other.id"):
            select_register_url(api, "alice.other.id")


class TestBuildRegistrationRequest:
    def test_top_level_request(self, api, owner_address):
        request = build_registration_request(
            api, "alice.id", owner_address, ZONE_FILE, payment_key="deadbeef"
        )
        assert request.url == api.register_url
        assert request.is_subdomain is False
        assert request.body["name"] == "alice.id"
        assert json.loads(request.content()) == request.body

    def test_subdomain_request(self, api, owner_address):
        request = build_registration_request(
            api, "alice.personal.id", owner_address, ZONE_FILE
        )
        assert request.url == "http://registrar.test/register"
        assert request.is_subdomain is True
        assert request.body == {
            "name": "alice",
            "owner_address": owner_address,
            "zonefile": ZONE_FILE,
        }


class TestHeaders:
    def test_headers(self, api):
        assert registration_headers(api) == {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": "bearer s3cret",
        }
