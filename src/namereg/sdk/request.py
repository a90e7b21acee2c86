"""Registration request builder.

Subdomain registrations are off-chain operations delegated to the parent's
registrar and need only ``{name, owner_address, zonefile}``.  Top-level
registrations commit a transaction on the shared ledger and carry the
``min_confs``/``unsafe`` flags plus the payment key.  The two shapes are
never interchanged.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from namereg.protocol import (
    MissingPaymentKeyError,
    RegistrarNotConfiguredError,
    authorization_header_value,
    encode_compressed_key,
    get_name_label,
    get_name_suffix,
    is_subdomain,
)
from namereg.sdk.config import ApiConfig


@dataclass(frozen=True)
class RegistrationRequest:
    """Target endpoint and body of a registration submission."""

    url: str
    body: dict
    is_subdomain: bool

    def content(self) -> str:
        return json.dumps(self.body)


def registration_headers(api: ApiConfig) -> dict[str, str]:
    """Headers sent to the core node and registrars."""
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Authorization": authorization_header_value(api.core_api_password),
    }


def select_register_url(api: ApiConfig, domain_name: str) -> str:
    """Return the endpoint that registers *domain_name*.

    Raises:
        RegistrarNotConfiguredError: If *domain_name* is a subdomain of a
            suffix with no configured registrar.
    """
    if not is_subdomain(domain_name):
        return api.register_url
    suffix = get_name_suffix(domain_name)
    registrar = api.subdomains.get(suffix)
    if registrar is None:
        raise RegistrarNotConfiguredError(
            f"No subdomain registrar configured for {suffix}"
        )
    return registrar.register_url


def build_registration_body(
    domain_name: str,
    owner_address: str,
    zone_file: str,
    *,
    is_subdomain: bool,
    payment_key: str | None = None,
) -> dict:
    """Build the request body for either registration shape.

    Raises:
        MissingPaymentKeyError: If a top-level body has no *payment_key*.
    """
    if is_subdomain:
        return {
            "name": get_name_label(domain_name),
            "owner_address": owner_address,
            "zonefile": zone_file,
        }

    if not payment_key:
        raise MissingPaymentKeyError(domain_name)

    return {
        "name": domain_name,
        "owner_address": owner_address,
        "zonefile": zone_file,
        "min_confs": 0,
        "unsafe": True,
        "payment_key": encode_compressed_key(payment_key),
    }


def build_registration_request(
    api: ApiConfig,
    domain_name: str,
    owner_address: str,
    zone_file: str,
    payment_key: str | None = None,
) -> RegistrationRequest:
    """Select the endpoint and build the body for *domain_name*."""
    subdomain = is_subdomain(domain_name)
    url = select_register_url(api, domain_name)
    body = build_registration_body(
        domain_name,
        owner_address,
        zone_file,
        is_subdomain=subdomain,
        payment_key=payment_key,
    )
    return RegistrationRequest(url=url, body=body, is_subdomain=subdomain)
