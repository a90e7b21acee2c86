"""Profile upload to a storage hub.

The hub protocol:

1. ``GET {hub}/hub_info`` returns ``read_url_prefix`` and ``challenge_text``.
2. The challenge is signed into a bearer token (see
   :func:`namereg.protocol.crypto.make_hub_auth_token`).
3. ``POST {hub}/store/{bucket}/profile.json`` stores the token file and
   answers with its ``publicURL``.
"""

from __future__ import annotations

import logging

import httpx

from namereg.protocol import (
    Keypair,
    NameRegError,
    ProfileUploadError,
    make_hub_auth_token,
)
from namereg.sdk.config import ApiConfig
from namereg.sdk.identity import Identity

logger = logging.getLogger(__name__)

PROFILE_FILENAME = "profile.json"


async def upload_profile(
    api: ApiConfig,
    identity: Identity,
    keypair: Keypair,
    signed_profile: str,
    *,
    client: httpx.AsyncClient,
) -> str:
    """Store *signed_profile* on the hub and return its public URL.

    Raises:
        ProfileUploadError: On transport failures, non-2xx answers, or
            malformed hub responses.
    """
    hub_url = api.gaia_hub_url.rstrip("/")
    bucket = identity.owner_address

    try:
        info_resp = await client.get(f"{hub_url}/hub_info")
        info_resp.raise_for_status()
        hub_info = info_resp.json()
        read_url_prefix = hub_info["read_url_prefix"]
        challenge_text = hub_info.get("challenge_text", "")

        token = make_hub_auth_token(challenge_text, keypair)
        logger.debug("Storing %s for %s on %s", PROFILE_FILENAME, bucket, hub_url)
        store_resp = await client.post(
            f"{hub_url}/store/{bucket}/{PROFILE_FILENAME}",
            content=signed_profile,
            headers={
                "Authorization": f"bearer {token}",
                "Content-Type": "application/json",
            },
        )
        store_resp.raise_for_status()
        data = store_resp.json()
    except httpx.HTTPError as exc:
        raise ProfileUploadError(f"Profile upload to {hub_url} failed: {exc}") from exc
    except (KeyError, TypeError, ValueError, NameRegError) as exc:
        raise ProfileUploadError(f"Unexpected response from {hub_url}: {exc}") from exc

    public_url = data.get("publicURL") if isinstance(data, dict) else None
    if not public_url:
        public_url = f"{read_url_prefix}{bucket}/{PROFILE_FILENAME}"
    return public_url
