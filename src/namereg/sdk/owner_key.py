"""Owner credential provisioning on the core node.

Top-level names are registered on-chain by the core node's wallet, so the
owner key has to be set there before submission.  Subdomains are registered
off-chain by the parent's registrar and skip this step.
"""

from __future__ import annotations

import json
import logging

import httpx

from namereg.protocol import Keypair, encode_compressed_key

logger = logging.getLogger(__name__)


async def provision_owner_credential(
    url: str,
    headers: dict[str, str],
    keypair: Keypair,
    is_subdomain: bool,
    *,
    client: httpx.AsyncClient,
) -> None:
    """Replace the core node's owner key with *keypair*'s marked public key.

    The body is a JSON string literal, not an object.  Transport errors
    propagate unchanged; the response is not interpreted.
    """
    if is_subdomain:
        logger.debug("Skipping core owner key for subdomain")
        return

    body = json.dumps(encode_compressed_key(keypair.public_key))
    logger.debug("Setting core owner key at %s", url)
    resp = await client.put(url, headers=headers, content=body)
    logger.debug("Core owner key response: %s", resp.status_code)
