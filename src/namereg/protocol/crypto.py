"""Cryptographic primitives for namereg.

Wraps PyNaCl (libsodium) for Ed25519 key generation and signing.  Profile
tokens are JWT-style compact strings (``header.payload.signature``) signed
with ``EdDSA``; storage hub auth tokens are signed challenge texts.

This module never hand-rolls crypto -- every operation delegates to PyNaCl.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

import nacl.exceptions
import uuid6
from nacl.encoding import HexEncoder
from nacl.signing import SigningKey, VerifyKey

from namereg.protocol.errors import (
    InvalidKeyError,
    InvalidProfileTokenError,
    ProfileSigningError,
)
from namereg.protocol.types import (
    COMPRESSED_KEY_SUFFIX,
    PROFILE_TOKEN_LIFETIME,
    b64_decode,
    b64_encode,
    utc_now,
    utc_timestamp,
)


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Keypair:
    """An owner keypair as hex strings.

    ``private_key`` is the 32-byte Ed25519 seed; ``public_key`` is the
    matching verify key.
    """

    private_key: str
    public_key: str

    @classmethod
    def from_private_key(cls, private_key: str) -> Keypair:
        """Derive the keypair for a hex-encoded seed.

        Raises:
            InvalidKeyError: If *private_key* is not a 32-byte hex seed.
        """
        sk = _signing_key_from_hex(private_key)
        return cls(
            private_key=private_key.lower(),
            public_key=sk.verify_key.encode(HexEncoder).decode("ascii"),
        )

    @property
    def signing_key(self) -> SigningKey:
        return _signing_key_from_hex(self.private_key)


def _signing_key_from_hex(s: str) -> SigningKey:
    try:
        return SigningKey(s.encode("ascii"), encoder=HexEncoder)
    except (AttributeError, ValueError, TypeError, nacl.exceptions.CryptoError) as exc:
        raise InvalidKeyError(f"Invalid private key: {exc}") from exc


def generate_keypair() -> Keypair:
    """Generate a fresh Ed25519 owner keypair."""
    sk = SigningKey.generate()
    return Keypair(
        private_key=sk.encode(HexEncoder).decode("ascii"),
        public_key=sk.verify_key.encode(HexEncoder).decode("ascii"),
    )


def encode_compressed_key(key: str) -> str:
    """Append the compressed-address marker to a hex key."""
    return f"{key}{COMPRESSED_KEY_SUFFIX}"


def authorization_header_value(secret: str) -> str:
    """Format the core API password as an ``Authorization`` header value."""
    return f"bearer {secret}"


# ---------------------------------------------------------------------------
# Canonical JSON
# ---------------------------------------------------------------------------

def canonicalize(data: dict) -> bytes:
    """Produce deterministic JSON bytes: sorted keys, compact, ASCII."""
    return json.dumps(
        data, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


# ---------------------------------------------------------------------------
# Profile tokens
# ---------------------------------------------------------------------------

_TOKEN_HEADER = {"typ": "JWT", "alg": "EdDSA"}


def sign_profile_token(profile: dict, keypair: Keypair) -> str:
    """Sign *profile* as a compact token issued by *keypair*.

    Raises:
        ProfileSigningError: If the keypair cannot sign.
    """
    issued = utc_now()
    payload = {
        "jti": str(uuid6.uuid7()),
        "iat": utc_timestamp(issued),
        "exp": utc_timestamp(issued + PROFILE_TOKEN_LIFETIME),
        "subject": {"publicKey": keypair.public_key},
        "issuer": {"publicKey": keypair.public_key},
        "claim": profile,
    }
    signing_input = f"{b64_encode(canonicalize(_TOKEN_HEADER))}.{b64_encode(canonicalize(payload))}"
    try:
        signed = keypair.signing_key.sign(signing_input.encode("ascii"))
    except InvalidKeyError as exc:
        raise ProfileSigningError(str(exc)) from exc
    return f"{signing_input}.{b64_encode(signed.signature)}"


def decode_profile_token(token: str) -> dict:
    """Split a compact token into ``header``, ``payload`` and ``signature``.

    Does not verify the signature.

    Raises:
        InvalidProfileTokenError: If *token* is not a well-formed token.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise InvalidProfileTokenError("Profile token must have three segments")
    try:
        header = json.loads(b64_decode(parts[0]))
        payload = json.loads(b64_decode(parts[1]))
    except ValueError as exc:
        raise InvalidProfileTokenError(f"Malformed profile token: {exc}") from exc
    return {"header": header, "payload": payload, "signature": parts[2]}


def verify_profile_token(token: str) -> dict:
    """Verify *token* against its issuer's public key and return the payload.

    Raises:
        InvalidProfileTokenError: If the token is malformed or the signature
            does not match.
    """
    decoded = decode_profile_token(token)
    try:
        issuer_key = decoded["payload"]["issuer"]["publicKey"]
        vk = VerifyKey(issuer_key, encoder=HexEncoder)
        signing_input, _, _ = token.rpartition(".")
        vk.verify(signing_input.encode("ascii"), b64_decode(decoded["signature"]))
    except (KeyError, TypeError, ValueError, nacl.exceptions.CryptoError) as exc:
        raise InvalidProfileTokenError(f"Profile token verification failed: {exc}") from exc
    return decoded["payload"]


def sign_profile_for_upload(profile: dict, keypair: Keypair) -> str:
    """Sign *profile* and wrap it as the token file stored on the hub.

    The token file is a JSON list holding one ``{"token", "decodedToken"}``
    record.
    """
    token = sign_profile_token(profile, keypair)
    record = {"token": token, "decodedToken": decode_profile_token(token)}
    return json.dumps([record], indent=2)


# ---------------------------------------------------------------------------
# Storage hub auth
# ---------------------------------------------------------------------------

def make_hub_auth_token(challenge_text: str, keypair: Keypair) -> str:
    """Sign the hub's *challenge_text* into a bearer token.

    The token is URL-safe base64 of ``{"publickey", "signature"}`` JSON.
    """
    signed = keypair.signing_key.sign(challenge_text.encode("utf-8"))
    body = {
        "publickey": keypair.public_key,
        "signature": signed.signature.hex(),
    }
    return b64_encode(canonicalize(body))
