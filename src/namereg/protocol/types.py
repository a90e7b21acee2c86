"""Core constants and utility functions for namereg."""

from __future__ import annotations

import base64
from datetime import datetime, timedelta, timezone


# The core node registers with uncompressed addresses while clients derive
# compressed ones.  Appending this marker to a hex key tells core to use the
# compressed encoding (see the Wallet Import Format).
COMPRESSED_KEY_SUFFIX = "01"

# Zone file TTL in seconds
DEFAULT_ZONE_FILE_TTL = 3600

# Profile tokens expire one year after issue
PROFILE_TOKEN_LIFETIME = timedelta(days=365)

# Blank profile signed and uploaded for every freshly registered name
DEFAULT_PROFILE = {
    "@type": "Person",
    "@context": "http://schema.org",
}


def b64_encode(data: bytes) -> str:
    """URL-safe base64 encode *data*, stripping padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64_decode(s: str) -> bytes:
    """URL-safe base64 decode *s*, tolerating missing padding."""
    padding = 4 - len(s) % 4
    if padding != 4:
        s += "=" * padding
    return base64.urlsafe_b64decode(s)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_timestamp(when: datetime | None = None) -> str:
    """Return a canonical UTC timestamp: ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    ts = (when or utc_now()).isoformat(timespec="milliseconds")
    return ts.replace("+00:00", "Z")
