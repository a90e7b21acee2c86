"""Zone files pointing a registered name at its profile token file.

A profile zone file has one ``URI`` record under ``_http._tcp``::

    $ORIGIN alice.id
    $TTL 3600
    _http._tcp	IN	URI	10	1	"https://hub.example.com/1Abc/profile.json"
"""

from __future__ import annotations

from namereg.protocol.errors import InvalidZoneFileError
from namereg.protocol.types import DEFAULT_ZONE_FILE_TTL

_URI_PRIORITY = 10
_URI_WEIGHT = 1


def make_profile_zone_file(
    origin: str, token_file_url: str, ttl: int = DEFAULT_ZONE_FILE_TTL
) -> str:
    """Build the zone file for *origin* pointing at *token_file_url*.

    Raises:
        InvalidZoneFileError: If *token_file_url* is not an absolute URL.
    """
    if "://" not in token_file_url:
        raise InvalidZoneFileError(f"Invalid token file url: {token_file_url!r}")

    lines = [
        f"$ORIGIN {origin}",
        f"$TTL {ttl}",
        f'_http._tcp\tIN\tURI\t{_URI_PRIORITY}\t{_URI_WEIGHT}\t"{token_file_url}"',
    ]
    return "\n".join(lines) + "\n\n"
