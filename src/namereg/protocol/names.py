"""Name parsing and classification.

A top-level name has the form ``label.namespace`` (e.g. ``alice.id``).
A subdomain is delegated under a top-level name and carries one more
label (e.g. ``alice.personal.id``); it is registered off-chain through the
parent's registrar.
"""

from __future__ import annotations

import re

from namereg.protocol.errors import InvalidNameError

# Label: 1-37 chars, lowercase alphanumeric plus hyphen, underscore and plus.
_LABEL_RE = re.compile(r"^[a-z0-9_+-]{1,37}$")

_MAX_NAME_LEN = 255


def is_subdomain(name: str) -> bool:
    """Return ``True`` when *name* is delegated under a parent name."""
    return len(name.split(".")) > 2


def get_name_suffix(name: str) -> str:
    """Return the parent suffix of *name* (everything after the first label)."""
    return ".".join(name.split(".")[1:])


def get_name_label(name: str) -> str:
    """Return the local part of *name* (the label before the first dot)."""
    return name.split(".")[0]


def validate_name(name: str) -> str:
    """Validate *name* and return it unchanged.

    Raises:
        InvalidNameError: If *name* is empty, too long, or has a bad label.
    """
    if not name:
        raise InvalidNameError("Name must not be empty")
    if len(name) > _MAX_NAME_LEN:
        raise InvalidNameError(
            f"Name exceeds {_MAX_NAME_LEN} characters: {name!r}"
        )
    for label in name.split("."):
        if not _LABEL_RE.match(label):
            raise InvalidNameError(f"Invalid name: {name!r}")
    return name
