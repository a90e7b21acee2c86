"""namereg exception hierarchy.

All registration-specific exceptions inherit from :class:`NameRegError`.
"""

from __future__ import annotations


class NameRegError(Exception):
    """Base exception for all namereg errors."""


class InvalidNameError(NameRegError):
    """Raised when a name string fails validation."""


class InvalidZoneFileError(NameRegError):
    """Raised when a zone file cannot be built from its inputs."""


class InvalidKeyError(NameRegError):
    """Raised when hex key material cannot be decoded into a keypair."""


class PreconditionError(NameRegError):
    """Raised when an attempt cannot start; detected before any I/O."""


class MissingPaymentKeyError(PreconditionError):
    """Raised when a top-level registration has no payment key."""

    def __init__(self, domain_name: str = "") -> None:
        self.domain_name = domain_name
        if domain_name:
            super().__init__(f"Missing payment key for {domain_name}")
        else:
            super().__init__("Missing payment key")


class RegistrarNotConfiguredError(PreconditionError):
    """Raised when no registrar endpoint is configured for a subdomain suffix."""


class ProfileError(NameRegError):
    """Base for profile signing and upload failures."""


class ProfileSigningError(ProfileError):
    """Raised when the default profile cannot be signed."""


class InvalidProfileTokenError(ProfileError):
    """Raised when a profile token is malformed or its signature is invalid."""


class ProfileUploadError(ProfileError):
    """Raised when the signed profile cannot be stored."""


class OwnerKeyProvisioningError(NameRegError):
    """Raised when the owner key cannot be set on the core node."""


class RegistrarError(NameRegError):
    """Base for failures of the registration submission."""


class RegistrarResponseError(RegistrarError):
    """Raised on transport failures or undecodable registrar responses."""


class RegistrarRejectedError(RegistrarError):
    """Raised when the registrar answers with a structured error."""

    def __init__(self, message) -> None:
        self.message = message
        super().__init__(str(message))
