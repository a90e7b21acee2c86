"""namereg protocol -- pure building blocks for name registration.

Public API re-exports for ``namereg.protocol``.
"""

from namereg.protocol.types import (
    COMPRESSED_KEY_SUFFIX,
    DEFAULT_PROFILE,
    DEFAULT_ZONE_FILE_TTL,
    b64_encode,
    b64_decode,
    utc_timestamp,
)

from namereg.protocol.errors import (
    NameRegError,
    InvalidNameError,
    InvalidZoneFileError,
    InvalidKeyError,
    PreconditionError,
    MissingPaymentKeyError,
    RegistrarNotConfiguredError,
    ProfileError,
    ProfileSigningError,
    InvalidProfileTokenError,
    ProfileUploadError,
    OwnerKeyProvisioningError,
    RegistrarError,
    RegistrarResponseError,
    RegistrarRejectedError,
)

from namereg.protocol.names import (
    is_subdomain,
    get_name_suffix,
    get_name_label,
    validate_name,
)

from namereg.protocol.zonefile import make_profile_zone_file

from namereg.protocol.crypto import (
    Keypair,
    generate_keypair,
    encode_compressed_key,
    authorization_header_value,
    canonicalize,
    sign_profile_token,
    decode_profile_token,
    verify_profile_token,
    sign_profile_for_upload,
    make_hub_auth_token,
)

__all__ = [
    # Types
    "COMPRESSED_KEY_SUFFIX",
    "DEFAULT_PROFILE",
    "DEFAULT_ZONE_FILE_TTL",
    "b64_encode",
    "b64_decode",
    "utc_timestamp",
    # Errors
    "NameRegError",
    "InvalidNameError",
    "InvalidZoneFileError",
    "InvalidKeyError",
    "PreconditionError",
    "MissingPaymentKeyError",
    "RegistrarNotConfiguredError",
    "ProfileError",
    "ProfileSigningError",
    "InvalidProfileTokenError",
    "ProfileUploadError",
    "OwnerKeyProvisioningError",
    "RegistrarError",
    "RegistrarResponseError",
    "RegistrarRejectedError",
    # Names
    "is_subdomain",
    "get_name_suffix",
    "get_name_label",
    "validate_name",
    # Zone files
    "make_profile_zone_file",
    # Crypto
    "Keypair",
    "generate_keypair",
    "encode_compressed_key",
    "authorization_header_value",
    "canonicalize",
    "sign_profile_token",
    "decode_profile_token",
    "verify_profile_token",
    "sign_profile_for_upload",
    "make_hub_auth_token",
]
