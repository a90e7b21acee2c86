"""namereg SDK -- async registration workflow against a naming service."""

from namereg.sdk.config import ApiConfig, SubdomainRegistrar
from namereg.sdk.identity import Identity, IdentityTracker, LocalIdentities
from namereg.sdk.notifications import Notification, NotificationLog, NotificationType
from namereg.sdk.registration import (
    RegistrationContext,
    before_register,
    register_name,
    register_name_sync,
)

__all__ = [
    "ApiConfig",
    "SubdomainRegistrar",
    "Identity",
    "IdentityTracker",
    "LocalIdentities",
    "Notification",
    "NotificationLog",
    "NotificationType",
    "RegistrationContext",
    "before_register",
    "register_name",
    "register_name_sync",
]
