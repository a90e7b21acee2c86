"""namereg -- name registration workflow for a decentralized naming service.

Top-level convenience re-exports::

    from namereg import ApiConfig, register_name, NotificationLog
    from namereg.protocol import make_profile_zone_file  # pure helpers
"""

__version__ = "0.1.0"

from namereg.sdk import (
    ApiConfig,
    Identity,
    LocalIdentities,
    Notification,
    NotificationLog,
    NotificationType,
    before_register,
    register_name,
    register_name_sync,
)

__all__ = [
    "__version__",
    "ApiConfig",
    "Identity",
    "LocalIdentities",
    "Notification",
    "NotificationLog",
    "NotificationType",
    "before_register",
    "register_name",
    "register_name_sync",
]
