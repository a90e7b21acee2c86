"""Identity handles and the identity-tracking interface."""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Identity:
    """An identity owned by the caller.

    ``owner_address`` doubles as the storage bucket for the identity's
    profile on the hub.
    """

    owner_address: str
    usernames: list[str] = field(default_factory=list)


class IdentityTracker(abc.ABC):
    """Receives confirmed usernames for the caller's identity collection."""

    @abc.abstractmethod
    def add_username(self, identity_index: int, domain_name: str) -> None:
        """Associate *domain_name* with the identity at *identity_index*."""


class LocalIdentities(IdentityTracker):
    """In-memory identity collection.

    Nothing is written to disk; the caller owns the list.
    """

    def __init__(self, identities: list[Identity] | None = None) -> None:
        self.identities: list[Identity] = identities if identities is not None else []

    def __getitem__(self, index: int) -> Identity:
        return self.identities[index]

    def __len__(self) -> int:
        return len(self.identities)

    def add_username(self, identity_index: int, domain_name: str) -> None:
        identity = self.identities[identity_index]
        if domain_name in identity.usernames:
            logger.debug("%s already tracked for identity %d", domain_name, identity_index)
            return
        identity.usernames.append(domain_name)
