"""Registration notifications -- plain tagged records consumed by a store.

The orchestrator never holds state; it emits these records through a
``dispatch`` callable and the caller's store reduces them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


class NotificationType(str, Enum):
    """All registration notification tags.

    Using ``str, Enum`` so that
    ``NotificationType.PROFILE_UPLOADING == "PROFILE_UPLOADING"`` is True.
    """

    PROFILE_UPLOADING = "PROFILE_UPLOADING"
    PROFILE_UPLOAD_ERROR = "PROFILE_UPLOAD_ERROR"
    REGISTRATION_BEFORE_SUBMIT = "REGISTRATION_BEFORE_SUBMIT"
    REGISTRATION_SUBMITTING = "REGISTRATION_SUBMITTING"
    REGISTRATION_SUBMITTED = "REGISTRATION_SUBMITTED"
    REGISTRATION_ERROR = "REGISTRATION_ERROR"


TERMINAL_TYPES = frozenset({
    NotificationType.PROFILE_UPLOAD_ERROR,
    NotificationType.REGISTRATION_SUBMITTED,
    NotificationType.REGISTRATION_ERROR,
})


@dataclass(frozen=True)
class Notification:
    """A single registration state notification."""

    type: NotificationType
    error: Optional[BaseException] = None

    @property
    def is_terminal(self) -> bool:
        return self.type in TERMINAL_TYPES

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict:
        d: dict = {"type": self.type.value}
        if self.error is not None:
            d["error"] = str(self.error)
        return d


Dispatch = Callable[[Notification], None]


# -- Action creators ---------------------------------------------------------

def profile_uploading() -> Notification:
    return Notification(NotificationType.PROFILE_UPLOADING)


def profile_upload_error(error: BaseException) -> Notification:
    return Notification(NotificationType.PROFILE_UPLOAD_ERROR, error)


def registration_before_submit() -> Notification:
    return Notification(NotificationType.REGISTRATION_BEFORE_SUBMIT)


def registration_submitting() -> Notification:
    return Notification(NotificationType.REGISTRATION_SUBMITTING)


def registration_submitted() -> Notification:
    return Notification(NotificationType.REGISTRATION_SUBMITTED)


def registration_error(error: BaseException) -> Notification:
    return Notification(NotificationType.REGISTRATION_ERROR, error)


class NotificationLog:
    """A dispatch sink that records notifications in emission order.

    Optionally forwards each notification to another sink.
    """

    def __init__(self, forward: Dispatch | None = None) -> None:
        self._items: list[Notification] = []
        self._forward = forward

    def __call__(self, notification: Notification) -> None:
        self._items.append(notification)
        if self._forward is not None:
            self._forward(notification)

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def types(self) -> list[NotificationType]:
        return [n.type for n in self._items]

    @property
    def terminal(self) -> Notification | None:
        """The last terminal notification, if one was emitted."""
        for notification in reversed(self._items):
            if notification.is_terminal:
                return notification
        return None
