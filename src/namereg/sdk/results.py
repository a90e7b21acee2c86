"""Stage results for the registration pipeline.

Each stage returns :class:`Ok` with its value or :class:`Err` with the
failure; the orchestrator checks which one it got and either continues or
emits the stage's terminal notification.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: BaseException


StageResult = Union[Ok[T], Err]
