"""Data models for the event registry."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

from .exceptions import MaxListenersExceededError

Listener = Callable[[Any], None]


class CallbackKind(Enum):
    ON = "on"
    ONCE = "once"


class InsertPosition(Enum):
    APPEND = "append"
    PREPEND = "prepend"


class CallbackRecord(BaseModel):
    """A registered listener: how long it lives and what to call.

    The record keeps a plain reference to the caller's function. Keeping
    that function usable while it is registered is up to the caller.
    """

    model_config = ConfigDict(frozen=True)

    kind: CallbackKind = CallbackKind.ON
    callback: Listener

    @property
    def is_once(self) -> bool:
        return self.kind == CallbackKind.ONCE


class RegistrationResult(BaseModel):
    """Outcome of a non-raising registration attempt."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    event: str
    count: int
    error: MaxListenersExceededError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
