"""Event Registry: synchronous named-event emitter with one-shot listeners."""

from .config import DEFAULT_MAX_LISTENERS, EmitterConfig
from .emitter import EventEmitter
from .exceptions import EventRegistryError, MaxListenersExceededError
from .models import (
    CallbackKind,
    CallbackRecord,
    InsertPosition,
    RegistrationResult,
)

__all__ = [
    "EventEmitter",
    "EmitterConfig",
    "DEFAULT_MAX_LISTENERS",
    "CallbackKind",
    "CallbackRecord",
    "InsertPosition",
    "RegistrationResult",
    "EventRegistryError",
    "MaxListenersExceededError",
]
