"""Synchronous named-event emitter with one-shot listeners."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Callable, Generic, TypeVar

from .config import DEFAULT_MAX_LISTENERS, EmitterConfig
from .exceptions import MaxListenersExceededError
from .models import CallbackKind, CallbackRecord, InsertPosition, RegistrationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _discard(records: list[CallbackRecord], record: CallbackRecord) -> None:
    # Records compare by value; only the exact object that fired may go.
    for index, other in enumerate(records):
        if other is record:
            del records[index]
            return


class EventEmitter(Generic[T]):
    """Synchronous event emitter with named events.

    Every listener on one emitter receives the same payload type ``T``.
    Listeners run in list order; ``once`` listeners are dropped right after
    their first call. Not thread-safe.
    """

    def __init__(
        self,
        max_listeners: int | None = None,
        *,
        config: EmitterConfig | None = None,
    ) -> None:
        if max_listeners is None:
            max_listeners = (
                config.max_listeners if config is not None else DEFAULT_MAX_LISTENERS
            )
        self._max_listeners = max_listeners
        self._events: dict[str, list[CallbackRecord]] = {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(events={self.event_names()!r}, "
            f"max_listeners={self._max_listeners})"
        )

    # ── Registration ──

    def add(
        self,
        event: str,
        callback: Callable[[T], None],
        *,
        kind: CallbackKind = CallbackKind.ON,
        position: InsertPosition = InsertPosition.APPEND,
    ) -> RegistrationResult:
        """Register a listener without raising.

        A rejected registration comes back with ``error`` set and leaves the
        emitter untouched.
        """
        record = CallbackRecord(kind=kind, callback=callback)
        records = self._events.get(event)

        if records is None:
            self._events[event] = [record]
            logger.debug("Registered %s listener on new event %r", kind.value, event)
            return RegistrationResult(event=event, count=1)

        # Strict comparison: max_listeners + 1 listeners fit.
        if len(records) > self._max_listeners:
            error = MaxListenersExceededError(event, len(records))
            logger.warning("%s", error)
            return RegistrationResult(event=event, count=len(records), error=error)

        if position == InsertPosition.PREPEND:
            records.insert(0, record)
        else:
            records.append(record)
        logger.debug(
            "Registered %s listener on %r (%s, %d total)",
            kind.value,
            event,
            position.value,
            len(records),
        )
        return RegistrationResult(event=event, count=len(records))

    def register(
        self,
        event: str,
        kind: CallbackKind,
        callback: Callable[[T], None],
        position: InsertPosition = InsertPosition.APPEND,
    ) -> EventEmitter[T]:
        """Register a listener, raising ``MaxListenersExceededError`` on overflow."""
        result = self.add(event, callback, kind=kind, position=position)
        if result.error is not None:
            raise result.error
        return self

    def on(self, event: str, callback: Callable[[T], None]) -> EventEmitter[T]:
        """Register a listener for an event."""
        return self.register(event, CallbackKind.ON, callback)

    add_listener = on

    def once(self, event: str, callback: Callable[[T], None]) -> EventEmitter[T]:
        """Register a listener that is removed after its first call."""
        return self.register(event, CallbackKind.ONCE, callback)

    def prepend_listener(
        self, event: str, callback: Callable[[T], None]
    ) -> EventEmitter[T]:
        return self.register(
            event, CallbackKind.ON, callback, InsertPosition.PREPEND
        )

    def prepend_once_listener(
        self, event: str, callback: Callable[[T], None]
    ) -> EventEmitter[T]:
        return self.register(
            event, CallbackKind.ONCE, callback, InsertPosition.PREPEND
        )

    # ── Dispatch ──

    def emit(self, event: str, payload: T) -> bool:
        """Call every listener of ``event`` with ``payload``.

        Returns False when the event has no listeners. The live list is
        walked by index, so listeners added or removed by a callback during
        the pass are seen by the rest of it.
        """
        records = self._events.get(event)
        if not records:
            return False

        i = 0
        while i < len(records):
            record = records[i]
            record.callback(payload)
            if record.is_once:
                # The callback may already have cleared or reshuffled the list.
                if i < len(records) and records[i] is record:
                    del records[i]
                else:
                    _discard(records, record)
            else:
                i += 1
        return True

    # ── Removal ──

    def remove_listener(self, event: str) -> EventEmitter[T]:
        """Remove every listener of an event."""
        records = self._events.pop(event, None)
        if records is not None:
            # Emptied in place so a pass in progress stops here.
            records.clear()
            logger.debug("Removed all listeners for %r", event)
        return self

    def remove_listeners(self, events: Iterable[str]) -> EventEmitter[T]:
        for event in events:
            self.remove_listener(event)
        return self

    def remove_all_listeners(self) -> EventEmitter[T]:
        for records in self._events.values():
            records.clear()
        self._events.clear()
        logger.debug("Removed all listeners")
        return self

    # ── Introspection ──

    def event_names(self) -> list[str]:
        return list(self._events)

    def listener_count(self, event: str) -> int:
        records = self._events.get(event)
        if records is None:
            return 0
        return len(records)

    def get_max_listeners(self) -> int:
        return self._max_listeners

    def set_max_listeners(self, n: int) -> None:
        """Change the ceiling. Existing lists are not trimmed."""
        self._max_listeners = n
