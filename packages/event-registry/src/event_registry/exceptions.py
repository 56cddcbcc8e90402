"""Custom exceptions for the event registry."""


class EventRegistryError(Exception):
    """Base exception for event registry errors."""


class MaxListenersExceededError(EventRegistryError, OverflowError):
    """Raised when an event already holds more listeners than allowed.

    This is a leak-detection aid rather than a hard cap: the check runs
    against the count *before* insertion, so ``max_listeners + 1``
    listeners fit before the first rejection.
    """

    def __init__(self, event: str, count: int) -> None:
        super().__init__(
            "Possible EventEmitter memory leak detected. "
            f"{count} {event} listeners added to [EventEmitter]. "
            "Use emitter.set_max_listeners() to increase limit"
        )
        self.event = event
        self.count = count
