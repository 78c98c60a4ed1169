"""Cancellation and deadline context for rule generation."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field

from slirules.core.errors import GenerationCancelledError


@dataclass
class GenerationContext:
    """Carries a cancel flag and an optional deadline.

    The deadline is a ``time.monotonic()`` timestamp.
    """

    cancel_event: threading.Event = field(default_factory=threading.Event)
    deadline: float | None = None

    @classmethod
    def with_timeout(cls, seconds: float) -> GenerationContext:
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def check(self) -> None:
        """Raise ``GenerationCancelledError`` if cancelled or past the deadline."""
        if self.cancelled:
            raise GenerationCancelledError("rule generation cancelled")
        if self.expired:
            raise GenerationCancelledError("rule generation deadline exceeded")


def background() -> GenerationContext:
    """Return a fresh context that is never cancelled."""
    return GenerationContext()
