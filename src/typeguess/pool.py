"""Reusable pool of guessers.

Guessing a wide table column by column creates and discards many guessers.
A ``GuesserPool`` keeps released instances for reuse; every instance is reset
on its way back so the next borrower never sees another column's state.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from typeguess.core.config import get_settings
from typeguess.core.logging import get_logger
from typeguess.guesser import Guesser
from typeguess.settings import GuessSettings

logger = get_logger(__name__)


def _default_max_retained() -> int:
    configured = get_settings().pool_max_retained
    if configured is not None:
        return configured
    return 2 * (os.cpu_count() or 1)


class GuesserPool:
    """Thread-safe pool handing out reset guessers.

    Only checkout and return are synchronised; a checked-out guesser belongs
    to one caller until released.
    """

    def __init__(
        self,
        max_retained: int | None = None,
        settings_factory: Callable[[], GuessSettings] | None = None,
    ):
        self.max_retained = _default_max_retained() if max_retained is None else max_retained
        if self.max_retained < 0:
            raise ValueError(f"max_retained must be non-negative, got {self.max_retained}")
        self._settings_factory = settings_factory or GuessSettings
        self._idle: list[Guesser] = []
        self._lock = threading.Lock()
        self._created = 0

    @property
    def idle_count(self) -> int:
        """Guessers waiting to be reused."""
        with self._lock:
            return len(self._idle)

    @property
    def created(self) -> int:
        """Guessers constructed by this pool so far."""
        return self._created

    def acquire(self) -> Guesser:
        """Hand out an idle guesser or build a new one. Never resets."""
        with self._lock:
            if self._idle:
                return self._idle.pop()
            self._created += 1
        return Guesser(self._settings_factory())

    def release(self, guesser: Guesser) -> None:
        """Reset ``guesser`` with fresh settings and keep it for reuse if there is room."""
        guesser.reset(self._settings_factory())
        with self._lock:
            if len(self._idle) < self.max_retained:
                self._idle.append(guesser)
                return
        logger.debug("guesser_discarded", max_retained=self.max_retained)

    @contextmanager
    def borrow(self) -> Iterator[Guesser]:
        """Context manager that acquires a guesser and always releases it."""
        guesser = self.acquire()
        try:
            yield guesser
        finally:
            self.release(guesser)


_default_pool: GuesserPool | None = None
_default_pool_lock = threading.Lock()


def default_pool() -> GuesserPool:
    """Process-wide pool using default settings."""
    global _default_pool
    with _default_pool_lock:
        if _default_pool is None:
            _default_pool = GuesserPool()
            logger.debug("default_pool_created", max_retained=_default_pool.max_retained)
        return _default_pool
