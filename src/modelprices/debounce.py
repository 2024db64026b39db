"""Commit a value only after input has been quiet for a fixed delay."""
from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Protocol, TypeVar

T = TypeVar("T")

DEFAULT_DELAY = 0.3


class Timer(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Timer]


def _thread_timer(delay: float, fn: Callable[[], None]) -> Timer:
    timer = threading.Timer(delay, fn)
    timer.daemon = True
    return timer


class Debouncer(Generic[T]):
    """Holds the latest pushed value and commits it once input goes quiet.

    Every :meth:`push` cancels the pending timer and starts a new one, so a
    burst of pushes produces exactly one call to ``on_commit`` with the last
    value.
    """

    _NOTHING: Any = object()

    def __init__(
        self,
        on_commit: Callable[[T], None],
        delay: float = DEFAULT_DELAY,
        timer_factory: TimerFactory = _thread_timer,
    ) -> None:
        self._on_commit = on_commit
        self._delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Timer | None = None
        self._pending: Any = self._NOTHING
        self._generation = 0

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def has_pending(self) -> bool:
        with self._lock:
            return self._pending is not self._NOTHING

    @property
    def pending(self) -> T | None:
        with self._lock:
            return None if self._pending is self._NOTHING else self._pending

    def push(self, value: T) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation
            self._pending = value
            self._timer = self._timer_factory(
                self._delay, lambda: self._fire(generation)
            )
            self._timer.start()

    def flush(self) -> None:
        """Commit the pending value now, if there is one."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            value = self._take()
        if value is not self._NOTHING:
            self._on_commit(value)

    def cancel(self) -> None:
        """Drop the pending value without committing it."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._take()

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A timer that lost a race with push() must not commit.
            if generation != self._generation:
                return
            value = self._take()
        if value is not self._NOTHING:
            self._on_commit(value)

    def _take(self) -> Any:
        value = self._pending
        self._pending = self._NOTHING
        self._timer = None
        self._generation += 1
        return value
