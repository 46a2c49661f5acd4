"""
Notification channel between the game engine and its front ends.

- Event:               one tagged notification (state changed / error / win).
- NotificationChannel: ordered subscriber list + publish().
- Executors decide WHERE and WHEN delivery happens:
    SerialExecutor  - caller's thread, never re-entrant (default)
    ThreadExecutor  - one dedicated delivery thread
    ManualExecutor  - held until the host loop calls drain()

Every executor is single-consumer: deliveries run one at a time, in publish
order, so a subscriber never observes the engine halfway through an update
and two callbacks never run at once.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, List, Optional

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    STATE_CHANGED = "state_changed"
    ERROR = "error"
    WIN = "win"


@dataclass(frozen=True)
class Event:
    """
    A transient notification. Never stored by the channel.

    `code` carries the validation failure for ERROR events
    (a weaver.engine.validation.ErrorCode); it is None otherwise.
    """
    kind: EventKind
    message: str = ""
    code: Optional[Enum] = None

    @property
    def is_notice(self) -> bool:
        return self.kind is not EventKind.STATE_CHANGED


STATE_CHANGED = Event(EventKind.STATE_CHANGED)

Handler = Callable[[Event], None]
Task = Callable[[], None]


# ---- Executors ----

class SerialExecutor:
    """
    Run tasks immediately on the calling thread, except that a task submitted
    from inside a running task is queued and run once the current one ends.
    """

    def __init__(self):
        self._pending: Deque[Task] = deque()
        self._running = False

    def submit(self, task: Task) -> None:
        self._pending.append(task)
        if self._running:
            return
        self._running = True
        try:
            while self._pending:
                self._pending.popleft()()
        finally:
            self._running = False


class ManualExecutor:
    """Queue tasks until the owner pumps them with drain()."""

    def __init__(self):
        self._pending: Deque[Task] = deque()
        self._lock = threading.Lock()

    def submit(self, task: Task) -> None:
        with self._lock:
            self._pending.append(task)

    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    def drain(self) -> int:
        """Run everything queued so far (and anything queued meanwhile). Returns count run."""
        ran = 0
        while True:
            with self._lock:
                if not self._pending:
                    return ran
                task = self._pending.popleft()
            task()
            ran += 1


class ThreadExecutor:
    """
    Deliver on one background thread, like a UI toolkit's event thread.

    Handlers read engine state through its accessors when they run, not when
    the event was published. With this executor, engine mutations must be
    run on the same thread too (submit them here, as a GUI posts work to its
    event thread); otherwise a handler can observe a half-finished update.
    """

    def __init__(self, name: str = "weaver-events"):
        self._pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix=name)

    def submit(self, task: Task) -> None:
        self._pool.submit(task)

    def flush(self, timeout: float | None = None) -> None:
        """Block until every task submitted before this call has run."""
        self._pool.submit(lambda: None).result(timeout=timeout)

    def shutdown(self) -> None:
        self._pool.shutdown(wait=True)


# ---- Channel ----

class NotificationChannel:
    """
    Publish/subscribe hub. Handlers receive every Event published after they
    subscribed, in subscription order, through the configured executor.
    """

    def __init__(self, executor=None):
        self.executor = executor if executor is not None else SerialExecutor()
        self._handlers: List[Handler] = []
        self._lock = threading.Lock()

    def subscribe(self, handler: Handler) -> Handler:
        """Add a handler. Returns it so this can be used as a decorator."""
        with self._lock:
            self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: Handler) -> bool:
        """Remove a handler; False if it wasn't subscribed."""
        with self._lock:
            try:
                self._handlers.remove(handler)
            except ValueError:
                return False
        return True

    def clear(self) -> None:
        """Drop every subscriber (e.g. when the front end closes)."""
        with self._lock:
            self._handlers.clear()

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._handlers)

    def publish(self, event: Event) -> None:
        """Hand the event to the executor; returns without waiting for delivery."""
        # Snapshot now: late subscribers must not see this event.
        with self._lock:
            targets = tuple(self._handlers)
        if not targets:
            return
        self.executor.submit(lambda: self._deliver(event, targets))

    def _deliver(self, event: Event, targets) -> None:
        for handler in targets:
            try:
                handler(event)
            except Exception:
                logger.exception("Subscriber %r failed on %s", handler, event.kind.value)
