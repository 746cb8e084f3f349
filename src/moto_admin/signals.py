"""
In-process signal bus and the cross-process storage watcher.

Listeners subscribe explicitly and get back a function that removes them,
so a subscriber's lifetime is visible at the call site.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional

from moto_admin.logging_utils import get_logger

AUTH_INVALID_TOKEN = "auth:invalid-token"
STORAGE_CHANGED = "storage"

Handler = Callable[..., None]

logger = get_logger(__name__)


class SignalBus:
    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def subscribe(self, name: str, handler: Handler) -> Callable[[], None]:
        """Register a handler for a signal. Returns a cleanup function."""
        self._handlers.setdefault(name, []).append(handler)

        def unsubscribe() -> None:
            try:
                self._handlers.get(name, []).remove(handler)
            except ValueError:
                pass

        return unsubscribe

    def emit(self, name: str, **payload: Any) -> None:
        # Copy so handlers may unsubscribe while being dispatched.
        for handler in list(self._handlers.get(name, [])):
            try:
                handler(**payload)
            except Exception:
                logger.exception("signal_handler_failed", signal=name)

    def listener_count(self, name: str) -> int:
        return len(self._handlers.get(name, []))


class StorageWatcher:
    """Polls the session file and emits STORAGE_CHANGED when another process writes it."""

    def __init__(self, store: Any, signals: SignalBus, interval: float = 1.0):
        self._store = store
        self._signals = signals
        self._interval = interval
        self._task: Optional[asyncio.Task[None]] = None
        self._last = store.fingerprint()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._last = self._store.fingerprint()
        self._store.consume_own_change(self._last)
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    def poll(self) -> bool:
        """Check once. Returns True if a change was seen and broadcast."""
        current = self._store.fingerprint()
        if current == self._last:
            return False
        self._last = current
        if self._store.consume_own_change(current):
            return False
        logger.debug("storage_changed_externally", path=str(self._store.path))
        self._signals.emit(STORAGE_CHANGED, external=True)
        return True

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self.poll()
