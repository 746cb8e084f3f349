"""
Session guard — decides whether protected pages may render.

States: UNKNOWN (validation pending) -> AUTHENTICATED | UNAUTHENTICATED.
Every check takes a new generation number; a result is applied only if its
generation is still current and the guard is still mounted. The
auth:invalid-token signal bumps the generation too, so an invalidation
always beats a validation that resolves after it.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Any, Callable, NamedTuple, Optional

from moto_admin.auth import Auth
from moto_admin.logging_utils import get_logger
from moto_admin.signals import AUTH_INVALID_TOKEN, STORAGE_CHANGED, SignalBus

DEFAULT_LOGIN_PATH = "/login"

logger = get_logger(__name__)


class AuthState(str, Enum):
    UNKNOWN = "unknown"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class DecisionKind(str, Enum):
    LOADING = "loading"
    REDIRECT = "redirect"
    RENDER = "render"


class RouteDecision(NamedTuple):
    kind: DecisionKind
    location: Optional[str] = None
    # Redirects replace history so "back" cannot reopen a stale page.
    replace: bool = False


StateObserver = Callable[[AuthState], None]


class SessionGuard:
    def __init__(self, auth: Auth, signals: SignalBus, login_path: str = DEFAULT_LOGIN_PATH):
        self._auth = auth
        self._signals = signals
        self._login_path = login_path
        self._state = AuthState.UNKNOWN
        self._generation = 0
        self._mounted = False
        self._unsubscribers: list[Callable[[], None]] = []
        self._observers: list[StateObserver] = []
        self._pending: set[asyncio.Task[AuthState]] = set()

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def login_path(self) -> str:
        return self._login_path

    async def mount(self) -> AuthState:
        """Subscribe to session signals and run the first check."""
        if not self._mounted:
            self._mounted = True
            self._state = AuthState.UNKNOWN
            self._unsubscribers = [
                self._signals.subscribe(AUTH_INVALID_TOKEN, self._on_invalid_token),
                self._signals.subscribe(STORAGE_CHANGED, self._on_storage_changed),
            ]
        return await self.check()

    async def unmount(self) -> None:
        if not self._mounted:
            return
        self._mounted = False
        self._generation += 1
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        for task in list(self._pending):
            task.cancel()
        self._pending.clear()

    async def check(self) -> AuthState:
        self._generation += 1
        generation = self._generation
        if not self._auth.is_authenticated():
            self._apply(AuthState.UNAUTHENTICATED, generation)
            return self._state
        valid = await self._auth.validate_token()
        self._apply(AuthState.AUTHENTICATED if valid else AuthState.UNAUTHENTICATED, generation)
        return self._state

    def decide(self, path: str) -> RouteDecision:
        if path == self._login_path:
            return RouteDecision(DecisionKind.RENDER)
        if self._state is AuthState.UNKNOWN:
            return RouteDecision(DecisionKind.LOADING)
        if self._state is AuthState.UNAUTHENTICATED:
            return RouteDecision(DecisionKind.REDIRECT, self._login_path, replace=True)
        return RouteDecision(DecisionKind.RENDER)

    def on_change(self, observer: StateObserver) -> Callable[[], None]:
        self._observers.append(observer)

        def remove() -> None:
            try:
                self._observers.remove(observer)
            except ValueError:
                pass

        return remove

    def _apply(self, state: AuthState, generation: int) -> None:
        if not self._mounted or generation != self._generation:
            logger.debug("guard_stale_result_ignored", state=state.value, generation=generation)
            return
        if state is self._state:
            return
        logger.debug("guard_state_changed", previous=self._state.value, state=state.value)
        self._state = state
        for observer in list(self._observers):
            observer(state)

    def _on_invalid_token(self, **_: Any) -> None:
        if not self._mounted:
            return
        self._generation += 1
        self._apply(AuthState.UNAUTHENTICATED, self._generation)

    def _on_storage_changed(self, external: bool = False, **_: Any) -> None:
        # Only writes from other processes; our own writes go through Auth.
        if not self._mounted or not external:
            return
        task = asyncio.get_running_loop().create_task(self.check())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def __aenter__(self) -> "SessionGuard":
        await self.mount()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.unmount()
