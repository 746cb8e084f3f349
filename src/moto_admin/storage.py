"""
Durable session storage — the bearer token and a cached admin profile.

SessionStore is the only code that reads or writes the session file. The
mutation API is deliberately narrow (save / clear) so the token and profile
always change together.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from moto_admin.logging_utils import get_logger

logger = get_logger(__name__)

Fingerprint = Optional[tuple[int, int]]


class StoredSession(BaseModel):
    token: Optional[str] = None
    user: Optional[dict[str, Any]] = None


class SessionStore:
    def __init__(self, path: Path):
        self._path = Path(path)
        # State left by our own last save/clear; the watcher consumes it once.
        self._own_change: Fingerprint = None
        self._own_change_pending = False

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> StoredSession:
        try:
            return StoredSession.model_validate(json.loads(self._path.read_text()))
        except (FileNotFoundError, json.JSONDecodeError, ValidationError):
            return StoredSession()

    @property
    def token(self) -> Optional[str]:
        return self.load().token or None

    @property
    def user(self) -> Optional[dict[str, Any]]:
        return self.load().user

    def save(self, token: str, user: Optional[dict[str, Any]] = None) -> None:
        self._write(StoredSession(token=token, user=user))
        logger.debug("session_saved", path=str(self._path))

    def clear(self) -> None:
        """Drop token and profile. Safe to call when nothing is stored."""
        if not self._path.exists():
            return
        self._path.unlink(missing_ok=True)
        self._mark_own_change()
        logger.debug("session_cleared", path=str(self._path))

    def fingerprint(self) -> Fingerprint:
        try:
            st = self._path.stat()
        except FileNotFoundError:
            return None
        return (st.st_mtime_ns, st.st_size)

    def consume_own_change(self, current: Fingerprint) -> bool:
        """True, once, if `current` is the state our last save or clear produced."""
        pending, self._own_change_pending = self._own_change_pending, False
        return pending and current == self._own_change

    def _write(self, session: StoredSession) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(session.model_dump_json(indent=2))
        os.replace(tmp, self._path)
        self._mark_own_change()

    def _mark_own_change(self) -> None:
        self._own_change = self.fingerprint()
        self._own_change_pending = True
