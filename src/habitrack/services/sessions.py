"""In-memory session token store."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, replace
from threading import Lock
from typing import Dict, Optional

__all__ = ["SessionIdentity", "SessionStore"]


@dataclass(frozen=True, slots=True)
class SessionIdentity:
    """Snapshot of the user a token was issued to."""

    id: int
    name: str
    email: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email}


class SessionStore:
    """Thread-safe token → identity map.

    Tokens never expire; they live until logout, user deletion or process
    restart. One user may hold any number of tokens at once.
    """

    def __init__(self, token_bytes: int = 32) -> None:
        if token_bytes < 16:
            raise ValueError("token_bytes must be at least 16 (128 bits)")
        self._token_bytes = token_bytes
        self._sessions: Dict[str, SessionIdentity] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, token: object) -> bool:
        with self._lock:
            return token in self._sessions

    def issue(self, identity: SessionIdentity) -> str:
        """Generate a fresh token for ``identity`` and store it."""

        while True:
            token = secrets.token_urlsafe(self._token_bytes)
            with self._lock:
                if token not in self._sessions:
                    self._sessions[token] = identity
                    return token

    def get(self, token: str) -> Optional[SessionIdentity]:
        with self._lock:
            return self._sessions.get(token)

    def set(self, token: str, identity: SessionIdentity) -> None:
        with self._lock:
            self._sessions[token] = identity

    def delete(self, token: str) -> bool:
        """Remove ``token``; returns False when it was already gone."""

        with self._lock:
            return self._sessions.pop(token, None) is not None

    def refresh_user(self, user_id: int, *, name: str, email: str) -> int:
        """Rewrite the snapshot held by every token of ``user_id``."""

        with self._lock:
            tokens = [t for t, ident in self._sessions.items() if ident.id == user_id]
            for token in tokens:
                self._sessions[token] = replace(self._sessions[token], name=name, email=email)
            return len(tokens)

    def revoke_user(self, user_id: int) -> int:
        """Drop every token belonging to ``user_id``."""

        with self._lock:
            tokens = [t for t, ident in self._sessions.items() if ident.id == user_id]
            for token in tokens:
                del self._sessions[token]
            return len(tokens)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()
