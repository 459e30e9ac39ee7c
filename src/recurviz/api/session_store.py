"""
In-Memory Session Store for playback controllers.

Each session owns one :class:`PlaybackController` (live state, history and
player settings), identified by a UUID. This is a volatile store: sessions
are lost when the server restarts, which matches the "no persistence across
sessions" scope of the visualizer.
"""

from __future__ import annotations

import uuid
from typing import ClassVar

from recurviz.playback.controller import PlaybackController


class SessionStore:
    """
    A simple dictionary-backed store of playback controllers.
    """

    # Singleton instance placeholder (initialized in app startup)
    _instance: ClassVar[SessionStore | None] = None

    def __init__(self) -> None:
        self._sessions: dict[str, PlaybackController] = {}

    @classmethod
    def get_instance(cls) -> SessionStore:
        """Accessor for the global singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def create_session(self) -> str:
        """
        Register a fresh controller and return its session id.

        Returns
        -------
        str
            The generated UUID4 string for the new session.
        """
        session_id = str(uuid.uuid4())
        self._sessions[session_id] = PlaybackController()
        return session_id

    def get(self, session_id: str) -> PlaybackController | None:
        """Retrieve a session's controller, or None if not found."""
        return self._sessions.get(session_id)

    def clear(self) -> None:
        self._sessions.clear()


# Global accessor for convenience
def get_session_store() -> SessionStore:
    return SessionStore.get_instance()


__all__ = ["SessionStore", "get_session_store"]
