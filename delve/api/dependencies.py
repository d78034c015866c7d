"""FastAPI dependency injection for the single served session.

The lifespan in ``delve.api.app`` installs the SessionManager; routes take it
through ``Depends(get_session_manager)`` and turn a not-yet-started session
into a 503 with ``require_session``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException

from delve.api.session_manager import SessionManager

if TYPE_CHECKING:
    from delve.engine.session import GameSession

_session_manager: SessionManager | None = None


def set_session_manager(manager: SessionManager | None) -> None:
    global _session_manager
    _session_manager = manager


def get_session_manager() -> SessionManager:
    if _session_manager is None:
        raise RuntimeError("SessionManager not initialized; the app lifespan has not run.")
    return _session_manager


def require_session(session: GameSession | None) -> GameSession:
    """Return *session*, or raise 503 while the manager has none to serve."""
    if session is None:
        raise HTTPException(status_code=503, detail="Session not initialized yet.")
    return session
