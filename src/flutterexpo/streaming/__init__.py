"""Live viewer sessions."""

from .sessions import Connection, Session, SessionManager, SessionState

__all__ = ["Connection", "Session", "SessionManager", "SessionState"]
