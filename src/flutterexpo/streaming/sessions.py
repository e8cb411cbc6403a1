"""
Session Manager
Tracks live viewer connections and fans messages out to them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from ..core import SessionID, get_logger, new_session_id, safe_json_dumps, utc_timestamp
from ..monitoring import metrics_collector

logger = get_logger(__name__)


class Connection(Protocol):
    """Transport handle for one viewer (a FastAPI WebSocket satisfies it)."""

    async def send_text(self, data: str) -> None: ...

    async def close(self, code: int = 1000) -> None: ...


class SessionState(str, Enum):
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


@dataclass
class Session:
    """One live viewer connection."""

    session_id: SessionID
    connection: Connection
    state: SessionState = SessionState.CONNECTING
    connected_at: str = field(default_factory=utc_timestamp)

    @property
    def is_open(self) -> bool:
        return self.state is SessionState.OPEN


class SessionManager:
    """Manages open sessions for broadcasting"""

    def __init__(self) -> None:
        self.sessions: dict[str, Session] = {}

    def open(self, connection: Connection) -> Session:
        """Register a connection whose transport handshake has completed."""
        session = Session(session_id=new_session_id(), connection=connection)
        self.sessions[session.session_id] = session
        session.state = SessionState.OPEN
        metrics_collector.set_active_sessions(len(self.sessions))
        logger.info("session_opened", session_id=session.session_id, sessions=len(self.sessions))
        return session

    def close(self, session_id: str) -> None:
        """Remove a session; later sends and broadcasts skip it."""
        session = self.sessions.pop(session_id, None)
        if session is None:
            return
        session.state = SessionState.CLOSED
        metrics_collector.set_active_sessions(len(self.sessions))
        logger.info("session_closed", session_id=session_id, sessions=len(self.sessions))

    def get(self, session_id: str) -> Session | None:
        return self.sessions.get(session_id)

    def open_sessions(self) -> list[Session]:
        return [session for session in self.sessions.values() if session.is_open]

    def __len__(self) -> int:
        return len(self.sessions)

    async def send_to(self, session_id: str, message: dict[str, Any]) -> bool:
        """
        Send a message to a single session.

        Returns:
            True if the message was handed to the transport
        """
        session = self.sessions.get(session_id)
        if session is None or not session.is_open:
            return False
        return await self._deliver(session, safe_json_dumps(message))

    async def broadcast(self, message: dict[str, Any]) -> int:
        """
        Send one message to every open session.

        The message is serialized once so every session receives identical
        text. Sessions that close or fail during the fan-out are skipped; a failed
        session is removed and its transport closed.

        Returns:
            Number of sessions the message was delivered to
        """
        text = safe_json_dumps(message)
        delivered = 0
        for session in self.open_sessions():
            # May have closed earlier in this fan-out
            if not session.is_open:
                continue
            if await self._deliver(session, text):
                delivered += 1
        return delivered

    async def _deliver(self, session: Session, text: str) -> bool:
        try:
            await session.connection.send_text(text)
            return True
        except Exception as e:
            logger.warning("send_failed", session_id=session.session_id, error=str(e))
            self.close(session.session_id)
            await self._close_transport(session)
            return False

    async def _close_transport(self, session: Session) -> None:
        try:
            await session.connection.close()
        except Exception as e:
            logger.debug("transport_close_failed", session_id=session.session_id, error=str(e))
