"""
Message Dispatcher
Routes inbound frames to handlers by message type.
"""

from typing import Mapping, Protocol

from ..context import BridgeContext
from ..core import BridgeError, Settings, get_logger, LogContext
from ..monitoring import metrics_collector
from ..streaming import Connection, Session
from .messages import (
    Envelope,
    MessageType,
    connection_ack,
    error_message,
    parse_envelope,
    pong,
)

logger = get_logger(__name__)


class MessageHandler(Protocol):
    """Handles one inbound message type."""

    async def handle(self, context: BridgeContext, envelope: Envelope, session: Session) -> None: ...


class MessageDispatcher:
    """
    Entry point for everything a viewer connection does: open, message, close.

    ``handlers`` maps message types to handlers. PING is answered here;
    types without a handler are ignored.
    """

    def __init__(self, handlers: Mapping[MessageType, MessageHandler], settings: Settings) -> None:
        self.handlers = dict(handlers)
        self.settings = settings

    async def connect(self, context: BridgeContext, connection: Connection) -> Session:
        """Open a session and acknowledge it with its ID and feature list."""
        session = context.sessions.open(connection)
        await context.sessions.send_to(
            session.session_id,
            connection_ack(session.session_id, self.settings.supported_features),
        )
        return session

    def disconnect(self, context: BridgeContext, session_id: str) -> None:
        context.sessions.close(session_id)

    async def dispatch(self, context: BridgeContext, session_id: str, raw: str | bytes) -> None:
        """
        Handle one inbound frame from ``session_id``.

        Errors are reported to the sender only; the connection stays open.
        """
        session = context.sessions.get(session_id)
        if session is None or not session.is_open:
            logger.debug("message_for_closed_session", session_id=session_id)
            return

        try:
            envelope = parse_envelope(
                raw, self.settings.max_message_size, self.settings.max_json_depth
            )
        except BridgeError as e:
            logger.warning("parse_failed", session_id=session_id, error=str(e))
            await self.report(context, session_id, e)
            return

        metrics_collector.record_message(envelope.type)

        with LogContext(session_id=session_id, message_type=envelope.type):
            logger.debug("message_received")

            if envelope.type == MessageType.PING.value:
                await context.sessions.send_to(session_id, pong())
                return

            handler = self._handler_for(envelope.type)
            if handler is None:
                logger.debug("unhandled_message_type")
                return

            try:
                await handler.handle(context, envelope, session)
            except BridgeError as e:
                logger.warning("handler_failed", code=e.code, error=e.message)
                await self.report(context, session_id, e)
            except Exception as e:
                logger.error("handler_crashed", error=str(e), exc_info=True)
                await self.report(context, session_id, BridgeError("Internal error"))

    async def report(self, context: BridgeContext, session_id: str, error: BridgeError) -> None:
        """Send an ERROR message for ``error`` to one session."""
        metrics_collector.record_error(error.code)
        await context.sessions.send_to(
            session_id, error_message(error.code, error.message, error.details)
        )

    def _handler_for(self, msg_type: str) -> MessageHandler | None:
        try:
            return self.handlers.get(MessageType(msg_type))
        except ValueError:
            return None
