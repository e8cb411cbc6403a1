"""
Bridge Protocol
JSON envelope definitions and the dispatch table.
"""

from .messages import (
    Envelope,
    MessageType,
    app_config_message,
    build_message,
    component_spec_message,
    connection_ack,
    describe_errors,
    error_message,
    parse_envelope,
    pong,
)
from .dispatch import MessageDispatcher, MessageHandler

__all__ = [
    "Envelope",
    "MessageType",
    "app_config_message",
    "build_message",
    "component_spec_message",
    "connection_ack",
    "describe_errors",
    "error_message",
    "parse_envelope",
    "pong",
    "MessageDispatcher",
    "MessageHandler",
]
