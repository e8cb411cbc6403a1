"""Bridge error taxonomy.

Every error raised while handling an inbound message maps onto one wire
``ERROR`` code. None of them is fatal to the event loop or the session table.
"""

from typing import Any


class ErrorCode:
    """ERROR message codes."""

    PARSE_ERROR = "PARSE_ERROR"
    APP_CONFIG_ERROR = "APP_CONFIG_ERROR"
    TRANSLATION_ERROR = "TRANSLATION_ERROR"
    GENERATION_ERROR = "GENERATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class BridgeError(Exception):
    """Base class for errors reported back to a session."""

    code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ParseError(BridgeError):
    """Inbound frame is not a valid message envelope."""

    code = ErrorCode.PARSE_ERROR


class ConfigError(BridgeError):
    """Application configuration could not be applied."""

    code = ErrorCode.APP_CONFIG_ERROR


class TranslationError(BridgeError):
    """UI AST could not be translated into a component specification."""

    code = ErrorCode.TRANSLATION_ERROR


class GenerationError(BridgeError):
    """Writing generated source files failed."""

    code = ErrorCode.GENERATION_ERROR
