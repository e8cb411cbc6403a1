"""
Bridge Protocol Messages
Envelope parsing and outbound message builders.

Every frame is a JSON object::

    {"type": "...", "timestamp": "<ISO-8601>", "sessionId": "...", "data": {...}}
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ..core import (
    ErrorCode,
    JSONParseError,
    ParseError,
    ValidationError,
    parse_json_object,
    utc_timestamp,
    validate_json_depth,
    validate_json_size,
)
from ..models import AppConfig, UIASTDocument


class MessageType(str, Enum):
    """Protocol message types"""

    UI_UPDATE = "UI_UPDATE"
    STATE_DELTA = "STATE_DELTA"
    EVENT = "EVENT"
    APP_CONFIG = "APP_CONFIG"
    COMPONENT_SPEC = "COMPONENT_SPEC"
    CONNECTION_ACK = "CONNECTION_ACK"
    ERROR = "ERROR"
    PING = "PING"
    PONG = "PONG"


class Envelope(BaseModel):
    """Inbound message envelope. ``type`` is kept as a plain string so unknown types parse."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    type: str = Field(..., min_length=1)
    timestamp: str | None = None
    session_id: str | None = None
    data: dict[str, Any] | None = None


def parse_envelope(raw: str | bytes, max_size: int, max_depth: int) -> Envelope:
    """
    Parse an inbound frame.

    Raises:
        ParseError: If the frame is oversized, too deep, not JSON, or not an envelope
    """
    try:
        validate_json_size(raw, max_size, "Message")
        payload = parse_json_object(raw)
        validate_json_depth(payload, max_depth)
        return Envelope.model_validate(payload)
    except (JSONParseError, ValidationError) as e:
        raise ParseError("Invalid JSON message", details={"reason": str(e)}) from e
    except PydanticValidationError as e:
        raise ParseError("Invalid message envelope", details={"errors": describe_errors(e)}) from e


def describe_errors(error: PydanticValidationError) -> list[str]:
    """Flatten pydantic errors into ``loc: msg`` strings safe to send on the wire."""
    return [
        f"{'.'.join(str(part) for part in item['loc']) or '<root>'}: {item['msg']}"
        for item in error.errors()
    ]


def build_message(
    msg_type: MessageType,
    data: dict[str, Any] | None = None,
    session_id: str | None = None,
) -> dict[str, Any]:
    message: dict[str, Any] = {"type": msg_type.value, "timestamp": utc_timestamp()}
    if session_id:
        message["sessionId"] = session_id
    if data is not None:
        message["data"] = data
    return message


def connection_ack(session_id: str, supported_features: list[str]) -> dict[str, Any]:
    return build_message(
        MessageType.CONNECTION_ACK,
        {"sessionId": session_id, "supportedFeatures": list(supported_features)},
    )


def pong() -> dict[str, Any]:
    return build_message(MessageType.PONG)


def error_message(
    code: str = ErrorCode.INTERNAL_ERROR,
    message: str = "Internal error",
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    data: dict[str, Any] = {"code": code, "message": message}
    if details:
        data["details"] = details
    return build_message(MessageType.ERROR, data)


def app_config_message(config: AppConfig, session_id: str | None = None) -> dict[str, Any]:
    return build_message(MessageType.APP_CONFIG, config.to_wire(), session_id)


def component_spec_message(
    document: UIASTDocument,
    components: dict[str, Any],
    app_config: AppConfig | None,
    session_id: str | None = None,
) -> dict[str, Any]:
    return build_message(
        MessageType.COMPONENT_SPEC,
        {
            "screenId": document.screen_id,
            "route": document.route,
            "language": document.language,
            "components": components,
            "timestamp": utc_timestamp(),
            "appConfig": app_config.to_wire() if app_config else None,
        },
        session_id,
    )
