"""Fast JSON codec for WebSocket frames."""

from typing import Any
import json

import msgspec
import orjson


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


_decoder = msgspec.json.Decoder()


def parse_json_object(text: str | bytes) -> dict[str, Any]:
    """
    Decode a frame that must hold a single JSON object.

    Args:
        text: Raw frame payload

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If the payload is not valid JSON or not an object
    """
    raw = text.encode("utf-8") if isinstance(text, str) else text

    try:
        result = _decoder.decode(raw)
    except msgspec.DecodeError as e:
        raise JSONParseError(f"Invalid JSON: {e}", e) from e

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected JSON object, got {type(result).__name__}")
    return result


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    # Use orjson for compact output (fastest)
    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

    # Use stdlib for pretty-printed output or as fallback (most compatible)
    return json.dumps(obj, indent=indent if indent > 0 else None, ensure_ascii=False)
