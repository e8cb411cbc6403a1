"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import (
    ErrorCode,
    BridgeError,
    ParseError,
    ConfigError,
    TranslationError,
    GenerationError,
)
from .validate import (
    ValidationError,
    ValidationResult,
    ComponentSpecValidator,
    validate_json_size,
    validate_json_depth,
    validate_component_spec,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import parse_json_object, safe_json_dumps, JSONParseError
from .id import SessionID, new_session_id
from .timestamps import utc_timestamp


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "BridgeError",
    "ParseError",
    "ConfigError",
    "TranslationError",
    "GenerationError",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ComponentSpecValidator",
    "validate_json_size",
    "validate_json_depth",
    "validate_component_spec",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "parse_json_object",
    "safe_json_dumps",
    "JSONParseError",
    # IDs
    "SessionID",
    "new_session_id",
    "utc_timestamp",
    # DI
    "create_container",
]
