"""Flutter widget to React element mappings."""

from .registry import (
    FALLBACK_TAG,
    BUILTIN_MAPPINGS,
    DuplicateMappingError,
    MappingEntry,
    MappingRegistry,
    WidgetKind,
)

__all__ = [
    "FALLBACK_TAG",
    "BUILTIN_MAPPINGS",
    "DuplicateMappingError",
    "MappingEntry",
    "MappingRegistry",
    "WidgetKind",
]
