"""Identifier and literal helpers for generated React sources."""

import re
from typing import Any

from ..core import safe_json_dumps

COMPONENT_SUFFIX = "Screen"
CSS_CLASS_PREFIX = "flutter-"

_UPPER = re.compile(r"([A-Z])")
_DASH_LOWER = re.compile(r"-([a-z])")


def capitalize_first(value: str) -> str:
    """Upper-case the first character only ("homeScreen" -> "HomeScreen")."""
    return value[:1].upper() + value[1:]


def component_name(screen_id: str) -> str:
    """
    Derive the React component name for a screen.

    ``home_screen`` -> ``HomeScreenScreen``
    """
    return "".join(capitalize_first(part) for part in screen_id.split("_")) + COMPONENT_SUFFIX


def to_kebab_case(value: str) -> str:
    """``backgroundColor`` -> ``background-color``, ``AppBar`` -> ``app-bar``."""
    kebab = _UPPER.sub(r"-\1", value).lower()
    return kebab[1:] if kebab.startswith("-") else kebab


def to_camel_case(value: str) -> str:
    """``background-color`` -> ``backgroundColor``; camelCase input is unchanged."""
    return _DASH_LOWER.sub(lambda match: match.group(1).upper(), value)


def css_class_name(name: str) -> str:
    """Deterministic class name for a widget type or screen component."""
    return CSS_CLASS_PREFIX + to_kebab_case(name)


def js_literal(value: Any) -> str:
    """Render a Python value as a JavaScript literal (strings single-quoted)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
        return f"'{escaped}'"
    if isinstance(value, (int, float)):
        return repr(value)
    return safe_json_dumps(value)


def css_value(value: Any) -> str:
    """Render a style value for a stylesheet declaration."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def jsx_attribute(name: str, value: Any) -> str:
    """Quoted JSX attribute."""
    text = str(value).replace('"', "&quot;")
    return f'{name}="{text}"'
