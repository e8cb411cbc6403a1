"""
Data Models
UI AST input, component specification output and application configuration.
"""

from .ast import WireModel, UIASTNode, UIASTDocument, EventBinding, AssetReference
from .components import ComponentSpec
from .app_config import AppConfig, Theme, ColorScheme, TextTheme

__all__ = [
    "WireModel",
    "UIASTNode",
    "UIASTDocument",
    "EventBinding",
    "AssetReference",
    "ComponentSpec",
    "AppConfig",
    "Theme",
    "ColorScheme",
    "TextTheme",
]
