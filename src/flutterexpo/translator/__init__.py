"""
UI AST Translator
Converts Flutter widget trees into React component specifications.
"""

from .visitor import NodeVisitor
from .translator import (
    TranslationResult,
    TranslationVisitor,
    UITranslator,
    translate_props,
    translate_style,
)

__all__ = [
    "NodeVisitor",
    "TranslationResult",
    "TranslationVisitor",
    "UITranslator",
    "translate_props",
    "translate_style",
]
