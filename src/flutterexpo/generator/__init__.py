"""
Source Generator
Turns UI AST documents into editable React screens, stylesheets and routes.
"""

from .generator import ReactCodeGenerator
from .jsx import JSXRenderer, inline_style
from .naming import component_name, css_class_name, to_camel_case, to_kebab_case
from .routing import update_manifest
from .styles import render_stylesheet

__all__ = [
    "ReactCodeGenerator",
    "JSXRenderer",
    "inline_style",
    "component_name",
    "css_class_name",
    "to_camel_case",
    "to_kebab_case",
    "update_manifest",
    "render_stylesheet",
]
