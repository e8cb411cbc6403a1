"""
FlutterExpo Bridge
Flutter UI AST -> live React component specs + editable React sources.
"""

__version__ = "0.1.0"
