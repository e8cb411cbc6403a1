"""Routing manifest (App.tsx) updates.

The manifest is edited as text: both insertions are guarded by a plain
substring check against the current file content, not by parsing it.
"""

import re

IMPORT_BLOCK = re.compile(r"(?:import.*from.*;\n)+")
ROUTES_CLOSE = "</Routes>"
ROUTE_INDENT = " " * 12


def import_line(component: str) -> str:
    return f"import {{ {component} }} from './screens/{component}';"


def route_line(route: str, component: str) -> str:
    return f'{ROUTE_INDENT}<Route path="{route}" element={{<{component} />}} />'


def insert_import(content: str, line: str) -> str:
    """Add ``line`` right after the leading import block unless already present."""
    if line in content:
        return content
    match = IMPORT_BLOCK.search(content)
    position = match.end() if match else 0
    return content[:position] + line + "\n" + content[position:]


def insert_route(content: str, line: str) -> str:
    """Add ``line`` right before the closing routes marker unless already present."""
    if line.strip() in content:
        return content
    marker = content.find(ROUTES_CLOSE)
    if marker == -1:
        return content
    line_start = content.rfind("\n", 0, marker) + 1
    if content[line_start:marker].strip():
        # Marker shares its line with other markup
        return content[:marker] + line.strip() + content[marker:]
    # Marker on its own line: insert a full line, keeping its indentation
    return content[:line_start] + line + "\n" + content[line_start:]


def update_manifest(content: str, component: str, route: str) -> str:
    """Register ``component`` under ``route``; idempotent for identical input."""
    content = insert_import(content, import_line(component))
    return insert_route(content, route_line(route, component))
