"""UI AST to React Component Translator."""

from dataclasses import dataclass, field
from typing import Any

from ..core import get_logger
from ..mapping import FALLBACK_TAG, MappingEntry, MappingRegistry
from ..models import ComponentSpec, UIASTDocument, UIASTNode
from .visitor import NodeVisitor

logger = get_logger(__name__)


def translate_props(source: dict[str, Any], entry: MappingEntry) -> dict[str, Any]:
    """
    Map Flutter props onto React props.

    Default props come first, then every source prop that has no rename entry,
    copied verbatim. Renamed props are applied last so they win over a verbatim
    copy landing on the same key.
    """
    props = dict(entry.default_props)
    renames = entry.prop_renames or {}

    for key, value in source.items():
        if key not in renames:
            props[key] = value

    for source_key, target_key in renames.items():
        if source_key in source:
            props[target_key] = source[source_key]

    return props


def translate_style(
    source: dict[str, Any] | None, entry: MappingEntry
) -> dict[str, Any] | None:
    """Map Flutter style keys onto CSS-in-JS keys; unknown keys pass through."""
    if source is None:
        return None
    if entry.style_renames is None:
        return dict(source)

    renames = entry.style_renames
    style: dict[str, Any] = {}

    for key, value in source.items():
        if key not in renames:
            style[key] = value

    for source_key, target_key in renames.items():
        if source_key in source:
            style[target_key] = source[source_key]

    return style


@dataclass
class TranslationResult:
    """Translated tree plus the widget types that had no mapping."""

    spec: ComponentSpec
    unmapped_types: list[str] = field(default_factory=list)


class TranslationVisitor(NodeVisitor[ComponentSpec]):
    """Builds one ComponentSpec per UI AST node."""

    def __init__(self, registry: MappingRegistry) -> None:
        super().__init__(registry)
        self.unmapped_types: list[str] = []

    def visit_mapped(self, node: UIASTNode, entry: MappingEntry) -> ComponentSpec:
        return ComponentSpec(
            type=entry.target_tag,
            props=translate_props(node.props, entry),
            style=translate_style(node.style, entry),
            children=self.visit_children(node),
        )

    def visit_text(self, node: UIASTNode, entry: MappingEntry) -> ComponentSpec:
        spec = self.visit_mapped(node, entry)
        if node.text is not None:
            spec.props["children"] = node.text
        return spec

    def visit_button(self, node: UIASTNode, entry: MappingEntry) -> ComponentSpec:
        spec = self.visit_mapped(node, entry)
        enabled = node.props.get("enabled")
        if isinstance(enabled, bool):
            # Flutter enabled -> React disabled
            spec.props["disabled"] = not enabled
        return spec

    def visit_unmapped(self, node: UIASTNode) -> ComponentSpec:
        logger.warning("unmapped_widget", widget_type=node.type)
        self.unmapped_types.append(node.type)
        return ComponentSpec(
            type=FALLBACK_TAG,
            props={"className": f"unknown-{node.type.lower()}"},
            children=self.visit_children(node),
        )


class UITranslator:
    """Translates Flutter UI AST documents into React component specifications."""

    def __init__(self, registry: MappingRegistry) -> None:
        self.registry = registry

    def translate(self, document: UIASTDocument) -> ComponentSpec:
        """Translate the document's widget tree."""
        return self.translate_node(document.tree)

    def translate_node(self, node: UIASTNode) -> ComponentSpec:
        """Translate a single node and its subtree."""
        return TranslationVisitor(self.registry).visit(node)

    def translate_with_diagnostics(self, document: UIASTDocument) -> TranslationResult:
        """Translate and report every unmapped widget type encountered."""
        visitor = TranslationVisitor(self.registry)
        spec = visitor.visit(document.tree)
        return TranslationResult(spec=spec, unmapped_types=visitor.unmapped_types)
