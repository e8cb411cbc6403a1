"""JSX rendering of UI AST nodes."""

from typing import Any

from ..core import safe_json_dumps
from ..mapping import FALLBACK_TAG, MappingEntry, MappingRegistry
from ..models import UIASTNode
from ..translator import NodeVisitor
from .naming import css_class_name, js_literal, jsx_attribute, to_camel_case

BASE_INDENT_LEVEL = 3


def inline_style(style: dict[str, Any] | None) -> str | None:
    """Object literal for a ``style={...}`` attribute, or None when empty."""
    if not style:
        return None
    entries = [f"{to_camel_case(key)}: {js_literal(value)}" for key, value in style.items()]
    return "{" + ", ".join(entries) + "}"


class JSXRenderer(NodeVisitor[str]):
    """Renders a widget tree as indented JSX markup."""

    include_markup = True

    def __init__(self, registry: MappingRegistry) -> None:
        super().__init__(registry)
        self.depth = 0

    def visit_mapped(self, node: UIASTNode, entry: MappingEntry) -> str:
        return self._element(node, entry.target_tag, self._id_attributes(node))

    def visit_unmapped(self, node: UIASTNode) -> str:
        return self._element(node, FALLBACK_TAG, self._id_attributes(node))

    def visit_button(self, node: UIASTNode, entry: MappingEntry) -> str:
        attributes = self._id_attributes(node)
        if "disabled" in node.props:
            attributes.append(f"disabled={{{js_literal(node.props['disabled'])}}}")
        elif isinstance(node.props.get("enabled"), bool):
            attributes.append(f"disabled={{{js_literal(not node.props['enabled'])}}}")
        attributes.append("onClick={handleButtonClick}")
        return self._element(node, entry.target_tag, attributes)

    def visit_text_input(self, node: UIASTNode, entry: MappingEntry) -> str:
        attributes = self._id_attributes(node)
        attributes.append("onChange={handleTextChange}")
        if node.props.get("placeholder"):
            attributes.append(jsx_attribute("placeholder", node.props["placeholder"]))
        return self._element(node, entry.target_tag, attributes)

    def visit_image(self, node: UIASTNode, entry: MappingEntry) -> str:
        attributes = self._id_attributes(node)
        for name in ("src", "alt"):
            if node.props.get(name):
                attributes.append(jsx_attribute(name, node.props[name]))
        return self._element(node, entry.target_tag, attributes)

    def _id_attributes(self, node: UIASTNode) -> list[str]:
        return [jsx_attribute("id", node.id)] if node.id else []

    def _element(self, node: UIASTNode, tag: str, attributes: list[str]) -> str:
        indent = "  " * (self.depth + BASE_INDENT_LEVEL)
        opening = f"{indent}<{tag}"
        if attributes:
            opening += " " + " ".join(attributes)
        style = inline_style(node.style)
        if style:
            opening += f" style={{{style}}}"
        opening += f' className="{css_class_name(node.type)}"'

        if node.children:
            self.depth += 1
            try:
                body = "".join(self.visit(child) + "\n" for child in node.children)
            finally:
                self.depth -= 1
            return f"{opening}>\n{body}{indent}</{tag}>"

        if node.text:
            return f"{opening}>\n{indent}  {{{safe_json_dumps(node.text)}}}\n{indent}</{tag}>"

        return f"{opening} />"
