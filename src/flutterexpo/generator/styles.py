"""Stylesheet rendering."""

from ..models import UIASTNode
from .naming import css_class_name, css_value, to_kebab_case

ROOT_RULE = {
    "min-height": "100vh",
    "display": "flex",
    "flex-direction": "column",
}


def collect_rules(tree: UIASTNode) -> dict[str, dict[str, str]]:
    """
    One declaration block per distinct widget type, in document (pre-order) order.

    A type seen again only contributes properties its block does not have yet.
    """
    rules: dict[str, dict[str, str]] = {}

    def walk(node: UIASTNode) -> None:
        declarations = rules.setdefault(css_class_name(node.type), {})
        for key, value in (node.style or {}).items():
            declarations.setdefault(to_kebab_case(key), css_value(value))
        for child in node.children or []:
            walk(child)

    walk(tree)
    return rules


def render_rule(selector: str, declarations: dict[str, str]) -> str:
    body = "".join(f"  {prop}: {value};\n" for prop, value in declarations.items())
    return f".{selector} {{\n{body}}}\n\n"


def render_stylesheet(tree: UIASTNode, component: str, root_class: str) -> str:
    """Full stylesheet for a screen: header, root wrapper rule, then widget rules."""
    css = f"/* Auto-generated styles for {component} */\n\n"
    css += render_rule(root_class, ROOT_RULE)
    for selector, declarations in collect_rules(tree).items():
        css += render_rule(selector, declarations)
    return css
